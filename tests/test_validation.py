import pytest

from dotqueens.components.board import Board
from dotqueens.systems.validation import CONFLICT_MESSAGES, ConflictKind, blocked_cells


def place(board: Board, *positions):
    board.reset_markers()
    for row, col in positions:
        board.place_marker(row, col)
    return board.validate()


def test_empty_board_reports_missing_colours(quadrant_board):
    assert place(quadrant_board) == ConflictKind.COLORS


def test_two_markers_in_a_row(quadrant_board):
    assert place(quadrant_board, (0, 0), (0, 1)) == ConflictKind.ROWS_AND_COLUMNS


def test_two_markers_in_a_column(quadrant_board):
    assert place(quadrant_board, (0, 3), (2, 3)) == ConflictKind.ROWS_AND_COLUMNS


def test_row_conflict_wins_over_adjacency(quadrant_board):
    # (1,0)/(1,1) share a row and touch; (2,2) touches (1,1) diagonally too.
    assert place(quadrant_board, (1, 0), (1, 1), (2, 2)) == ConflictKind.ROWS_AND_COLUMNS


def test_diagonal_neighbours_report_adjacency(quadrant_board):
    assert place(quadrant_board, (0, 0), (1, 1)) == ConflictKind.ADJACENCY
    assert place(quadrant_board, (2, 1), (3, 0)) == ConflictKind.ADJACENCY


def test_adjacency_wins_over_colours(quadrant_board):
    # Both markers are red and touching.
    assert place(quadrant_board, (0, 1), (1, 0)) == ConflictKind.ADJACENCY


def test_separated_markers_with_missing_colours(quadrant_board):
    assert place(quadrant_board, (0, 1), (2, 0)) == ConflictKind.COLORS


def test_full_placement_with_a_repeated_colour():
    board = Board.from_colors([
        ["red", "red", "red", "red"],
        ["red", "blue", "blue", "red"],
        ["green", "green", "yellow", "yellow"],
        ["green", "green", "yellow", "yellow"],
    ])
    # Distinct rows/columns, nobody touching, but red is used twice and blue never.
    assert place(board, (0, 1), (1, 3), (2, 0), (3, 2)) == ConflictKind.COLORS


@pytest.mark.parametrize("solution", [[1, 3, 0, 2], [2, 0, 3, 1]])
def test_valid_placements_are_solved(quadrant_board, solution):
    assert place(quadrant_board, *enumerate(solution)) == ConflictKind.NONE


def test_every_conflict_has_a_message():
    assert set(CONFLICT_MESSAGES) == set(ConflictKind)
    assert CONFLICT_MESSAGES[ConflictKind.NONE] == ""


def test_blocked_cells_cover_row_column_colour_and_diagonals(quadrant_board):
    quadrant_board.place_marker(0, 1)
    blocked = blocked_cells(quadrant_board.cells)
    # row 0, column 1, the rest of red, and the diagonal (1,2)
    expected = {(0, 0), (0, 2), (0, 3), (1, 1), (2, 1), (3, 1), (1, 0), (1, 2)}
    assert blocked == expected
    assert (0, 1) not in blocked


def test_blocked_cells_empty_without_markers(quadrant_board):
    assert blocked_cells(quadrant_board.cells) == set()
