from dotqueens.components.board import Board
from dotqueens.systems.solver import find_solution, solve
from dotqueens.systems.validation import ConflictKind


def test_solver_returns_first_solution_in_search_order(quadrant_board):
    assert solve(quadrant_board) == [1, 3, 0, 2]


def test_solver_does_not_touch_markers(quadrant_board):
    quadrant_board.place_marker(0, 0)
    solve(quadrant_board)
    assert quadrant_board.markers() == [(0, 0)]


def test_unsolvable_layout_returns_none(unsolvable_board):
    assert solve(unsolvable_board) is None
    assert unsolvable_board.solve() is None
    assert unsolvable_board.markers() == []


def test_board_solve_places_the_solution(quadrant_board):
    quadrant_board.place_marker(0, 0)
    quadrant_board.place_marker(3, 3)
    solution = quadrant_board.solve()
    assert solution == [1, 3, 0, 2]
    assert quadrant_board.markers() == [(0, 1), (1, 3), (2, 0), (3, 2)]
    assert quadrant_board.validate() == ConflictKind.NONE


def test_row_stripes_are_solvable():
    colors = ["red", "blue", "green", "yellow", "purple"]
    board = Board.from_colors([[c] * 5 for c in colors])
    solution = find_solution(board.color_grid())
    assert solution is not None
    assert sorted(solution) == list(range(5))
    assert all(abs(a - b) > 1 for a, b in zip(solution, solution[1:]))


def test_three_by_three_has_no_solution():
    board = Board.from_colors([["red"] * 3, ["blue"] * 3, ["green"] * 3])
    assert board.solve() is None
