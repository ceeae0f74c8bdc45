"""Backtracking solver for the one-queen-per-row/column/colour puzzle."""
from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from dotqueens.utils.grid import Grid

if TYPE_CHECKING:
    from dotqueens.components.board import Board

Solution = List[int]


def find_solution(colors: Grid[str]) -> Optional[Solution]:
    """Return ``column_for_row`` for the first valid placement, or None.

    Rows are filled top to bottom and columns tried in ascending order, so the
    result is deterministic for a given colour grid. Adjacency is only checked
    against the previous row's column: queens two or more rows apart can never
    touch, so that single comparison covers the diagonal rule.
    """
    size = colors.rows
    solution: Solution = [0] * size
    used_columns = [False] * size
    used_colors: set[str] = set()
    # Last row each colour appears in. Once the search is past it with the
    # colour still unused, no queen can cover that colour any more.
    last_row: dict[str, int] = {}
    for (r, _c), color in colors.items():
        last_row[color] = r

    def place(row: int) -> bool:
        if row == size:
            return True
        if any(last_row[color] < row for color in last_row if color not in used_colors):
            return False
        for col in range(size):
            if used_columns[col]:
                continue
            if row > 0 and abs(solution[row - 1] - col) <= 1:
                continue
            color = colors[row, col]
            if color in used_colors:
                continue
            solution[row] = col
            used_columns[col] = True
            used_colors.add(color)
            if place(row + 1):
                return True
            used_columns[col] = False
            used_colors.discard(color)
        return False

    if size == 0 or not place(0):
        return None
    return solution


def solve(board: "Board") -> Optional[Solution]:
    """Solve the board's current colour layout without touching its markers."""
    return find_solution(board.color_grid())
