"""Classification of the current queen placement."""
from __future__ import annotations

from enum import Enum, auto
from typing import Dict, List, Set, Tuple

from dotqueens.components.cell import Cell
from dotqueens.utils.grid import Grid

Position = Tuple[int, int]


class ConflictKind(Enum):
    """Conflict categories, in the priority order validation reports them."""
    ROWS_AND_COLUMNS = auto()
    ADJACENCY = auto()
    COLORS = auto()
    NONE = auto()


CONFLICT_MESSAGES: Dict[ConflictKind, str] = {
    ConflictKind.ROWS_AND_COLUMNS: "Row/Column conflict!",
    ConflictKind.ADJACENCY: "Diagonal conflict!",
    ConflictKind.COLORS: "At least one Color has no Queen!",
    ConflictKind.NONE: "",
}


def marker_positions(cells: Grid[Cell]) -> List[Position]:
    return [pos for pos, cell in cells.items() if cell.has_marker]


def classify(cells: Grid[Cell]) -> ConflictKind:
    """Return the first conflict found; NONE means the puzzle is solved."""
    size = cells.rows
    for i in range(size):
        in_row = sum(1 for cell in cells.row(i) if cell.has_marker)
        in_col = sum(1 for cell in cells.column(i) if cell.has_marker)
        if in_row > 1 or in_col > 1:
            return ConflictKind.ROWS_AND_COLUMNS

    markers = marker_positions(cells)
    for row, col in markers:
        if any(cells[pos].has_marker for pos in cells.neighbors8(row, col)):
            return ConflictKind.ADJACENCY

    colors_used = {cells[pos].color for pos in markers}
    if len(colors_used) == size:
        return ConflictKind.NONE
    return ConflictKind.COLORS


def blocked_cells(cells: Grid[Cell]) -> Set[Position]:
    """Empty cells a new queen could not legally occupy given the placed ones.

    A cell is blocked when it shares a row, column or colour with a queen, or
    touches a queen diagonally.
    """
    markers = marker_positions(cells)
    rows = {r for r, _ in markers}
    cols = {c for _, c in markers}
    colors = {cells[pos].color for pos in markers}
    blocked: Set[Position] = set()
    for (row, col), cell in cells.items():
        if cell.has_marker:
            continue
        if row in rows or col in cols or cell.color in colors:
            blocked.add((row, col))
    for row, col in markers:
        for dr, dc in ((-1, -1), (-1, 1), (1, -1), (1, 1)):
            pos = (row + dr, col + dc)
            if cells.contains(*pos) and not cells[pos].has_marker:
                blocked.add(pos)
    return blocked
