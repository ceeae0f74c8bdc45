from dataclasses import dataclass


@dataclass(slots=True)
class Cursor:
    """Keyboard cursor position on the active board."""
    row: int = 0
    col: int = 0

    def move(self, d_row: int, d_col: int, size: int) -> bool:
        """Shift the cursor, clamped to the board. Returns True when it moved."""
        row = min(max(self.row + d_row, 0), size - 1)
        col = min(max(self.col + d_col, 0), size - 1)
        moved = (row, col) != (self.row, self.col)
        self.row, self.col = row, col
        return moved
