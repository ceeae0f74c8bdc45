from dotqueens.constants import (
    BOARD_MAX_HEIGHT_PCT,
    BOARD_MAX_WIDTH_PCT,
    BOTTOM_MARGIN,
    MIN_CELL_SIZE,
    TOP_MARGIN,
)

def compute_board_geometry(window_width: int, window_height: int, size: int):
    """Return (cell_size, start_x, start_y) for a ``size`` x ``size`` board.

    Shared by RenderSystem and InputSystem so clicks map onto the drawn cells.
    ``start_x``/``start_y`` is the bottom-left corner; row 0 is drawn at the top.
    """
    max_board_w = window_width * BOARD_MAX_WIDTH_PCT
    max_board_h = (window_height - BOTTOM_MARGIN - TOP_MARGIN) * BOARD_MAX_HEIGHT_PCT
    cell_size = int(min(max_board_w / size, max_board_h / size))
    if cell_size < MIN_CELL_SIZE:
        cell_size = MIN_CELL_SIZE
    total = size * cell_size
    start_x = (window_width - total) / 2
    start_y = BOTTOM_MARGIN
    return cell_size, start_x, start_y


def cell_origin(row: int, col: int, size: int, geometry) -> tuple[float, float]:
    """Bottom-left corner of a cell in window coordinates."""
    cell_size, start_x, start_y = geometry
    return start_x + col * cell_size, start_y + (size - 1 - row) * cell_size


def cell_at_point(x: float, y: float, size: int, geometry):
    """Map a window point to ``(row, col)`` or None when it misses the board."""
    cell_size, start_x, start_y = geometry
    total = size * cell_size
    if x < start_x or x >= start_x + total:
        return None
    if y < start_y or y >= start_y + total:
        return None
    col = int((x - start_x) // cell_size)
    row = size - 1 - int((y - start_y) // cell_size)
    return row, col
