import pytest

from dotqueens.constants import BOTTOM_MARGIN, MIN_CELL_SIZE
from dotqueens.ui.layout import cell_at_point, cell_origin, compute_board_geometry


def test_board_is_centered_horizontally():
    cell_size, start_x, start_y = compute_board_geometry(800, 640, 4)
    assert start_y == BOTTOM_MARGIN
    assert start_x + 4 * cell_size / 2 == pytest.approx(400)


def test_cell_size_never_drops_below_minimum():
    cell_size, _, _ = compute_board_geometry(100, 200, 10)
    assert cell_size == MIN_CELL_SIZE


def test_row_zero_is_drawn_at_the_top():
    geometry = compute_board_geometry(800, 640, 5)
    _, top_bottom = cell_origin(0, 0, 5, geometry)
    _, low_bottom = cell_origin(4, 0, 5, geometry)
    assert top_bottom > low_bottom
    assert low_bottom == BOTTOM_MARGIN


@pytest.mark.parametrize("size", [4, 6, 9])
def test_cell_centres_map_back_to_their_cell(size):
    geometry = compute_board_geometry(800, 640, size)
    half = geometry[0] / 2
    for row in range(size):
        for col in range(size):
            left, bottom = cell_origin(row, col, size, geometry)
            assert cell_at_point(left + half, bottom + half, size, geometry) == (row, col)


def test_points_off_the_board_miss():
    geometry = compute_board_geometry(800, 640, 4)
    cell_size, start_x, start_y = geometry
    assert cell_at_point(start_x - 1, start_y + 1, 4, geometry) is None
    assert cell_at_point(start_x + 1, start_y - 1, 4, geometry) is None
    assert cell_at_point(start_x + 4 * cell_size, start_y + 1, 4, geometry) is None
