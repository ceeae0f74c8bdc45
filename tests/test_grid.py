import pytest

from dotqueens.errors import OutOfBoundsError
from dotqueens.utils.grid import Grid


def test_grid_factory_fills_row_major():
    grid = Grid(2, 3, lambda r, c: r * 10 + c)
    assert grid.to_lists() == [[0, 1, 2], [10, 11, 12]]
    assert grid.column(2) == [2, 12]
    assert len(grid) == 6


@pytest.mark.parametrize("pos", [(-1, 0), (0, -1), (3, 0), (0, 3)])
def test_grid_rejects_out_of_range_access(pos):
    grid = Grid.filled(3, 3, 0)
    with pytest.raises(OutOfBoundsError):
        grid[pos]
    with pytest.raises(OutOfBoundsError):
        grid[pos] = 1


def test_out_of_bounds_error_is_an_index_error():
    grid = Grid.filled(2, 2, None)
    with pytest.raises(IndexError):
        grid.row(2)


def test_neighbors_stay_inside_the_grid():
    grid = Grid.filled(3, 3, 0)
    assert sorted(grid.neighbors4(0, 0)) == [(0, 1), (1, 0)]
    assert len(grid.neighbors4(1, 1)) == 4
    assert sorted(grid.neighbors8(0, 0)) == [(0, 1), (1, 0), (1, 1)]
    assert len(grid.neighbors8(1, 1)) == 8
