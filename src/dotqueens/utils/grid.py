from __future__ import annotations

from typing import Callable, Generic, Iterator, List, Tuple, TypeVar

from dotqueens.errors import OutOfBoundsError

T = TypeVar("T")
Position = Tuple[int, int]


class Grid(Generic[T]):
    """Fixed-size row-major matrix with bounds-checked ``(row, col)`` access.

    Negative indices are rejected instead of wrapping around, so an off-by-one
    in caller arithmetic surfaces as :class:`OutOfBoundsError`.
    """

    __slots__ = ("_rows", "_cols", "_items")

    def __init__(self, rows: int, cols: int, factory: Callable[[int, int], T]):
        if rows < 0 or cols < 0:
            raise ValueError("grid dimensions must be non-negative")
        self._rows = rows
        self._cols = cols
        self._items: List[T] = [factory(r, c) for r in range(rows) for c in range(cols)]

    @classmethod
    def filled(cls, rows: int, cols: int, value: T) -> "Grid[T]":
        return cls(rows, cols, lambda _r, _c: value)

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self._rows and 0 <= col < self._cols

    def _index(self, row: int, col: int) -> int:
        if not self.contains(row, col):
            raise OutOfBoundsError(row, col, self._rows, self._cols)
        return row * self._cols + col

    def __getitem__(self, pos: Position) -> T:
        row, col = pos
        return self._items[self._index(row, col)]

    def __setitem__(self, pos: Position, value: T) -> None:
        row, col = pos
        self._items[self._index(row, col)] = value

    def positions(self) -> Iterator[Position]:
        for r in range(self._rows):
            for c in range(self._cols):
                yield r, c

    def items(self) -> Iterator[Tuple[Position, T]]:
        for pos in self.positions():
            yield pos, self._items[pos[0] * self._cols + pos[1]]

    def row(self, row: int) -> List[T]:
        self._index(row, 0)
        start = row * self._cols
        return self._items[start:start + self._cols]

    def column(self, col: int) -> List[T]:
        self._index(0, col)
        return [self._items[r * self._cols + col] for r in range(self._rows)]

    def neighbors4(self, row: int, col: int) -> List[Position]:
        """In-bounds orthogonal neighbours of a cell."""
        candidates = ((row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1))
        return [(r, c) for r, c in candidates if self.contains(r, c)]

    def neighbors8(self, row: int, col: int) -> List[Position]:
        """In-bounds orthogonal and diagonal neighbours of a cell."""
        out: List[Position] = []
        for dr in (-1, 0, 1):
            for dc in (-1, 0, 1):
                if dr == 0 and dc == 0:
                    continue
                if self.contains(row + dr, col + dc):
                    out.append((row + dr, col + dc))
        return out

    def to_lists(self) -> List[List[T]]:
        return [self.row(r) for r in range(self._rows)]

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Grid({self._rows}x{self._cols})"
