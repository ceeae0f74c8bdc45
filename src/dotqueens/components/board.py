from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from dotqueens.components.cell import Cell, CellView
from dotqueens.components.color_palette import RGB, ColorPalette
from dotqueens.constants import DEFAULT_COLORS, MAX_GENERATION_ATTEMPTS
from dotqueens.errors import ConfigurationError, GenerationExhausted
from dotqueens.systems.regions import StepObserver, check_board_size, generate_regions, split_colors
from dotqueens.systems.solver import Solution, find_solution
from dotqueens.systems.validation import ConflictKind, classify, marker_positions
from dotqueens.utils.grid import Grid

logger = logging.getLogger(__name__)

BoardView = Tuple[Tuple[CellView, ...], ...]


@dataclass(slots=True)
class Board:
    """Square puzzle board: region colours plus the player's queens.

    The board is the single owner of its cells. Renderers read ``grid`` (an
    immutable snapshot) and mutate only through the marker methods.
    """
    size: int
    cells: Grid[Cell]
    colors: List[str]
    palette: ColorPalette
    solution: Optional[Tuple[int, ...]] = field(default=None)

    @classmethod
    def create(
        cls,
        size: int,
        *,
        rng: random.Random | None = None,
        palette: ColorPalette | None = None,
        max_attempts: int | None = MAX_GENERATION_ATTEMPTS,
        on_step: StepObserver | None = None,
    ) -> "Board":
        """Generate random region layouts until one is solvable.

        Unsolvable layouts are thrown away whole and regenerated. The loop
        gives up with GenerationExhausted after ``max_attempts`` tries; pass
        ``None`` to keep trying indefinitely.
        """
        palette = palette or ColorPalette(colors=DEFAULT_COLORS)
        check_board_size(size, palette.max_board_size)
        rng = rng or random.Random()
        attempts = 0
        while max_attempts is None or attempts < max_attempts:
            attempts += 1
            layout = generate_regions(size, palette.selectable_colors(), rng, on_step=on_step)
            solution = find_solution(layout.cell_colors)
            if solution is None:
                logger.debug("attempt %d: %dx%d layout unsolvable, regenerating", attempts, size, size)
                continue
            board = cls(
                size=size,
                cells=Grid(size, size, lambda r, c: Cell(color=layout.cell_colors[r, c])),
                colors=list(layout.region_colors),
                palette=palette,
                solution=tuple(solution),
            )
            board.reset_markers()
            logger.debug("solvable %dx%d board found after %d attempt(s)", size, size, attempts)
            return board
        logger.warning("gave up generating a %dx%d board after %d attempts", size, size, attempts)
        raise GenerationExhausted(size, attempts)

    @classmethod
    def from_colors(
        cls,
        rows: Sequence[Sequence[str]],
        *,
        palette: ColorPalette | None = None,
    ) -> "Board":
        """Build a board from an explicit colour matrix (no generation, no solvability check).

        The matrix must be square, use exactly ``size`` known colours and keep
        each colour in one connected region.
        """
        palette = palette or ColorPalette(colors=DEFAULT_COLORS)
        size = len(rows)
        if any(len(row) != size for row in rows):
            raise ConfigurationError("colour matrix must be square")
        check_board_size(size, palette.max_board_size)
        colors: List[str] = []
        for row in rows:
            for color_id in row:
                palette.display_for(color_id)
                if color_id not in colors:
                    colors.append(color_id)
        if len(colors) != size:
            raise ConfigurationError(f"a {size}x{size} board needs exactly {size} colours, got {len(colors)}")
        split = split_colors(Grid(size, size, lambda r, c: rows[r][c]))
        if split:
            raise ConfigurationError(f"colours split into several regions: {', '.join(split)}")
        cells = Grid(size, size, lambda r, c: Cell(color=rows[r][c]))
        return cls(size=size, cells=cells, colors=colors, palette=palette)

    @property
    def grid(self) -> BoardView:
        return self.view()

    def view(self) -> BoardView:
        return tuple(
            tuple(CellView(cell.color, cell.has_marker) for cell in self.cells.row(r))
            for r in range(self.size)
        )

    def color_at(self, row: int, col: int) -> str:
        return self.cells[row, col].color

    def has_marker(self, row: int, col: int) -> bool:
        return self.cells[row, col].has_marker

    def color_grid(self) -> Grid[str]:
        return Grid(self.size, self.size, lambda r, c: self.cells[r, c].color)

    def place_marker(self, row: int, col: int) -> None:
        self.cells[row, col].has_marker = True

    def toggle_marker(self, row: int, col: int) -> None:
        cell = self.cells[row, col]
        cell.has_marker = not cell.has_marker

    def reset_markers(self) -> None:
        for cell in self.cells:
            cell.has_marker = False

    def markers(self) -> List[Tuple[int, int]]:
        return marker_positions(self.cells)

    def validate(self) -> ConflictKind:
        return classify(self.cells)

    def is_solved(self) -> bool:
        return self.validate() == ConflictKind.NONE

    def solve(self) -> Optional[Solution]:
        """Run the solver; on success replace all queens with the found placement.

        Use ``dotqueens.systems.solver.solve`` to get the placement without
        touching the queens.
        """
        solution = find_solution(self.color_grid())
        if solution is None:
            return None
        self.reset_markers()
        for row, col in enumerate(solution):
            self.place_marker(row, col)
        self.solution = tuple(solution)
        return solution

    def color_display_attribute(self, color_id: str) -> RGB:
        return self.palette.display_for(color_id)
