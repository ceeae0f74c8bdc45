"""Random connected partition of a square grid into colour regions."""
from __future__ import annotations

import logging
import random
from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, List, Sequence, Tuple

from dotqueens.constants import MIN_BOARD_SIZE
from dotqueens.errors import ConfigurationError
from dotqueens.utils.grid import Grid

logger = logging.getLogger(__name__)

UNASSIGNED = -1

StepObserver = Callable[[Grid[int], str], None]


@dataclass(slots=True)
class RegionLayout:
    """Result of region generation.

    ``groups`` holds the region index of each cell, ``region_colors[k]`` is the
    colour id of region ``k`` and ``cell_colors`` is the per-cell colour id.
    """
    groups: Grid[int]
    region_colors: List[str]
    cell_colors: Grid[str]

    @property
    def size(self) -> int:
        return self.groups.rows


def check_board_size(size: object, available: int) -> int:
    """Return ``size`` as an int or raise ConfigurationError when it cannot be built."""
    if isinstance(size, bool) or not isinstance(size, int):
        raise ConfigurationError(f"board size must be an integer, got {size!r}")
    if size < MIN_BOARD_SIZE:
        raise ConfigurationError(f"board size must be at least {MIN_BOARD_SIZE}, got {size}")
    if size > available:
        raise ConfigurationError(
            f"not enough unique colours for a {size}x{size} board ({available} available)"
        )
    return size


def _distinct(color_pool: Sequence[str]) -> List[str]:
    seen: set[str] = set()
    out: List[str] = []
    for color_id in color_pool:
        if color_id not in seen:
            seen.add(color_id)
            out.append(color_id)
    return out


def generate_regions(
    size: int,
    color_pool: Sequence[str],
    rng: random.Random | None = None,
    *,
    on_step: StepObserver | None = None,
) -> RegionLayout:
    """Partition a ``size`` x ``size`` grid into ``size`` 4-connected regions.

    ``size`` seed cells are drawn without replacement, one per region, then all
    regions grow together breadth-first. Every dequeue visits its neighbours in
    a freshly shuffled order so region shapes do not lean in one direction.
    ``on_step`` (if given) observes the partial group grid after seeding and
    after every expansion step.
    """
    pool = _distinct(color_pool)
    size = check_board_size(size, len(pool))
    rng = rng or random.Random()

    shuffled = list(pool)
    rng.shuffle(shuffled)
    region_colors = shuffled[:size]

    groups: Grid[int] = Grid.filled(size, size, UNASSIGNED)
    seeds = rng.sample(list(groups.positions()), size)
    queue: Deque[Tuple[int, int, int]] = deque()
    for group_id, (row, col) in enumerate(seeds):
        groups[row, col] = group_id
        queue.append((row, col, group_id))
    if on_step is not None:
        on_step(groups, "seeded")

    while queue:
        row, col, group_id = queue.popleft()
        neighbors = groups.neighbors4(row, col)
        rng.shuffle(neighbors)
        for nr, nc in neighbors:
            if groups[nr, nc] == UNASSIGNED:
                groups[nr, nc] = group_id
                queue.append((nr, nc, group_id))
        if on_step is not None:
            on_step(groups, "growing")

    cell_colors: Grid[str] = Grid(size, size, lambda r, c: region_colors[groups[r, c]])
    logger.debug("generated %dx%d regions with colours %s", size, size, region_colors)
    return RegionLayout(groups=groups, region_colors=region_colors, cell_colors=cell_colors)


def split_colors(colors: Grid[str]) -> List[str]:
    """Colour ids whose cells do not form a single 4-connected region."""
    seen: set[Tuple[int, int]] = set()
    regions_per_color: dict[str, int] = {}
    for pos, color_id in colors.items():
        if pos in seen:
            continue
        regions_per_color[color_id] = regions_per_color.get(color_id, 0) + 1
        seen.add(pos)
        queue: Deque[Tuple[int, int]] = deque([pos])
        while queue:
            row, col = queue.popleft()
            for nxt in colors.neighbors4(row, col):
                if nxt not in seen and colors[nxt] == color_id:
                    seen.add(nxt)
                    queue.append(nxt)
    return [color_id for color_id, count in regions_per_color.items() if count > 1]
