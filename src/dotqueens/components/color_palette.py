from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from dotqueens.errors import ConfigurationError

RGB = Tuple[int, int, int]


@dataclass(slots=True)
class ColorPalette:
    """Canonical colour definitions stored on a single entity.

    ``colors`` maps a colour id to its display colour. ``selectable`` is the
    ordered pool board generation draws region colours from; it defaults to
    every defined colour and caps the largest supported board size.
    """
    colors: Dict[str, RGB]
    selectable: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.colors = dict(self.colors)
        if self.selectable:
            self.selectable = self._filter(self.selectable)
        else:
            self.selectable = list(self.colors.keys())

    def _filter(self, color_ids: Iterable[str]) -> List[str]:
        # Preserve order while dropping unknown and repeated ids.
        seen: set[str] = set()
        filtered: List[str] = []
        for color_id in color_ids:
            if color_id in self.colors and color_id not in seen:
                filtered.append(color_id)
                seen.add(color_id)
        return filtered

    def display_for(self, color_id: str) -> RGB:
        try:
            return self.colors[color_id]
        except KeyError:
            raise ConfigurationError(f"unknown colour id {color_id!r}") from None

    def selectable_colors(self) -> List[str]:
        return list(self.selectable)

    @property
    def max_board_size(self) -> int:
        return len(self.selectable)
