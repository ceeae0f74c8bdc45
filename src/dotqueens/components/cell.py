from dataclasses import dataclass


@dataclass(slots=True)
class Cell:
    """Per-cell board state: the region colour id and whether a queen sits on it."""
    color: str
    has_marker: bool = False


@dataclass(frozen=True, slots=True)
class CellView:
    """Immutable copy of a Cell handed to renderers."""
    color: str
    has_marker: bool
