"""Game state resource describing the active high-level mode."""
from dataclasses import dataclass
from enum import Enum, auto


class GameMode(Enum):
    """High-level game modes that drive which systems run."""
    MENU = auto()
    LEVEL_SELECT = auto()
    ABOUT = auto()
    PLAYING = auto()
    WON = auto()


MENU_MODES = frozenset({GameMode.MENU, GameMode.LEVEL_SELECT, GameMode.ABOUT, GameMode.WON})


@dataclass
class GameState:
    """Singleton component storing the currently active game mode."""
    mode: GameMode = GameMode.MENU
