"""Components used by the menu screens (main menu, level select, about, win)."""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class MenuAction(Enum):
    """Actions that a menu button can trigger."""
    START_GAME = auto()
    ABOUT = auto()
    EXIT = auto()
    SELECT_LEVEL = auto()
    BACK = auto()


@dataclass
class MenuButton:
    """Interactive button displayed on a menu screen.

    ``order`` ranks buttons for keyboard focus (top to bottom); ``size`` is the
    board size carried by level buttons.
    """
    label: str
    action: MenuAction
    x: float
    y: float
    order: int = 0
    width: float = 260.0
    height: float = 56.0
    enabled: bool = True
    size: Optional[int] = None


@dataclass
class MenuText:
    """Static text block (title, rules, results)."""
    text: str
    x: float
    y: float
    font_size: int = 18
    color: tuple[int, int, int] = (230, 230, 230)
    width: Optional[int] = None
    bold: bool = False


@dataclass
class MenuBackground:
    """Background styling data for the menu screen."""
    color: tuple[int, int, int] = (24, 26, 36)


@dataclass
class MenuFocus:
    """Index (into the ordered enabled buttons) of the keyboard-focused button."""
    index: int = 0


@dataclass
class MenuTag:
    """Marker component so menu entities can be cleaned up together."""
    pass
