"""Factory helpers for creating the menu screens."""
from typing import Mapping, Sequence, Tuple

from esper import World

from dotqueens.components.session_clock import format_elapsed
from dotqueens.constants import DIFFICULTY_PRESETS
from dotqueens.menu.components import (
    MenuAction,
    MenuBackground,
    MenuButton,
    MenuFocus,
    MenuTag,
    MenuText,
)

TITLE_COLOR = (220, 60, 60)
ERROR_COLOR = (240, 120, 120)

ABOUT_TEXT = (
    "Place N queens on an NxN grid split into N coloured regions.\n"
    "Every row, every column and every colour must hold exactly one queen.\n"
    "Queens may not touch each other, not even diagonally.\n"
    "The puzzle is solved once all queens are placed without conflicts.\n\n"
    "Arrow keys move the cursor, Enter toggles a queen, R resets the board,\n"
    "H shows blocked cells and Escape returns to the main menu."
)

ButtonSpec = Tuple[str, MenuAction, int | None]


def clear_menu(world: World) -> None:
    """Remove all entities that are part of the menu UI."""
    to_delete: set[int] = set()
    for component_type in (MenuButton, MenuText, MenuBackground, MenuFocus, MenuTag):
        for ent, _ in world.get_component(component_type):
            to_delete.add(ent)
    for ent in to_delete:
        world.delete_entity(ent, immediate=True)


def _spawn_screen(
    world: World,
    width: int,
    height: int,
    texts: Sequence[MenuText],
    buttons: Sequence[ButtonSpec],
    *,
    first_button_y: float,
) -> None:
    clear_menu(world)
    world.create_entity(MenuBackground(), MenuFocus(), MenuTag())
    for text in texts:
        world.create_entity(text, MenuTag())
    center_x = width / 2
    for order, (label, action, size) in enumerate(buttons):
        world.create_entity(
            MenuButton(
                label=label,
                action=action,
                x=center_x,
                y=first_button_y - order * 72.0,
                order=order,
                size=size,
            ),
            MenuTag(),
        )


def spawn_main_menu(world: World, width: int, height: int) -> None:
    """Create the title and the Start Game / About / Exit buttons."""
    title = MenuText("♛ Welcome to DotQueens! ♛", width / 2, height * 0.78, font_size=32,
                     color=TITLE_COLOR, bold=True)
    buttons: list[ButtonSpec] = [
        ("Start Game", MenuAction.START_GAME, None),
        ("About", MenuAction.ABOUT, None),
        ("Exit", MenuAction.EXIT, None),
    ]
    _spawn_screen(world, width, height, [title], buttons, first_button_y=height * 0.55)


def spawn_level_select(
    world: World,
    width: int,
    height: int,
    *,
    presets: Mapping[str, int] = DIFFICULTY_PRESETS,
    message: str | None = None,
) -> None:
    """One button per difficulty preset plus Back; ``message`` reports a failed start."""
    texts = [MenuText("Select your level:", width / 2, height * 0.80, font_size=26, bold=True)]
    if message:
        texts.append(MenuText(message, width / 2, height * 0.72, font_size=14, color=ERROR_COLOR,
                              width=int(width * 0.8)))
    buttons: list[ButtonSpec] = [
        (f"{label} ({size}x{size})", MenuAction.SELECT_LEVEL, size) for label, size in presets.items()
    ]
    buttons.append(("Back", MenuAction.BACK, None))
    _spawn_screen(world, width, height, texts, buttons, first_button_y=height * 0.62)


def spawn_about_screen(world: World, width: int, height: int) -> None:
    texts = [
        MenuText("The rules", width / 2, height * 0.85, font_size=26, bold=True),
        MenuText(ABOUT_TEXT, width / 2, height * 0.58, font_size=15, width=int(width * 0.85)),
    ]
    _spawn_screen(world, width, height, texts, [("Back", MenuAction.BACK, None)],
                  first_button_y=height * 0.18)


def spawn_win_screen(world: World, width: int, height: int, *, elapsed: float, size: int) -> None:
    texts = [
        MenuText("Congratulations! You won the game!", width / 2, height * 0.70, font_size=28,
                 color=TITLE_COLOR, bold=True),
        MenuText(f"{size}x{size} solved in {format_elapsed(elapsed)}", width / 2, height * 0.58,
                 font_size=20),
    ]
    _spawn_screen(world, width, height, texts, [("Back", MenuAction.BACK, None)],
                  first_button_y=height * 0.35)
