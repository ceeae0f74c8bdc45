"""Lookup helpers shared by systems that work with the board entity."""
from __future__ import annotations

from esper import World

from dotqueens.components.board import Board
from dotqueens.components.color_palette import ColorPalette
from dotqueens.components.color_registry import ColorRegistry
from dotqueens.components.cursor import Cursor
from dotqueens.components.help_overlay import HelpOverlay
from dotqueens.components.session_clock import SessionClock


def get_palette(world: World) -> ColorPalette:
    for entity, _ in world.get_component(ColorRegistry):
        return world.component_for_entity(entity, ColorPalette)
    raise RuntimeError("ColorPalette definitions not found")


def get_board(world: World) -> Board | None:
    for _, board in world.get_component(Board):
        return board
    return None


def get_board_entity(world: World) -> int | None:
    for entity, _ in world.get_component(Board):
        return entity
    return None


def get_cursor(world: World) -> Cursor | None:
    for _, cursor in world.get_component(Cursor):
        return cursor
    return None


def help_visible(world: World) -> bool:
    for _, overlay in world.get_component(HelpOverlay):
        return overlay.visible
    return False


def get_session_clock(world: World) -> SessionClock | None:
    for _, clock in world.get_component(SessionClock):
        return clock
    return None
