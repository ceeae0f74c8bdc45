import random

from esper import World

from dotqueens.components.color_palette import ColorPalette
from dotqueens.components.color_registry import ColorRegistry
from dotqueens.components.game_state import GameMode, GameState
from dotqueens.components.session_clock import SessionClock
from dotqueens.constants import DEFAULT_COLORS


def create_world(
    initial_mode: GameMode = GameMode.MENU,
    *,
    rng: random.Random | None = None,
    colors: dict | None = None,
) -> World:
    world = World()
    setattr(world, "random", rng or random.Random())

    # Global game state resource plus the session stopwatch.
    world.create_entity(GameState(mode=initial_mode), SessionClock())

    # Single registry entity with the canonical colour palette.
    world.create_entity(
        ColorRegistry(),
        ColorPalette(colors=dict(colors or DEFAULT_COLORS)),
    )
    return world
