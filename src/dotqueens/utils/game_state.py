from __future__ import annotations

from esper import World

from dotqueens.components.game_state import GameMode, GameState
from dotqueens.events.bus import EVENT_GAME_MODE_CHANGED, EventBus


def get_game_state(world: World) -> GameState | None:
    for _, state in world.get_component(GameState):
        return state
    return None


def current_mode(world: World) -> GameMode | None:
    state = get_game_state(world)
    return state.mode if state else None


def set_game_mode(world: World, event_bus: EventBus, mode: GameMode) -> None:
    """Update the global game mode and emit a change event when it differs."""
    state = get_game_state(world)
    if state is not None:
        previous_mode = state.mode
        if previous_mode == mode:
            return
        state.mode = mode
        event_bus.emit(EVENT_GAME_MODE_CHANGED, previous_mode=previous_mode, new_mode=mode)
        return
    # No existing GameState component; create a new one.
    world.create_entity(GameState(mode=mode))
    event_bus.emit(EVENT_GAME_MODE_CHANGED, previous_mode=None, new_mode=mode)
