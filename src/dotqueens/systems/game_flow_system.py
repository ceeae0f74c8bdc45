"""High-level coordinator for game mode transitions."""
from __future__ import annotations

from typing import Callable, Tuple

from esper import World

from dotqueens.components.game_state import GameMode
from dotqueens.constants import WINDOW_HEIGHT, WINDOW_WIDTH
from dotqueens.events.bus import (
    EVENT_BOARD_GENERATION_FAILED,
    EVENT_BOARD_READY,
    EVENT_EXIT_REQUESTED,
    EVENT_MENU_ABOUT_SELECTED,
    EVENT_MENU_BACK_SELECTED,
    EVENT_MENU_EXIT_SELECTED,
    EVENT_MENU_LEVEL_SELECTED,
    EVENT_MENU_START_SELECTED,
    EVENT_NEW_GAME_REQUEST,
    EVENT_PUZZLE_SOLVED,
    EVENT_RETURN_TO_MENU,
    EVENT_TICK,
    EventBus,
)
from dotqueens.menu.factory import (
    clear_menu,
    spawn_about_screen,
    spawn_level_select,
    spawn_main_menu,
    spawn_win_screen,
)
from dotqueens.systems.board_ops import get_session_clock
from dotqueens.utils.game_state import current_mode, set_game_mode


class GameFlowSystem:
    """Central coordinator for menu screens, level start, play and the win screen."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        screen_size_provider: Callable[[], Tuple[int, int]] | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self._screen_size = screen_size_provider or (lambda: (WINDOW_WIDTH, WINDOW_HEIGHT))

        self.event_bus.subscribe(EVENT_MENU_START_SELECTED, self._on_start_selected)
        self.event_bus.subscribe(EVENT_MENU_ABOUT_SELECTED, self._on_about_selected)
        self.event_bus.subscribe(EVENT_MENU_EXIT_SELECTED, self._on_exit_selected)
        self.event_bus.subscribe(EVENT_MENU_LEVEL_SELECTED, self._on_level_selected)
        self.event_bus.subscribe(EVENT_MENU_BACK_SELECTED, self._on_back_selected)
        self.event_bus.subscribe(EVENT_BOARD_READY, self._on_board_ready)
        self.event_bus.subscribe(EVENT_BOARD_GENERATION_FAILED, self._on_generation_failed)
        self.event_bus.subscribe(EVENT_PUZZLE_SOLVED, self._on_puzzle_solved)
        self.event_bus.subscribe(EVENT_RETURN_TO_MENU, self._on_return_to_menu)
        self.event_bus.subscribe(EVENT_TICK, self._on_tick)

    # ------------------------------------------------------------------
    # Public entry points
    # ------------------------------------------------------------------

    def show_main_menu(self) -> None:
        width, height = self._screen_size()
        spawn_main_menu(self.world, width, height)
        set_game_mode(self.world, self.event_bus, GameMode.MENU)

    def start_level(self, size: int) -> None:
        self.event_bus.emit(EVENT_NEW_GAME_REQUEST, size=size)

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def _on_start_selected(self, sender, **payload) -> None:
        width, height = self._screen_size()
        spawn_level_select(self.world, width, height)
        set_game_mode(self.world, self.event_bus, GameMode.LEVEL_SELECT)

    def _on_about_selected(self, sender, **payload) -> None:
        width, height = self._screen_size()
        spawn_about_screen(self.world, width, height)
        set_game_mode(self.world, self.event_bus, GameMode.ABOUT)

    def _on_exit_selected(self, sender, **payload) -> None:
        self.event_bus.emit(EVENT_EXIT_REQUESTED)

    def _on_level_selected(self, sender, **payload) -> None:
        size = payload.get("size")
        if size is None:
            return
        self.start_level(size)

    def _on_back_selected(self, sender, **payload) -> None:
        if current_mode(self.world) == GameMode.WON:
            # Leaving the win screen discards the finished board as well.
            self.event_bus.emit(EVENT_RETURN_TO_MENU)
            return
        self.show_main_menu()

    def _on_board_ready(self, sender, **payload) -> None:
        clear_menu(self.world)
        clock = get_session_clock(self.world)
        if clock is not None:
            clock.start()
        set_game_mode(self.world, self.event_bus, GameMode.PLAYING)

    def _on_generation_failed(self, sender, **payload) -> None:
        width, height = self._screen_size()
        reason = payload.get("reason") or "board generation failed"
        spawn_level_select(self.world, width, height, message=f"Could not start level: {reason}")
        set_game_mode(self.world, self.event_bus, GameMode.LEVEL_SELECT)

    def _on_puzzle_solved(self, sender, **payload) -> None:
        clock = get_session_clock(self.world)
        elapsed = 0.0
        if clock is not None:
            clock.stop()
            elapsed = clock.elapsed
        width, height = self._screen_size()
        spawn_win_screen(self.world, width, height, elapsed=elapsed, size=int(payload.get("size", 0)))
        set_game_mode(self.world, self.event_bus, GameMode.WON)

    def _on_return_to_menu(self, sender, **payload) -> None:
        clock = get_session_clock(self.world)
        if clock is not None:
            clock.stop()
        self.show_main_menu()

    def _on_tick(self, sender, **payload) -> None:
        if current_mode(self.world) != GameMode.PLAYING:
            return
        clock = get_session_clock(self.world)
        if clock is None:
            return
        try:
            dt = float(payload.get("dt", 0.0))
        except (TypeError, ValueError):
            return
        clock.advance(dt)
