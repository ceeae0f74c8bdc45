"""Entry point for the DotQueens puzzle game.

Sets up ECS world, event bus, systems, and Arcade window.
"""
import argparse
import logging
import random

from arcade import Window, color, run, set_background_color

from dotqueens.components.game_state import MENU_MODES, GameMode
from dotqueens.constants import WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from dotqueens.events.bus import (
    EVENT_EXIT_REQUESTED,
    EVENT_KEY_PRESS,
    EVENT_MOUSE_PRESS,
    EVENT_TICK,
    EventBus,
)
from dotqueens.menu.input_system import MenuInputSystem
from dotqueens.menu.render_system import MenuRenderSystem
from dotqueens.systems.board import BoardSystem
from dotqueens.systems.game_flow_system import GameFlowSystem
from dotqueens.systems.input import InputSystem
from dotqueens.systems.render import RenderSystem
from dotqueens.utils.game_state import current_mode
from dotqueens.world import create_world

logger = logging.getLogger(__name__)


class DotQueensWindow(Window):
    def __init__(self, *, seed: int | None = None, start_size: int | None = None):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE, resizable=True)
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.world = create_world(rng=random.Random(seed))

        # Flow and board systems
        self.game_flow_system = GameFlowSystem(
            self.world,
            self.event_bus,
            screen_size_provider=lambda: (self.width, self.height),
        )
        self.board_system = BoardSystem(self.world, self.event_bus)

        # Menu systems
        self.menu_input_system = MenuInputSystem(self.world, self.event_bus)
        self.menu_render_system = MenuRenderSystem(self.world, self, self.menu_input_system)

        # Play systems
        self.input_system = InputSystem(self.event_bus, self, self.world)
        self.render_system = RenderSystem(self.world, self.event_bus, self)

        self.event_bus.subscribe(EVENT_EXIT_REQUESTED, self._on_exit_requested)
        set_background_color(color.BLACK)

        self.game_flow_system.show_main_menu()
        if start_size is not None:
            self.game_flow_system.start_level(start_size)

    def on_draw(self):
        self.clear()
        if current_mode(self.world) in MENU_MODES:
            self.menu_render_system.process()
            return
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_key_press(self, symbol: int, modifiers: int):
        mode = current_mode(self.world)
        if mode in MENU_MODES:
            self.menu_input_system.handle_key_press(symbol, modifiers)
        elif mode == GameMode.PLAYING:
            self.event_bus.emit(EVENT_KEY_PRESS, symbol=symbol, modifiers=modifiers)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        mode = current_mode(self.world)
        if mode in MENU_MODES:
            self.menu_input_system.handle_mouse_press(x, y, button)
        elif mode == GameMode.PLAYING:
            self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)

    def _on_exit_requested(self, sender, **payload):
        logger.info("exiting")
        self.close()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="DotQueens: place one queen per row, column and colour.")
    parser.add_argument("--seed", type=int, default=None, help="Seed the board generator for a reproducible session.")
    parser.add_argument("--size", type=int, default=None, help="Skip the menu and start a board of this size.")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging verbosity.")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(asctime)s %(name)s %(levelname)s: %(message)s")
    DotQueensWindow(seed=args.seed, start_size=args.size)
    run()

if __name__ == "__main__":
    main()
