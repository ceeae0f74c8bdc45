from dotqueens.components.game_state import GameMode
from dotqueens.constants import (
    KEY_DOWN,
    KEY_ENTER,
    KEY_ESCAPE,
    KEY_H,
    KEY_LEFT,
    KEY_R,
    KEY_RETURN,
    KEY_RIGHT,
    KEY_SPACE,
    KEY_UP,
    MOUSE_BUTTON_LEFT,
)
from dotqueens.events.bus import (
    EventBus,
    EVENT_CELL_CLICK,
    EVENT_CURSOR_MOVE,
    EVENT_HELP_TOGGLE,
    EVENT_KEY_PRESS,
    EVENT_MARKER_TOGGLE_REQUEST,
    EVENT_MARKERS_RESET_REQUEST,
    EVENT_MOUSE_PRESS,
    EVENT_RETURN_TO_MENU,
)
from dotqueens.systems.board_ops import get_board
from dotqueens.ui.layout import cell_at_point, compute_board_geometry
from dotqueens.utils.game_state import current_mode

CURSOR_KEYS = {
    KEY_UP: (-1, 0),
    KEY_DOWN: (1, 0),
    KEY_LEFT: (0, -1),
    KEY_RIGHT: (0, 1),
}


class InputSystem:
    """Translates key presses and board clicks into board events while playing."""

    def __init__(self, event_bus: EventBus, window, world):
        self.event_bus = event_bus
        self.window = window
        self.world = world
        self.event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_press)
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_key_press(self, sender, **kwargs):
        symbol = kwargs.get('symbol')
        if symbol is None or not self._playing():
            return
        if symbol in CURSOR_KEYS:
            d_row, d_col = CURSOR_KEYS[symbol]
            self.event_bus.emit(EVENT_CURSOR_MOVE, d_row=d_row, d_col=d_col)
        elif symbol in (KEY_ENTER, KEY_RETURN, KEY_SPACE):
            self.event_bus.emit(EVENT_MARKER_TOGGLE_REQUEST)
        elif symbol == KEY_R:
            self.event_bus.emit(EVENT_MARKERS_RESET_REQUEST)
        elif symbol == KEY_H:
            self.event_bus.emit(EVENT_HELP_TOGGLE)
        elif symbol == KEY_ESCAPE:
            self.event_bus.emit(EVENT_RETURN_TO_MENU)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None or button != MOUSE_BUTTON_LEFT:
            return
        if not self._playing():
            return
        board = get_board(self.world)
        if board is None:
            return
        geometry = compute_board_geometry(self.window.width, self.window.height, board.size)
        hit = cell_at_point(x, y, board.size, geometry)
        if hit is None:
            return
        row, col = hit
        self.event_bus.emit(EVENT_CELL_CLICK, row=row, col=col)

    def _playing(self) -> bool:
        return current_mode(self.world) == GameMode.PLAYING
