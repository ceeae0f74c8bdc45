from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references so systems that are not stored anywhere keep receiving events.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                # payload: dt=float
EVENT_EXIT_REQUESTED = "exit_requested"            # payload: None


# ============================================================================
# INPUT
# ============================================================================
EVENT_KEY_PRESS = "key_press"                      # payload: symbol=int, modifiers=int
EVENT_MOUSE_PRESS = "mouse_press"                  # payload: x, y, button
EVENT_CELL_CLICK = "cell_click"                    # payload: row, col


# ============================================================================
# BOARD & MARKERS
# ============================================================================
EVENT_NEW_GAME_REQUEST = "new_game_request"              # payload: size=int
EVENT_BOARD_READY = "board_ready"                        # payload: size=int
EVENT_BOARD_GENERATION_FAILED = "board_generation_failed"  # payload: size=object, reason=str
EVENT_BOARD_CLEARED = "board_cleared"                    # payload: None
EVENT_CURSOR_MOVE = "cursor_move"                        # payload: d_row=int, d_col=int
EVENT_CURSOR_MOVED = "cursor_moved"                      # payload: row=int, col=int
EVENT_MARKER_TOGGLE_REQUEST = "marker_toggle_request"    # payload: row=int|None, col=int|None
EVENT_MARKERS_RESET_REQUEST = "markers_reset_request"    # payload: None
EVENT_BOARD_CHANGED = "board_changed"                    # payload: reason=str, positions=list[(r,c)]
EVENT_VALIDATION_CHANGED = "validation_changed"          # payload: conflict=ConflictKind
EVENT_PUZZLE_SOLVED = "puzzle_solved"                    # payload: size=int
EVENT_HELP_TOGGLE = "help_toggle"                        # payload: None


# ============================================================================
# GAME FLOW & STATE
# ============================================================================
EVENT_GAME_MODE_CHANGED = "game_mode_changed"      # payload: previous_mode=GameMode|None, new_mode=GameMode
EVENT_RETURN_TO_MENU = "return_to_menu"            # payload: None


# ============================================================================
# MENU & UI
# ============================================================================
EVENT_MENU_START_SELECTED = "menu_start_selected"  # payload: None
EVENT_MENU_ABOUT_SELECTED = "menu_about_selected"  # payload: None
EVENT_MENU_EXIT_SELECTED = "menu_exit_selected"    # payload: None
EVENT_MENU_LEVEL_SELECTED = "menu_level_selected"  # payload: size=int, label=str
EVENT_MENU_BACK_SELECTED = "menu_back_selected"    # payload: None
