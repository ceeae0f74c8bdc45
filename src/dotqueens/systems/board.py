from __future__ import annotations

import logging
import random
from typing import List, Optional, Tuple

from esper import World

from dotqueens.components.board import Board
from dotqueens.components.cursor import Cursor
from dotqueens.components.game_state import GameMode
from dotqueens.components.help_overlay import HelpOverlay
from dotqueens.constants import MAX_GENERATION_ATTEMPTS
from dotqueens.errors import ConfigurationError, GenerationExhausted
from dotqueens.events.bus import (
    EventBus,
    EVENT_BOARD_CHANGED,
    EVENT_BOARD_CLEARED,
    EVENT_BOARD_GENERATION_FAILED,
    EVENT_BOARD_READY,
    EVENT_CELL_CLICK,
    EVENT_CURSOR_MOVE,
    EVENT_CURSOR_MOVED,
    EVENT_HELP_TOGGLE,
    EVENT_MARKER_TOGGLE_REQUEST,
    EVENT_MARKERS_RESET_REQUEST,
    EVENT_NEW_GAME_REQUEST,
    EVENT_PUZZLE_SOLVED,
    EVENT_RETURN_TO_MENU,
    EVENT_VALIDATION_CHANGED,
)
from dotqueens.systems.board_ops import get_board, get_board_entity, get_cursor, get_palette
from dotqueens.systems.validation import ConflictKind
from dotqueens.utils.game_state import current_mode

logger = logging.getLogger(__name__)


class BoardSystem:
    """Owns the board entity: builds puzzles, applies marker edits and reports validation."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        rng: random.Random | None = None,
        max_attempts: int | None = MAX_GENERATION_ATTEMPTS,
    ):
        self.world = world
        self.event_bus = event_bus
        self._rng = rng or getattr(world, "random", None) or random.Random()
        self._max_attempts = max_attempts
        self.last_conflict: Optional[ConflictKind] = None
        self.event_bus.subscribe(EVENT_NEW_GAME_REQUEST, self.on_new_game_request)
        self.event_bus.subscribe(EVENT_MARKER_TOGGLE_REQUEST, self.on_marker_toggle)
        self.event_bus.subscribe(EVENT_MARKERS_RESET_REQUEST, self.on_markers_reset)
        self.event_bus.subscribe(EVENT_CURSOR_MOVE, self.on_cursor_move)
        self.event_bus.subscribe(EVENT_CELL_CLICK, self.on_cell_click)
        self.event_bus.subscribe(EVENT_HELP_TOGGLE, self.on_help_toggle)
        self.event_bus.subscribe(EVENT_RETURN_TO_MENU, self.on_return_to_menu)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start_game(self, size: int) -> Board | None:
        """Replace any current board with a freshly generated one."""
        try:
            board = Board.create(
                size,
                rng=self._rng,
                palette=get_palette(self.world),
                max_attempts=self._max_attempts,
            )
        except (ConfigurationError, GenerationExhausted) as exc:
            logger.warning("could not start a game of size %r: %s", size, exc)
            self.event_bus.emit(EVENT_BOARD_GENERATION_FAILED, size=size, reason=str(exc))
            return None
        self.clear_board()
        self.world.create_entity(board, Cursor(), HelpOverlay())
        self.last_conflict = board.validate()
        logger.info("new %dx%d game with colours %s", board.size, board.size, board.colors)
        self.event_bus.emit(EVENT_BOARD_READY, size=board.size)
        return board

    def clear_board(self) -> None:
        entity = get_board_entity(self.world)
        if entity is None:
            return
        self.world.delete_entity(entity, immediate=True)
        self.last_conflict = None
        self.event_bus.emit(EVENT_BOARD_CLEARED)

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def on_new_game_request(self, sender, **kwargs):
        size = kwargs.get('size')
        if size is None:
            return
        self.start_game(size)

    def on_return_to_menu(self, sender, **kwargs):
        self.clear_board()

    def on_marker_toggle(self, sender, **kwargs):
        board = self._playable_board()
        if board is None:
            return
        row = kwargs.get('row')
        col = kwargs.get('col')
        if row is None or col is None:
            cursor = get_cursor(self.world)
            if cursor is None:
                return
            row, col = cursor.row, cursor.col
        board.toggle_marker(row, col)
        self._after_change(board, 'toggle', [(row, col)])

    def on_markers_reset(self, sender, **kwargs):
        board = self._playable_board()
        if board is None:
            return
        cleared = board.markers()
        board.reset_markers()
        logger.info("markers reset (%d removed)", len(cleared))
        self._after_change(board, 'reset', cleared)

    def on_cursor_move(self, sender, **kwargs):
        board = self._playable_board()
        cursor = get_cursor(self.world)
        if board is None or cursor is None:
            return
        d_row = int(kwargs.get('d_row', 0) or 0)
        d_col = int(kwargs.get('d_col', 0) or 0)
        if cursor.move(d_row, d_col, board.size):
            self.event_bus.emit(EVENT_CURSOR_MOVED, row=cursor.row, col=cursor.col)

    def on_cell_click(self, sender, **kwargs):
        board = self._playable_board()
        cursor = get_cursor(self.world)
        row = kwargs.get('row')
        col = kwargs.get('col')
        if board is None or cursor is None or row is None or col is None:
            return
        if not board.cells.contains(row, col):
            return
        if (cursor.row, cursor.col) != (row, col):
            cursor.row, cursor.col = row, col
            self.event_bus.emit(EVENT_CURSOR_MOVED, row=row, col=col)
        self.event_bus.emit(EVENT_MARKER_TOGGLE_REQUEST, row=row, col=col)

    def on_help_toggle(self, sender, **kwargs):
        if self._playable_board() is None:
            return
        for _, overlay in self.world.get_component(HelpOverlay):
            overlay.visible = not overlay.visible

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _playable_board(self) -> Board | None:
        if current_mode(self.world) != GameMode.PLAYING:
            return None
        return get_board(self.world)

    def _after_change(self, board: Board, reason: str, positions: List[Tuple[int, int]]) -> None:
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason=reason, positions=positions)
        conflict = board.validate()
        if conflict != self.last_conflict:
            self.last_conflict = conflict
            self.event_bus.emit(EVENT_VALIDATION_CHANGED, conflict=conflict)
        if conflict == ConflictKind.NONE:
            logger.info("%dx%d puzzle solved", board.size, board.size)
            self.event_bus.emit(EVENT_PUZZLE_SOLVED, size=board.size)
