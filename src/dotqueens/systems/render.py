from __future__ import annotations

from typing import Any, Dict, Tuple

from esper import World

from dotqueens.components.game_state import GameMode
from dotqueens.components.session_clock import format_elapsed
from dotqueens.constants import BRIGHT_COLOR_THRESHOLD
from dotqueens.events.bus import EventBus, EVENT_VALIDATION_CHANGED, EVENT_BOARD_READY
from dotqueens.systems.board_ops import get_board, get_cursor, get_session_clock, help_visible
from dotqueens.systems.validation import CONFLICT_MESSAGES, ConflictKind, blocked_cells
from dotqueens.ui.layout import cell_origin, compute_board_geometry
from dotqueens.utils.game_state import current_mode

PADDING = 2
QUEEN_GLYPH = "♛"
BLOCK_GLYPH = "•"
KEY_HINTS = "Arrows move  ·  Enter toggles a queen  ·  R resets  ·  H help  ·  Esc menu"

CellPos = Tuple[int, int]


class RenderSystem:
    """Draws the board, cursor, help overlay and status lines while playing."""

    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.conflict: ConflictKind | None = None
        self._last_cell_layout: Dict[CellPos, Dict[str, Any]] = {}
        self.event_bus.subscribe(EVENT_VALIDATION_CHANGED, self.on_validation_changed)
        self.event_bus.subscribe(EVENT_BOARD_READY, self.on_board_ready)

    def on_validation_changed(self, sender, **kwargs):
        self.conflict = kwargs.get('conflict')

    def on_board_ready(self, sender, **kwargs):
        board = get_board(self.world)
        self.conflict = board.validate() if board is not None else None

    def status_text(self) -> str:
        if self.conflict is None or self.conflict == ConflictKind.NONE:
            return ""
        return f"State: {CONFLICT_MESSAGES[self.conflict]}"

    def timer_text(self) -> str:
        clock = get_session_clock(self.world)
        return f"Time: {format_elapsed(clock.elapsed if clock else 0.0)}"

    def help_text(self) -> str:
        return "Help view: Enabled" if help_visible(self.world) else "Help view: Disabled"

    def process(self):
        if current_mode(self.world) != GameMode.PLAYING:
            return
        board = get_board(self.world)
        if board is None:
            return
        # Local import keeps tests headless without creating a window.
        import arcade
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True

        geometry = compute_board_geometry(self.window.width, self.window.height, board.size)
        cell_size = geometry[0]
        view = board.view()
        blocked = blocked_cells(board.cells) if help_visible(self.world) else set()
        cursor = get_cursor(self.world)

        self._last_cell_layout = {}
        for row, cells in enumerate(view):
            for col, cell in enumerate(cells):
                left, bottom = cell_origin(row, col, board.size, geometry)
                color = board.color_display_attribute(cell.color)
                self._last_cell_layout[(row, col)] = {
                    "rect": (left, bottom, cell_size, cell_size),
                    "color": color,
                    "marker": cell.has_marker,
                    "blocked": (row, col) in blocked,
                }
        if headless:
            return

        for (row, col), entry in self._last_cell_layout.items():
            left, bottom, width, height = entry["rect"]
            color = entry["color"]
            arcade.draw_lbwh_rectangle_filled(left + PADDING, bottom + PADDING,
                                              width - 2 * PADDING, height - 2 * PADDING, color)
            glyph = QUEEN_GLYPH if entry["marker"] else (BLOCK_GLYPH if entry["blocked"] else None)
            if glyph is None:
                continue
            # Dark glyphs on bright cells so the queen stays readable.
            fg = arcade.color.BLACK if sum(color) > BRIGHT_COLOR_THRESHOLD else arcade.color.WHITE
            arcade.draw_text(
                glyph,
                left + width / 2,
                bottom + height / 2,
                fg,
                int(height * (0.55 if entry["marker"] else 0.35)),
                anchor_x="center",
                anchor_y="center",
            )

        if cursor is not None and (cursor.row, cursor.col) in self._last_cell_layout:
            left, bottom, width, height = self._last_cell_layout[(cursor.row, cursor.col)]["rect"]
            arcade.draw_lbwh_rectangle_outline(left, bottom, width, height, arcade.color.WHITE, border_width=4)

        text_x = self.window.width / 2
        arcade.draw_text(self.timer_text(), text_x, self.window.height - 24, arcade.color.LIGHT_GRAY, 16,
                         anchor_x="center", anchor_y="center")
        arcade.draw_text(KEY_HINTS, text_x, 76, arcade.color.LIGHT_GRAY, 12,
                         anchor_x="center", anchor_y="center")
        arcade.draw_text(self.help_text(), text_x, 52, arcade.color.LIGHT_GRAY, 12,
                         anchor_x="center", anchor_y="center")
        status = self.status_text()
        if status:
            arcade.draw_text(status, text_x, 26, arcade.color.RED, 16,
                             anchor_x="center", anchor_y="center", bold=True)
