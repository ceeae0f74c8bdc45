"""Rendering system responsible for drawing the menu screens."""
import arcade
from esper import World

from dotqueens.components.game_state import MENU_MODES
from dotqueens.menu.components import MenuBackground, MenuButton, MenuText
from dotqueens.menu.input_system import MenuInputSystem
from dotqueens.utils.game_state import current_mode


class MenuRenderSystem:
    """Renders menu entities when a menu mode is active."""

    def __init__(self, world: World, window, input_system: MenuInputSystem) -> None:
        self.world = world
        self.window = window
        self._input_system = input_system

    def process(self) -> None:
        if not self._active():
            return

        for _, background in self.world.get_component(MenuBackground):
            arcade.draw_lrbt_rectangle_filled(
                0,
                self.window.width,
                0,
                self.window.height,
                background.color,
            )

        for _, text in self.world.get_component(MenuText):
            arcade.draw_text(
                text.text,
                text.x,
                text.y,
                text.color,
                text.font_size,
                width=text.width or 0,
                align="center",
                anchor_x="center",
                anchor_y="center",
                multiline=text.width is not None,
                bold=text.bold,
            )

        focused = self._input_system.focused_button()
        for _, button in self.world.get_component(MenuButton):
            left = button.x - button.width / 2
            bottom = button.y - button.height / 2
            is_focused = button is focused
            if not button.enabled:
                fill_color = arcade.color.GRAY_BLUE
            elif is_focused:
                fill_color = arcade.color.CRIMSON
            else:
                fill_color = arcade.color.DARK_SLATE_BLUE
            outline_color = arcade.color.WHITE if button.enabled else arcade.color.SILVER
            arcade.draw_lbwh_rectangle_filled(left, bottom, button.width, button.height, fill_color)
            arcade.draw_lbwh_rectangle_outline(
                left,
                bottom,
                button.width,
                button.height,
                outline_color,
                border_width=3 if is_focused else 2,
            )
            arcade.draw_text(
                button.label,
                button.x,
                button.y,
                arcade.color.WHITE,
                20,
                anchor_x="center",
                anchor_y="center",
                bold=True,
            )

    def _active(self) -> bool:
        return current_mode(self.world) in MENU_MODES
