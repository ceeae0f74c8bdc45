"""Input handling for the ECS-driven menu screens."""
from esper import World

from dotqueens.components.game_state import MENU_MODES
from dotqueens.constants import (
    KEY_DOWN,
    KEY_ENTER,
    KEY_ESCAPE,
    KEY_RETURN,
    KEY_SPACE,
    KEY_UP,
    MOUSE_BUTTON_LEFT,
)
from dotqueens.events.bus import (
    EVENT_MENU_ABOUT_SELECTED,
    EVENT_MENU_BACK_SELECTED,
    EVENT_MENU_EXIT_SELECTED,
    EVENT_MENU_LEVEL_SELECTED,
    EVENT_MENU_START_SELECTED,
    EventBus,
)
from dotqueens.menu.components import MenuAction, MenuButton, MenuFocus
from dotqueens.utils.game_state import current_mode


class MenuInputSystem:
    """Processes clicks and keys while a menu screen is shown.

    The window calls ``handle_mouse_press``/``handle_key_press`` directly for
    menu modes, so a selection that switches into play never leaks the same
    press into the board input.
    """

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self._event_bus = event_bus

    def handle_mouse_press(self, x: float, y: float, button: int) -> None:
        """Activate the button under the pointer, if any."""
        if not self._active() or button != MOUSE_BUTTON_LEFT:
            return
        for _, menu_button in self.world.get_component(MenuButton):
            if not menu_button.enabled:
                continue
            if self._point_inside_button(x, y, menu_button):
                self._activate(menu_button)
                return

    def handle_key_press(self, symbol: int, modifiers: int = 0) -> None:
        """Up/Down move focus, Enter/Space activate, Escape goes back."""
        if not self._active():
            return
        buttons = self.ordered_buttons()
        if not buttons:
            return
        focus = self._focus()
        if symbol == KEY_UP:
            focus.index = (focus.index - 1) % len(buttons)
        elif symbol == KEY_DOWN:
            focus.index = (focus.index + 1) % len(buttons)
        elif symbol in (KEY_ENTER, KEY_RETURN, KEY_SPACE):
            self._activate(buttons[min(focus.index, len(buttons) - 1)])
        elif symbol == KEY_ESCAPE:
            for button in buttons:
                if button.action == MenuAction.BACK:
                    self._activate(button)
                    return

    def ordered_buttons(self) -> list[MenuButton]:
        buttons = [b for _, b in self.world.get_component(MenuButton) if b.enabled]
        return sorted(buttons, key=lambda b: b.order)

    def focused_button(self) -> MenuButton | None:
        buttons = self.ordered_buttons()
        if not buttons:
            return None
        return buttons[min(self._focus().index, len(buttons) - 1)]

    def _activate(self, button: MenuButton) -> None:
        action = button.action
        if action == MenuAction.START_GAME:
            self._event_bus.emit(EVENT_MENU_START_SELECTED)
        elif action == MenuAction.ABOUT:
            self._event_bus.emit(EVENT_MENU_ABOUT_SELECTED)
        elif action == MenuAction.EXIT:
            self._event_bus.emit(EVENT_MENU_EXIT_SELECTED)
        elif action == MenuAction.SELECT_LEVEL and button.size is not None:
            self._event_bus.emit(EVENT_MENU_LEVEL_SELECTED, size=button.size, label=button.label)
        elif action == MenuAction.BACK:
            self._event_bus.emit(EVENT_MENU_BACK_SELECTED)

    def _focus(self) -> MenuFocus:
        for _, focus in self.world.get_component(MenuFocus):
            return focus
        focus = MenuFocus()
        self.world.create_entity(focus)
        return focus

    def _active(self) -> bool:
        return current_mode(self.world) in MENU_MODES

    @staticmethod
    def _point_inside_button(x: float, y: float, button: MenuButton) -> bool:
        half_w = button.width / 2
        half_h = button.height / 2
        return (button.x - half_w) <= x <= (button.x + half_w) and (button.y - half_h) <= y <= (button.y + half_h)
