import random

import pytest

from dotqueens.components.game_state import GameMode
from dotqueens.constants import (
    KEY_DOWN,
    KEY_ENTER,
    KEY_ESCAPE,
    KEY_H,
    KEY_LEFT,
    KEY_R,
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
from dotqueens.systems.board import BoardSystem
from dotqueens.systems.input import InputSystem
from dotqueens.ui.layout import cell_origin, compute_board_geometry
from dotqueens.utils.game_state import set_game_mode
from dotqueens.world import create_world


class DummyWindow:
    width = 800
    height = 640


@pytest.fixture
def setup():
    bus = EventBus()
    world = create_world(GameMode.PLAYING, rng=random.Random(5))
    board_system = BoardSystem(world, bus)
    board_system.start_game(4)
    InputSystem(bus, DummyWindow(), world)
    return bus, world


def record(bus, *names):
    seen = []
    for name in names:
        bus.subscribe(name, lambda sender, _name=name, **kw: seen.append((_name, kw)))
    return seen


@pytest.mark.parametrize(
    "symbol,expected",
    [
        (KEY_UP, (EVENT_CURSOR_MOVE, {"d_row": -1, "d_col": 0})),
        (KEY_DOWN, (EVENT_CURSOR_MOVE, {"d_row": 1, "d_col": 0})),
        (KEY_LEFT, (EVENT_CURSOR_MOVE, {"d_row": 0, "d_col": -1})),
        (KEY_ENTER, (EVENT_MARKER_TOGGLE_REQUEST, {})),
        (KEY_SPACE, (EVENT_MARKER_TOGGLE_REQUEST, {})),
        (KEY_R, (EVENT_MARKERS_RESET_REQUEST, {})),
        (KEY_H, (EVENT_HELP_TOGGLE, {})),
        (KEY_ESCAPE, (EVENT_RETURN_TO_MENU, {})),
    ],
)
def test_key_mapping(setup, symbol, expected):
    bus, world = setup
    seen = record(bus, EVENT_CURSOR_MOVE, EVENT_MARKER_TOGGLE_REQUEST, EVENT_MARKERS_RESET_REQUEST,
                  EVENT_HELP_TOGGLE, EVENT_RETURN_TO_MENU)
    bus.emit(EVENT_KEY_PRESS, symbol=symbol, modifiers=0)
    assert seen == [expected]


def test_unmapped_key_is_ignored(setup):
    bus, world = setup
    seen = record(bus, EVENT_CURSOR_MOVE, EVENT_MARKER_TOGGLE_REQUEST)
    bus.emit(EVENT_KEY_PRESS, symbol=ord("z"), modifiers=0)
    assert seen == []


def test_click_maps_to_cell(setup):
    bus, world = setup
    seen = record(bus, EVENT_CELL_CLICK)
    geometry = compute_board_geometry(DummyWindow.width, DummyWindow.height, 4)
    left, bottom = cell_origin(2, 1, 4, geometry)
    half = geometry[0] / 2
    bus.emit(EVENT_MOUSE_PRESS, x=left + half, y=bottom + half, button=MOUSE_BUTTON_LEFT)
    assert seen == [(EVENT_CELL_CLICK, {"row": 2, "col": 1})]


def test_click_outside_board_or_other_button_is_ignored(setup):
    bus, world = setup
    seen = record(bus, EVENT_CELL_CLICK)
    bus.emit(EVENT_MOUSE_PRESS, x=1, y=1, button=MOUSE_BUTTON_LEFT)
    geometry = compute_board_geometry(DummyWindow.width, DummyWindow.height, 4)
    left, bottom = cell_origin(0, 0, 4, geometry)
    bus.emit(EVENT_MOUSE_PRESS, x=left + 5, y=bottom + 5, button=4)
    assert seen == []


def test_input_ignored_outside_play(setup):
    bus, world = setup
    set_game_mode(world, bus, GameMode.MENU)
    seen = record(bus, EVENT_CURSOR_MOVE, EVENT_CELL_CLICK)
    bus.emit(EVENT_KEY_PRESS, symbol=KEY_DOWN, modifiers=0)
    bus.emit(EVENT_MOUSE_PRESS, x=400, y=300, button=MOUSE_BUTTON_LEFT)
    assert seen == []
