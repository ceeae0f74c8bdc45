import random

import pytest

from dotqueens.components.game_state import GameMode
from dotqueens.events.bus import EventBus, EVENT_HELP_TOGGLE, EVENT_MARKER_TOGGLE_REQUEST, EVENT_TICK
from dotqueens.systems.board import BoardSystem
from dotqueens.systems.game_flow_system import GameFlowSystem
from dotqueens.systems.render import RenderSystem
from dotqueens.world import create_world


class DummyWindow:
    width = 800
    height = 640


@pytest.fixture
def playing():
    bus = EventBus()
    world = create_world(rng=random.Random(8))
    render = RenderSystem(world, bus, DummyWindow())
    BoardSystem(world, bus)
    flow = GameFlowSystem(world, bus)
    flow.start_level(4)
    return bus, world, render


def test_status_reports_missing_colours_on_fresh_board(playing):
    bus, world, render = playing
    assert render.status_text() == "State: At least one Color has no Queen!"


def test_status_follows_validation(playing):
    bus, world, render = playing
    bus.emit(EVENT_MARKER_TOGGLE_REQUEST, row=0, col=0)
    bus.emit(EVENT_MARKER_TOGGLE_REQUEST, row=1, col=1)
    assert render.status_text() == "State: Diagonal conflict!"
    bus.emit(EVENT_MARKER_TOGGLE_REQUEST, row=1, col=0)
    assert render.status_text() == "State: Row/Column conflict!"


def test_timer_and_help_text(playing):
    bus, world, render = playing
    bus.emit(EVENT_TICK, dt=61.5)
    assert render.timer_text() == "Time: 01:01.50"
    assert render.help_text() == "Help view: Disabled"
    bus.emit(EVENT_HELP_TOGGLE)
    assert render.help_text() == "Help view: Enabled"


def test_headless_process_builds_cell_layout(playing):
    bus, world, render = playing
    bus.emit(EVENT_HELP_TOGGLE)
    bus.emit(EVENT_MARKER_TOGGLE_REQUEST, row=0, col=0)
    render.process()
    layout = render._last_cell_layout
    assert len(layout) == 16
    assert layout[(0, 0)]["marker"]
    assert layout[(0, 1)]["blocked"]
    assert layout[(1, 1)]["blocked"]
    assert not layout[(0, 0)]["blocked"]
    assert all(len(entry["color"]) == 3 for entry in layout.values())
