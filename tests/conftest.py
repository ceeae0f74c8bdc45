import sys, os

# Ensure src is on path for test imports
ROOT = os.path.dirname(os.path.dirname(__file__))
SRC = os.path.join(ROOT, 'src')
if SRC not in sys.path:
    sys.path.insert(0, SRC)

import pytest

from dotqueens.components.board import Board

# 2x2 quadrants; the only valid placement is columns [1, 3, 0, 2] (or its mirror).
QUADRANTS = [
    ["red", "red", "blue", "blue"],
    ["red", "red", "blue", "blue"],
    ["green", "green", "yellow", "yellow"],
    ["green", "green", "yellow", "yellow"],
]

# Red and blue are both confined to row 0, so no placement exists.
UNSOLVABLE = [
    ["red", "blue", "green", "green"],
    ["green", "green", "green", "green"],
    ["yellow", "yellow", "yellow", "yellow"],
    ["yellow", "yellow", "yellow", "yellow"],
]


@pytest.fixture
def quadrant_board() -> Board:
    return Board.from_colors(QUADRANTS)


@pytest.fixture
def unsolvable_board() -> Board:
    return Board.from_colors(UNSOLVABLE)
