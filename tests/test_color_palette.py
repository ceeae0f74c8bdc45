import pytest

from dotqueens.components.color_palette import ColorPalette
from dotqueens.constants import DEFAULT_COLORS
from dotqueens.errors import ConfigurationError


def test_default_palette_supports_ten_colours():
    palette = ColorPalette(colors=DEFAULT_COLORS)
    assert palette.max_board_size == 10
    assert palette.selectable_colors() == list(DEFAULT_COLORS.keys())


def test_selectable_filters_unknown_and_duplicate_ids():
    palette = ColorPalette(
        colors={"red": (255, 0, 0), "blue": (0, 0, 255)},
        selectable=["blue", "pink", "blue", "red"],
    )
    assert palette.selectable_colors() == ["blue", "red"]


def test_display_for_unknown_colour_raises_configuration_error():
    palette = ColorPalette(colors=DEFAULT_COLORS)
    assert palette.display_for("red") == DEFAULT_COLORS["red"]
    with pytest.raises(ConfigurationError):
        palette.display_for("chartreuse")

