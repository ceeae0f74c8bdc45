from dataclasses import dataclass


@dataclass(slots=True)
class ColorRegistry:
    """Empty tag component marking the single entity that stores the colour palette.

    The same entity also carries a ColorPalette component mapping colour id -> display colour.
    """
    pass
