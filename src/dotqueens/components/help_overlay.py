from dataclasses import dataclass


@dataclass(slots=True)
class HelpOverlay:
    """Whether blocked cells are highlighted for the player."""
    visible: bool = False
