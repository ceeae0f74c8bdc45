"""Exception types raised by the puzzle engine."""


class ConfigurationError(ValueError):
    """Requested board configuration cannot be built (bad size, unknown colour, malformed grid)."""


class OutOfBoundsError(IndexError):
    """Grid access outside ``[0, size)`` on either axis."""

    def __init__(self, row: int, col: int, rows: int, cols: int) -> None:
        super().__init__(f"cell ({row}, {col}) is outside a {rows}x{cols} grid")
        self.row = row
        self.col = col


class GenerationExhausted(RuntimeError):
    """No solvable region partition was found within the attempt budget."""

    def __init__(self, size: int, attempts: int) -> None:
        super().__init__(f"no solvable {size}x{size} board after {attempts} attempts")
        self.size = size
        self.attempts = attempts
