from dataclasses import dataclass


@dataclass(slots=True)
class SessionClock:
    """Stopwatch for the current puzzle, advanced by tick events."""
    elapsed: float = 0.0
    running: bool = False

    def start(self) -> None:
        self.elapsed = 0.0
        self.running = True

    def stop(self) -> None:
        self.running = False

    def advance(self, dt: float) -> None:
        if self.running and dt > 0:
            self.elapsed += dt


def format_elapsed(seconds: float) -> str:
    """Render seconds as ``mm:ss.ff``."""
    hundredths = int(round(max(seconds, 0.0) * 100))
    minutes, rest = divmod(hundredths, 60 * 100)
    secs, frac = divmod(rest, 100)
    return f"{minutes:02d}:{secs:02d}.{frac:02d}"
