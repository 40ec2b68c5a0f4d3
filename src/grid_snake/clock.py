"""Fixed-rate tick accounting."""

from __future__ import annotations


class TickClock:
    """Turns elapsed wall time into a whole number of owed ticks.

    Fractions of a tick carry over to the next call, so a host that wakes up
    late catches up with several ticks and one that wakes up early gets none.
    """

    def __init__(self, rate: float) -> None:
        if rate <= 0:
            raise ValueError("Tick rate must be positive.")
        self.rate = rate
        self._residual = 0.0
        self._last: float | None = None

    @property
    def interval(self) -> float:
        """Seconds between ticks."""
        return 1.0 / self.rate

    def reset(self) -> None:
        self._residual = 0.0
        self._last = None

    def advance(self, elapsed: float) -> int:
        """Add *elapsed* seconds and return how many ticks are now owed."""
        if elapsed < 0:
            raise ValueError("Elapsed time cannot be negative.")
        self._residual += elapsed * self.rate
        owed = int(self._residual)
        self._residual -= owed
        return owed

    def owed_ticks(self, now: float) -> int:
        """Measure against the previous timestamp; the first call owes nothing."""
        if self._last is None:
            self._last = now
            return 0
        elapsed = now - self._last
        self._last = now
        return self.advance(elapsed)
