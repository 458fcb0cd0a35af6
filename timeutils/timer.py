"""Countdown timer driven by explicit time steps."""

from __future__ import annotations

from timeutils.duration import Duration


class Timer:
    """Counts a duration down as time deltas are fed to :meth:`update`."""

    def __init__(self, duration: Duration, start: bool = False) -> None:
        self._counting = start
        self._duration = duration
        self._remaining = duration

    def start(self, new_duration: Duration | None = None) -> None:
        """Start counting, optionally resetting to a new duration."""
        if new_duration is not None:
            self._duration = self._remaining = new_duration
        self._counting = True

    def restart(self) -> None:
        """Reset the remaining time to the full duration and start."""
        self.start(self._duration)

    def stop(self) -> None:
        """Stop counting."""
        self._counting = False

    def update(self, dt: Duration) -> Duration:
        """Advance the timer by ``dt`` and return the remaining time."""
        if self.is_ready():
            return self._remaining
        if self._remaining > Duration():
            self._remaining -= dt
            return self._remaining
        self._remaining = Duration()
        self.stop()
        return self._remaining

    def duration(self) -> Duration:
        """Return the full duration."""
        return self._duration

    def remaining(self) -> Duration:
        """Return the time left."""
        return self._remaining

    def elapsed(self) -> Duration:
        """Return the time counted down so far."""
        return self._duration - self._remaining

    def is_ready(self) -> bool:
        """Return True once no time remains."""
        return self._remaining <= Duration()