"""Second/nanosecond durations and monotonic clock helpers."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass

NSEC_IN_SEC = 1_000_000_000

_period_requests = 0


@dataclass(frozen=True)
class Duration:
    """A span of time, or a point on the monotonic clock, in seconds and nanoseconds."""

    sec: int = 0
    nsec: int = 0

    @classmethod
    def from_seconds(cls, time: float) -> Duration:
        """Build a duration from a (possibly fractional) number of seconds."""
        total_ns = int(time * NSEC_IN_SEC)
        nsec = math.copysign(abs(total_ns) % NSEC_IN_SEC, total_ns)
        return cls(int(math.trunc(time)), int(nsec))

    @classmethod
    def now(cls) -> Duration:
        """Return the current reading of the monotonic clock."""
        return now()

    def sleep(self) -> bool:
        """Sleep for this duration; return False if it cannot be slept."""
        return sleep(self)

    def _key(self) -> tuple[int, int]:
        return (self.sec, self.nsec)

    def __float__(self) -> float:
        return self.sec + self.nsec / NSEC_IN_SEC

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __lt__(self, other: Duration) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: Duration) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return not other < self

    def __gt__(self, other: Duration) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return other < self

    def __ge__(self, other: Duration) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return not self < other

    def __add__(self, other: Duration) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        sec = self.sec + other.sec
        nsec = self.nsec + other.nsec
        if nsec >= NSEC_IN_SEC:
            carry, nsec = divmod(nsec, NSEC_IN_SEC)
            sec += carry
        return Duration(sec, nsec)

    def __sub__(self, other: Duration) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        sec = self.sec - other.sec
        nsec = self.nsec - other.nsec
        if nsec < 0:
            borrow, nsec = divmod(nsec, NSEC_IN_SEC)
            sec += borrow
        return Duration(sec, nsec)


def now() -> Duration:
    """Return the current reading of the monotonic clock."""
    sec, nsec = divmod(time.monotonic_ns(), NSEC_IN_SEC)
    return Duration(sec, nsec)


def sleep(duration: Duration) -> bool:
    """Sleep for ``duration``; return False if the duration is negative."""
    if duration < Duration():
        return False
    time.sleep(float(duration))
    return True


def monotonic_difference(start: Duration, end: Duration) -> Duration:
    """Return ``end - start``, clamped to zero when ``end`` precedes ``start``."""
    sec = end.sec - start.sec
    nsec = end.nsec - start.nsec
    if sec < 0:
        return Duration()
    if nsec < 0:
        if sec == 0:
            return Duration()
        return Duration(sec - 1, nsec + NSEC_IN_SEC)
    return Duration(sec, nsec)


def sleep_until(timestamp: Duration) -> bool:
    """Sleep until the monotonic clock reaches ``timestamp``."""
    remaining = monotonic_difference(now(), timestamp)
    time.sleep(float(remaining))
    return True


def time_period_init() -> None:
    """Request fine-grained timer resolution for subsequent sleeps."""
    global _period_requests
    _period_requests += 1


def time_period_deinit() -> None:
    """Release a request made with :func:`time_period_init`."""
    global _period_requests
    _period_requests = max(0, _period_requests - 1)