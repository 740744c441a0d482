"""
Master Clock - one shared progress signal for the whole artwork.

Wall-clock time folds into a triangle wave (0 -> 1 over the first half of the
loop, 1 -> 0 over the second), then gets a cubic ease. Every renderer derives
its own "virtual time" from this single value, so rewinding is just the value
falling again - no separate reverse code path.
"""

import time
from typing import Callable, Optional

from .display.design import TIMING, ease_in_out_cubic


def loop_position(time_ms: float, loop_duration_ms: float = TIMING.LOOP_DURATION_MS) -> float:
    """Linear 0 -> 1 -> 0 position within the loop. Periodic in loop_duration_ms."""
    half = loop_duration_ms / 2
    t = time_ms % loop_duration_ms
    if t < half:
        return t / half
    return 1.0 - (t - half) / half


def master_progress(time_ms: float, loop_duration_ms: float = TIMING.LOOP_DURATION_MS) -> float:
    """Eased master progress in [0, 1]."""
    return ease_in_out_cubic(loop_position(time_ms, loop_duration_ms))


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class MasterClock:
    """
    Reads a monotonic millisecond time source relative to its own start.

    time_source is injectable (tests, offline rendering); defaults to
    time.monotonic().
    """

    def __init__(
        self,
        loop_duration_ms: float = TIMING.LOOP_DURATION_MS,
        time_source: Optional[Callable[[], float]] = None,
    ):
        if loop_duration_ms <= 0:
            raise ValueError(f"loop_duration_ms must be positive, got {loop_duration_ms}")
        self.loop_duration_ms = loop_duration_ms
        self._time_source = time_source or _monotonic_ms
        self._start_ms = self._time_source()

    def now_ms(self) -> float:
        """Milliseconds since the clock started."""
        return self._time_source() - self._start_ms

    def restart(self) -> None:
        self._start_ms = self._time_source()

    def progress(self, time_ms: Optional[float] = None) -> float:
        """Master progress at time_ms (default: now)."""
        if time_ms is None:
            time_ms = self.now_ms()
        return master_progress(time_ms, self.loop_duration_ms)
