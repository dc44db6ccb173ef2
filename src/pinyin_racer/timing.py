"""Countdown and elapsed-time helpers for quiz clients.

Not used by the HTTP service itself: a Python client (or a kiosk front-end
driving the game) runs the per-question countdown and measures level time
with these, then reports the result through ``update-time`` and
``submit-answer``.
"""

import asyncio
import math
import time
from collections.abc import Callable

WARNING_THRESHOLD_SECONDS = 3.0


class CountdownTimer:
    """Per-question countdown that fires ``on_timeout`` once when it hits zero.

    Driven either by calling :meth:`tick` directly or by awaiting :meth:`run`,
    which ticks every ``interval`` seconds.

    Args:
        duration: Seconds on the clock (10 for balloons, 15 for racing).
        on_tick: Called with the remaining seconds after every tick.
        on_timeout: Called once when the countdown reaches zero.
        interval: Seconds removed per tick.
    """

    def __init__(
        self,
        duration: float,
        on_tick: Callable[[float], None] | None = None,
        on_timeout: Callable[[], None] | None = None,
        interval: float = 0.1,
    ) -> None:
        self.duration = duration
        self.interval = interval
        self.time_remaining = duration
        self.is_running = False
        self._on_tick = on_tick or (lambda remaining: None)
        self._on_timeout = on_timeout or (lambda: None)

    @property
    def is_warning(self) -> bool:
        return self.time_remaining <= WARNING_THRESHOLD_SECONDS

    def start(self) -> None:
        if self.is_running:
            return
        self.is_running = True
        self.time_remaining = self.duration

    def tick(self) -> None:
        if not self.is_running:
            return
        # tenths stay exact, so the countdown hits 0
        self.time_remaining = round(self.time_remaining - self.interval, 1)
        self._on_tick(self.time_remaining)
        if self.time_remaining <= 0:
            self.stop()
            self._on_timeout()

    def stop(self) -> None:
        self.is_running = False

    def reset(self) -> None:
        self.stop()
        self.time_remaining = self.duration

    async def run(self) -> None:
        self.start()
        while self.is_running:
            await asyncio.sleep(self.interval)
            self.tick()


class LevelTimeTracker:
    """Measures how long the learner stays on a level."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._started_at: float | None = None
        self.accumulated_time = 0.0

    def start_level(self) -> None:
        self._started_at = self._clock()

    def end_level(self) -> float:
        """Stop timing and return the seconds since :meth:`start_level` (0 if not started)."""
        if self._started_at is None:
            return 0.0
        elapsed = self._clock() - self._started_at
        self.accumulated_time += elapsed
        self._started_at = None
        return elapsed

    def current_elapsed(self) -> float:
        if self._started_at is None:
            return 0.0
        return self._clock() - self._started_at

    def reset(self) -> None:
        self._started_at = None
        self.accumulated_time = 0.0


def format_time(seconds: float) -> str:
    """Format seconds as ``m:ss``."""
    mins = math.floor(seconds / 60)
    secs = math.floor(seconds % 60)
    return f"{mins}:{secs:02d}"


def spark_intensity(answer_time: float, max_time: float = 15) -> int:
    """Racing spark level 1-3; faster answers give bigger sparks."""
    return max(1, min(3, math.floor((max_time - answer_time) / 5) + 1))
