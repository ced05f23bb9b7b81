import math
import time
from collections.abc import Callable

WINDOW_SECONDS = 60.0


class RateLimiter:
    """Allows at most ``max_per_minute`` submissions per rolling minute.

    The count resets once more than a minute has passed since the last
    recorded submission. No locking: submissions come from one control flow.
    """

    def __init__(
        self,
        max_per_minute: int = 5,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._max_per_minute = max_per_minute
        self._clock = clock
        self._last_submission: float | None = None
        self._attempts = 0

    def check(self) -> bool:
        """Return True when another submission is allowed right now."""
        now = self._clock()
        if self._last_submission is None or now - self._last_submission > WINDOW_SECONDS:
            self._attempts = 0
        return self._attempts < self._max_per_minute

    def record(self) -> None:
        self._attempts += 1
        self._last_submission = self._clock()

    def seconds_until_reset(self) -> int:
        if self._last_submission is None:
            return 0
        remaining = WINDOW_SECONDS - (self._clock() - self._last_submission)
        return max(0, math.ceil(remaining))
