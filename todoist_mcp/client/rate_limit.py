"""Client-side request budget for the Todoist API.

Todoist allows roughly 450 requests per 15 minutes per user. The window below
is a fixed window that restarts on the first check after it expires; it only
exists to avoid provoking the server's own 429 responses.
"""

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime

from ..utils.errors import RateLimitError

RATE_LIMIT = 450  # requests per window
WINDOW_SECONDS = 15 * 60


@dataclass
class RateWindow:
    """Request counter for the current rate window.

    ``check()`` runs before a request is sent and ``record()`` after it
    completes. The two are not atomic: coroutines that pass ``check()`` before
    any of them reaches ``record()`` can overshoot ``limit`` by the number of
    requests in flight.

    Attributes:
        limit: Maximum requests allowed per window
        duration: Window length in seconds
        clock: Time source returning UNIX seconds
        count: Requests completed in the current window
        window_start: UNIX time at which the current window began
    """

    limit: int = RATE_LIMIT
    duration: float = WINDOW_SECONDS
    clock: Callable[[], float] = time.time
    count: int = 0
    window_start: float = field(init=False, default=0.0)

    def __post_init__(self) -> None:
        self.window_start = self.clock()

    @property
    def reset_time(self) -> float:
        """UNIX time at which the current window ends."""
        return self.window_start + self.duration

    def check(self) -> None:
        """Start a new window if the current one expired, then enforce the limit.

        Raises:
            RateLimitError: If ``limit`` requests were already made in this window
        """
        now = self.clock()
        if now - self.window_start > self.duration:
            self.window_start = now
            self.count = 0

        if self.count >= self.limit:
            reset_time = self.reset_time
            raise RateLimitError(
                f"Rate limit exceeded. Resets at {datetime.fromtimestamp(reset_time, UTC).isoformat()}",
                reset_time=reset_time,
            )

    def record(self) -> None:
        """Count one completed request, successful or not."""
        self.count += 1

    @property
    def remaining(self) -> int:
        return max(self.limit - self.count, 0)
