"""Per-tool request throttling."""

import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from notesmcp.config import get_config

DEFAULT_MAX_REQUESTS = 30
DEFAULT_WINDOW_SECONDS = 60.0

RATE_LIMIT_MESSAGE = "Rate limit exceeded. Please try again later."


@dataclass
class RateWindow:
    count: int
    reset_time: float


class RateLimiter:
    """Fixed-window rate limiter keyed by tool name.

    The clock is injected so tests can move time without sleeping.
    """

    def __init__(
        self,
        max_requests: int = DEFAULT_MAX_REQUESTS,
        window_seconds: float = DEFAULT_WINDOW_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        if max_requests < 1:
            raise ValueError(f"max_requests must be >= 1, got {max_requests}")
        if window_seconds <= 0:
            raise ValueError(f"window_seconds must be > 0, got {window_seconds}")
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self.clock = clock
        self.windows: Dict[str, RateWindow] = {}

    def check(self, key: str) -> Tuple[bool, str]:
        """
        Count one request against ``key``.

        Returns:
            (allowed, message) - If not allowed, message explains why
        """
        now = self.clock()
        window = self.windows.get(key)

        if window is None or now > window.reset_time:
            self.windows[key] = RateWindow(count=1, reset_time=now + self.window_seconds)
            return True, ""

        if window.count >= self.max_requests:
            return False, RATE_LIMIT_MESSAGE

        window.count += 1
        return True, ""

    def reset(self, key: str) -> None:
        self.windows.pop(key, None)

    def reset_all(self) -> None:
        self.windows.clear()


# Default instance
_rate_limiter: Optional[RateLimiter] = None


def get_rate_limiter() -> RateLimiter:
    """Get or create the default rate limiter instance."""
    global _rate_limiter
    if _rate_limiter is None:
        config = get_config()
        _rate_limiter = RateLimiter(
            max_requests=config["rate_limit"],
            window_seconds=config["rate_window"],
        )
    return _rate_limiter


def set_rate_limiter(limiter: Optional[RateLimiter]) -> None:
    """Replace the default rate limiter instance (``None`` rebuilds it lazily)."""
    global _rate_limiter
    _rate_limiter = limiter
