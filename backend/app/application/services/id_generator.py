"""Injected clock and id generation.

Ids are ``<prefix>-<epoch milliseconds>``. Two ids requested within the same
millisecond would collide, so the generator never hands out a millisecond
value twice: it bumps to ``last + 1`` instead.
"""

from collections.abc import Callable
from datetime import datetime, timezone

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TimestampIdGenerator:
    """Produces ``user-1718000000000`` style ids from an injected clock."""

    def __init__(self, clock: Clock = utc_now):
        self._clock = clock
        self._last_ms = 0

    def new_id(self, prefix: str) -> str:
        millis = int(self._clock().timestamp() * 1000)
        if millis <= self._last_ms:
            millis = self._last_ms + 1
        self._last_ms = millis
        return f"{prefix}-{millis}"
