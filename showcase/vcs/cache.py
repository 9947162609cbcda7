"""In-memory response cache with a fixed time-to-live."""

from __future__ import annotations

import time
from collections.abc import Callable, Hashable
from typing import Any


class TTLCache:
    """Keeps each value for `ttl` seconds after it was stored.

    Entries are never invalidated early. An expired entry is dropped when it
    is looked up, and every write sweeps out whatever else has expired.
    A ttl of 0 disables caching entirely.
    """

    def __init__(self, ttl: float, clock: Callable[[], float] = time.monotonic) -> None:
        self.ttl = ttl
        self._clock = clock
        self._entries: dict[Hashable, tuple[float, Any]] = {}

    def get(self, key: Hashable) -> Any | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        stored_at, value = entry
        if self._clock() - stored_at >= self.ttl:
            del self._entries[key]
            return None
        return value

    def set(self, key: Hashable, value: Any) -> None:
        if self.ttl <= 0:
            return
        now = self._clock()
        self._purge(now)
        self._entries[key] = (now, value)

    def _purge(self, now: float) -> None:
        expired = [
            key for key, (stored_at, _) in self._entries.items()
            if now - stored_at >= self.ttl
        ]
        for key in expired:
            del self._entries[key]

    def __len__(self) -> int:
        return len(self._entries)
