"""Dropping of duplicate events that arrive in quick succession."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

_log = logging.getLogger(__name__)


class DebounceCoordinator:
    """Drops a repeat of the same event for the same source within a window."""

    def __init__(self, window: float, clock: Callable[[], float] = time.monotonic) -> None:
        self._window = window
        self._clock = clock
        self._last_seen: dict[tuple[str, str], float] = {}

    def should_drop(self, source_id: str, event_name: str) -> bool:
        key = (source_id, event_name)
        now = self._clock()
        previous = self._last_seen.get(key)
        if previous is not None and now - previous < self._window:
            _log.info(
                "arbitration debounce dropped duplicate event %s for %s",
                event_name,
                source_id,
            )
            return True
        self._last_seen[key] = now
        return False