"""Limiting how many events are admitted within a sliding time window."""

from __future__ import annotations

import logging
import threading
import time
from collections import deque
from collections.abc import Callable

_log = logging.getLogger(__name__)

_DEFAULT_MESSAGE = "Event storm detected; suppressing additional events"


class EventStormProtector:
    """Admits at most ``max_events`` events within any sliding ``window`` seconds."""

    def __init__(
        self,
        window: float,
        max_events: int,
        clock: Callable[[], float] = time.monotonic,
        *,
        message: str = _DEFAULT_MESSAGE,
    ) -> None:
        self._window = window
        self._max_events = max_events
        self._clock = clock
        self._message = message
        self._history: deque[float] = deque()
        self._lock = threading.Lock()

    def check_and_record(self) -> bool:
        """Record an event and return True, or return False if it must be dropped."""
        with self._lock:
            now = self._clock()
            history = self._history
            while history and now - history[0] > self._window:
                history.popleft()

            if len(history) >= self._max_events:
                _log.warning(
                    "%s (%d events in %.0f ms)",
                    self._message,
                    len(history),
                    self._window * 1000,
                )
                return False

            history.append(now)
            return True