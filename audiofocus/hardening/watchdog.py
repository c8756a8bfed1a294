"""Detection of worker threads that stopped reporting in."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable

_log = logging.getLogger(__name__)


class Watchdog:
    """Tracks worker heartbeats and reports workers silent for longer than ``timeout``."""

    def __init__(self, timeout: float, clock: Callable[[], float] = time.monotonic) -> None:
        self._timeout = timeout
        self._clock = clock
        self._heartbeats: dict[str, float] = {}
        self._lock = threading.Lock()

    def heartbeat(self, worker_name: str) -> None:
        with self._lock:
            self._heartbeats[worker_name] = self._clock()

    def check_health(self) -> list[str]:
        """Names of workers whose last heartbeat is older than the timeout."""
        now = self._clock()
        with self._lock:
            failed = [
                name
                for name, last_seen in self._heartbeats.items()
                if now - last_seen > self._timeout
            ]
        for name in failed:
            _log.error("Watchdog detected stalled worker thread %s", name)
        return failed