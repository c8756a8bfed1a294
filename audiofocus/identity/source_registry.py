"""Thread-safe store of the media sources currently known."""

from __future__ import annotations

import threading
from collections.abc import Mapping

from ..media_source import MediaSource


class SourceRegistry:
    """Media sources keyed by id, shared between workers."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._sources: dict[str, MediaSource] = {}

    def upsert(self, source: MediaSource) -> None:
        with self._lock:
            self._sources[source.id] = source

    def get(self, source_id: str) -> MediaSource | None:
        with self._lock:
            return self._sources.get(source_id)

    def remove(self, source_id: str) -> MediaSource | None:
        with self._lock:
            return self._sources.pop(source_id, None)

    def find_by_pid(self, pid: int) -> MediaSource | None:
        with self._lock:
            return next(
                (
                    source
                    for source in self._sources.values()
                    if source.process is not None and source.process.process_id == pid
                ),
                None,
            )

    def list(self) -> list[MediaSource]:
        with self._lock:
            return [*self._sources.values()]

    def clear_stale(self, active_processes: Mapping[int, int]) -> list[str]:
        """Drop sources whose process is gone or was replaced; return their ids.

        ``active_processes`` maps running process ids to creation times.
        Sources without a process are kept.
        """
        with self._lock:
            stale_ids = [
                source_id
                for source_id, source in self._sources.items()
                if source.process is not None
                and active_processes.get(source.process.process_id)
                != source.process.creation_time
            ]
            for source_id in stale_ids:
                del self._sources[source_id]
            return stale_ids