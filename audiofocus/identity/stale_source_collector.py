"""Removal of sources whose processes have exited."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..process import ProcessSnapshot, enumerate_processes
from .source_registry import SourceRegistry

_log = logging.getLogger(__name__)


class StaleSourceCollector:
    """Evicts registry entries that no longer match a running process."""

    def __init__(self, registry: SourceRegistry) -> None:
        self._registry = registry

    def collect(self, processes: Iterable[ProcessSnapshot] | None = None) -> list[str]:
        """Remove stale sources and return their ids.

        Without ``processes`` the running processes are enumerated.
        """
        if processes is None:
            processes = enumerate_processes()
        active = {process.process_id: process.creation_time for process in processes}
        removed = self._registry.clear_stale(active)
        for source_id in removed:
            _log.info("cleaned up stale media source %s", source_id)
        return removed