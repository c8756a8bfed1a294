"""Merging of sources seen through different channels for one process."""

from __future__ import annotations

from dataclasses import replace

from ..media_source import MediaSource, SourceType
from .source_registry import SourceRegistry


def _same_process(existing: MediaSource, candidate: MediaSource) -> bool:
    return (
        existing.process is not None
        and candidate.process is not None
        and existing.process.creation_time == candidate.process.creation_time
    )


class SessionReconciler:
    """Unifies audio-session and transport-control views of the same process."""

    def __init__(self, registry: SourceRegistry) -> None:
        self._registry = registry

    def reconcile_wasapi_session(self, source: MediaSource) -> MediaSource:
        source = replace(source, source_type=SourceType.NON_SMTC)

        # Browser audio is per process, not per tab; never merge by process id.
        if source.kind.is_browser:
            return source

        pid = source.process.process_id if source.process is not None else 0
        existing = self._registry.find_by_pid(pid)
        if existing is not None and _same_process(existing, source):
            if existing.source_type is SourceType.SMTC:
                return replace(existing, source_type=SourceType.HYBRID)
            return existing

        return source

    def reconcile_smtc_session(self, source: MediaSource) -> MediaSource:
        source = replace(source, source_type=SourceType.SMTC)

        # Every browser tab shares the browser's process; keep tabs separate.
        if source.kind.is_browser:
            return source

        if source.process is not None:
            existing = self._registry.find_by_pid(source.process.process_id)
            if existing is not None and _same_process(existing, source):
                if existing.source_type is SourceType.NON_SMTC:
                    return replace(existing, source_type=SourceType.HYBRID)
                return existing

        return source