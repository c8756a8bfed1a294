"""The identity system: resolves sessions to stable, deduplicated sources."""

from __future__ import annotations

import logging
from dataclasses import replace

from ..events import AudioSessionSnapshot
from ..media_source import MediaSource, MediaSourceKind, SourceType
from ..process import browser_family_for_exe
from .identity_manager import IdentityManager
from .process_inspector import ProcessInspector
from .session_reconciler import SessionReconciler
from .source_classifier import SourceClassifier
from .source_registry import SourceRegistry
from .stale_source_collector import StaleSourceCollector

_log = logging.getLogger(__name__)


class IdentitySystem:
    """Turns audio sessions and transport-control sessions into media sources."""

    def __init__(self, inspector: ProcessInspector | None = None) -> None:
        self._registry = SourceRegistry()
        self._manager = IdentityManager()
        self._reconciler = SessionReconciler(self._registry)
        self._inspector = inspector if inspector is not None else ProcessInspector()
        self._classifier = SourceClassifier()
        self._collector = StaleSourceCollector(self._registry)

    def resolve_wasapi_session(self, snapshot: AudioSessionSnapshot) -> MediaSource | None:
        """Resolve an audio session, or None for ignored and browser processes."""
        process = self._inspector.inspect_process(snapshot.process_id)

        if self._classifier.should_ignore(process.executable_name):
            return None

        # Audio sessions cannot tell browser tabs apart; browser audio is
        # tracked only through per-tab transport-control sources.
        if browser_family_for_exe(process.executable_name) is not None:
            return None

        if process.package_full_name is not None:
            kind = MediaSourceKind.STORE_APP
            aumid = process.package_full_name
        else:
            kind = MediaSourceKind.DESKTOP_APP
            aumid = process.executable_name

        source = MediaSource(
            id=self._manager.generate_id(process, kind, aumid, None),
            kind=kind,
            source_type=SourceType.NON_SMTC,
            capability=self._classifier.classify(process.executable_name, kind),
            source_app_user_model_id=aumid,
            process=process,
        )
        source = self._reconciler.reconcile_wasapi_session(source)
        self._registry.upsert(source)
        _log.debug(
            "resolved WASAPI audio session pid=%s to media source %s",
            snapshot.process_id,
            source.id,
        )
        return source

    def resolve_smtc_source(
        self, source: MediaSource, tab_key: str | None = None
    ) -> MediaSource | None:
        """Resolve a transport-control source, or None for ignored processes."""
        process = source.process
        if process is not None:
            if self._classifier.should_ignore(process.executable_name):
                return None
            source = replace(
                source,
                capability=self._classifier.classify(process.executable_name, source.kind),
                id=self._manager.generate_id(
                    process, source.kind, source.source_app_user_model_id, tab_key
                ),
            )
        elif tab_key is not None:
            # Keep unresolved tabs distinct so they do not collide.
            source = replace(source, id=f"{source.id}:tab:{tab_key}")

        source = self._reconciler.reconcile_smtc_session(source)
        self._registry.upsert(source)
        _log.debug("resolved SMTC session to media source %s", source.id)
        return source

    def cleanup_stale(self) -> list[str]:
        return self._collector.collect()

    def registry(self) -> SourceRegistry:
        return self._registry