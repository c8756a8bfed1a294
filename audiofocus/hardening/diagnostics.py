"""A human-readable report of the runtime's tracked sources."""

from __future__ import annotations

from ..identity.source_registry import SourceRegistry


class DiagnosticsCollector:
    """Builds diagnostic reports from the source registry."""

    def __init__(self, registry: SourceRegistry) -> None:
        self._registry = registry

    def collect_snapshot(self) -> str:
        sources = self._registry.list()
        lines = [
            "--- AudioFocus Runtime Diagnostics ---",
            f"Tracked Sources: {len(sources)}",
        ]
        lines.extend(
            f"- [{source.id}] {source.source_app_user_model_id} "
            f"(Type: {source.source_type}, Capability: {source.capability})"
            for source in sources
        )
        return "\n".join(lines) + "\n"