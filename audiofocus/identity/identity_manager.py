"""Stable identifiers for media sources."""

from __future__ import annotations

from ..media_source import MediaSourceKind, ProcessIdentity, normalize_component


class IdentityManager:
    """Builds the identifiers under which media sources are tracked."""

    def generate_id(
        self,
        process: ProcessIdentity,
        kind: MediaSourceKind,
        aumid: str,
        tab_key: str | None = None,
    ) -> str:
        """Build a stable id for a source.

        ``tab_key`` only affects browser kinds, giving each browser tab its
        own source; every other kind ignores it.
        """
        if kind.is_browser:
            if tab_key is not None:
                return f"browser:{kind.family}:tab:{tab_key}"
            return f"browser:{kind.family}"

        if kind == MediaSourceKind.STORE_APP:
            name = (
                process.package_full_name
                if process.package_full_name is not None
                else aumid
            )
            return f"store:{normalize_component(name)}"

        # The executable path stays stable across process id reuse.
        path_or_name = (
            process.executable_path
            if process.executable_path is not None
            else process.executable_name
        )
        return f"process:{normalize_component(path_or_name)}"