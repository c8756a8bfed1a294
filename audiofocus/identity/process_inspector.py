"""Looking up the identity of a process by its id."""

from __future__ import annotations

from ..media_source import ProcessIdentity
from ..process import resolve_process


class ProcessInspector:
    """Resolves process ids to process identities."""

    def inspect_process(self, process_id: int) -> ProcessIdentity:
        return resolve_process(process_id, "Unknown").identity()