import os

from audiofocus.identity.source_registry import SourceRegistry
from audiofocus.identity.stale_source_collector import StaleSourceCollector
from audiofocus.media_source import (
    MediaCapability,
    MediaSource,
    MediaSourceKind,
    ProcessIdentity,
    SourceType,
)
from audiofocus.process import ProcessSnapshot, resolve_process


def make_source(source_id, pid, creation_time):
    return MediaSource(
        id=source_id,
        kind=MediaSourceKind.DESKTOP_APP,
        source_type=SourceType.NON_SMTC,
        capability=MediaCapability.UNKNOWN,
        source_app_user_model_id="app.exe",
        process=ProcessIdentity(process_id=pid, creation_time=creation_time),
    )


def test_collect_with_given_processes():
    registry = SourceRegistry()
    registry.upsert(make_source("process:alive", 1, 10))
    registry.upsert(make_source("process:dead", 2, 10))
    registry.upsert(make_source("process:reused", 3, 10))
    collector = StaleSourceCollector(registry)

    removed = collector.collect(
        [ProcessSnapshot(process_id=1, creation_time=10), ProcessSnapshot(process_id=3, creation_time=11)]
    )

    assert sorted(removed) == ["process:dead", "process:reused"]
    assert [s.id for s in registry.list()] == ["process:alive"]


def test_collect_with_no_processes_removes_all_process_sources():
    registry = SourceRegistry()
    registry.upsert(make_source("process:a", 1, 10))
    assert StaleSourceCollector(registry).collect([]) == ["process:a"]
    assert registry.list() == []


def test_collect_enumerates_running_processes():
    pid = os.getpid()
    creation_time = resolve_process(pid, "").creation_time
    registry = SourceRegistry()
    registry.upsert(make_source("process:self", pid, creation_time))
    registry.upsert(make_source("process:old-self", pid, creation_time + 1))

    removed = StaleSourceCollector(registry).collect()

    assert "process:old-self" in removed
    assert "process:self" not in removed
    assert registry.get("process:self") is not None
    assert registry.get("process:old-self") is None