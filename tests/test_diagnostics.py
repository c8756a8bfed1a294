from audiofocus.hardening.diagnostics import DiagnosticsCollector
from audiofocus.identity.source_registry import SourceRegistry
from audiofocus.media_source import (
    MediaCapability,
    MediaSource,
    MediaSourceKind,
    SourceType,
)


def make_source(source_id, aumid, source_type, capability):
    return MediaSource(
        id=source_id,
        kind=MediaSourceKind.DESKTOP_APP,
        source_type=source_type,
        capability=capability,
        source_app_user_model_id=aumid,
    )


def test_empty_registry_report():
    report = DiagnosticsCollector(SourceRegistry()).collect_snapshot()
    assert report == "--- AudioFocus Runtime Diagnostics ---\nTracked Sources: 0\n"


def test_report_lists_each_source():
    registry = SourceRegistry()
    registry.upsert(
        make_source("process:vlc", "VLC", SourceType.NON_SMTC, MediaCapability.DEDICATED_PLAYER)
    )
    report = DiagnosticsCollector(registry).collect_snapshot()
    lines = report.splitlines()
    assert lines[1] == "Tracked Sources: 1"
    assert lines[2] == "- [process:vlc] VLC (Type: non_smtc, Capability: dedicated_player)"


def test_report_reflects_registry_changes():
    registry = SourceRegistry()
    collector = DiagnosticsCollector(registry)
    registry.upsert(make_source("a", "A", SourceType.SMTC, MediaCapability.UNKNOWN))
    registry.upsert(make_source("b", "B", SourceType.HYBRID, MediaCapability.STREAMING_APP))
    assert len(collector.collect_snapshot().splitlines()) == 4
    registry.remove("a")
    report = collector.collect_snapshot()
    assert "[a]" not in report
    assert "- [b] B (Type: hybrid, Capability: streaming_app)" in report