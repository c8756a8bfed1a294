from audiofocus.identity.session_reconciler import SessionReconciler
from audiofocus.identity.source_registry import SourceRegistry
from audiofocus.media_source import (
    BrowserFamily,
    MediaCapability,
    MediaSource,
    MediaSourceKind,
    ProcessIdentity,
    SourceType,
)


def make_source(source_id, source_type, pid=None, creation_time=7, kind=None):
    process = None
    if pid is not None:
        process = ProcessIdentity(
            process_id=pid, creation_time=creation_time, executable_name="player.exe"
        )
    return MediaSource(
        id=source_id,
        kind=kind or MediaSourceKind.DESKTOP_APP,
        source_type=source_type,
        capability=MediaCapability.UNKNOWN,
        source_app_user_model_id="player",
        process=process,
    )


def reconciler_with(*sources):
    registry = SourceRegistry()
    for source in sources:
        registry.upsert(source)
    return SessionReconciler(registry)


def test_wasapi_without_existing_marks_non_smtc():
    reconciler = reconciler_with()
    result = reconciler.reconcile_wasapi_session(make_source("process:a", SourceType.SMTC, pid=5))
    assert result.source_type is SourceType.NON_SMTC
    assert result.id == "process:a"


def test_wasapi_merges_with_smtc_source_of_same_process():
    existing = make_source("process:existing", SourceType.SMTC, pid=5)
    reconciler = reconciler_with(existing)
    result = reconciler.reconcile_wasapi_session(
        make_source("process:new", SourceType.NON_SMTC, pid=5)
    )
    assert result.id == "process:existing"
    assert result.source_type is SourceType.HYBRID


def test_wasapi_keeps_existing_non_smtc_type():
    existing = make_source("process:existing", SourceType.NON_SMTC, pid=5)
    reconciler = reconciler_with(existing)
    result = reconciler.reconcile_wasapi_session(
        make_source("process:new", SourceType.NON_SMTC, pid=5)
    )
    assert result == existing


def test_wasapi_does_not_merge_reused_pid():
    existing = make_source("process:existing", SourceType.SMTC, pid=5, creation_time=1)
    reconciler = reconciler_with(existing)
    candidate = make_source("process:new", SourceType.SMTC, pid=5, creation_time=2)
    result = reconciler.reconcile_wasapi_session(candidate)
    assert result.id == "process:new"
    assert result.source_type is SourceType.NON_SMTC


def test_wasapi_browser_never_merges():
    chrome = MediaSourceKind.browser(BrowserFamily.CHROME)
    existing = make_source("browser:chrome:tab:a", SourceType.SMTC, pid=5, kind=chrome)
    reconciler = reconciler_with(existing)
    candidate = make_source("browser:chrome", SourceType.SMTC, pid=5, kind=chrome)
    result = reconciler.reconcile_wasapi_session(candidate)
    assert result.id == "browser:chrome"
    assert result.source_type is SourceType.NON_SMTC


def test_smtc_merges_with_non_smtc_source_of_same_process():
    existing = make_source("process:existing", SourceType.NON_SMTC, pid=9)
    reconciler = reconciler_with(existing)
    result = reconciler.reconcile_smtc_session(
        make_source("process:new", SourceType.NON_SMTC, pid=9)
    )
    assert result.id == "process:existing"
    assert result.source_type is SourceType.HYBRID


def test_smtc_keeps_existing_smtc_type():
    existing = make_source("process:existing", SourceType.SMTC, pid=9)
    reconciler = reconciler_with(existing)
    result = reconciler.reconcile_smtc_session(make_source("process:new", SourceType.SMTC, pid=9))
    assert result == existing


def test_smtc_without_process_only_sets_type():
    reconciler = reconciler_with(make_source("process:existing", SourceType.NON_SMTC, pid=0))
    candidate = make_source("smtc:unresolved:x", SourceType.NON_SMTC)
    result = reconciler.reconcile_smtc_session(candidate)
    assert result.id == "smtc:unresolved:x"
    assert result.source_type is SourceType.SMTC


def test_smtc_browser_tabs_stay_separate():
    chrome = MediaSourceKind.browser(BrowserFamily.CHROME)
    existing = make_source("browser:chrome:tab:a", SourceType.SMTC, pid=5, kind=chrome)
    reconciler = reconciler_with(existing)
    candidate = make_source("browser:chrome:tab:b", SourceType.NON_SMTC, pid=5, kind=chrome)
    result = reconciler.reconcile_smtc_session(candidate)
    assert result.id == "browser:chrome:tab:b"
    assert result.source_type is SourceType.SMTC