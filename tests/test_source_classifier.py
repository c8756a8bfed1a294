import pytest

from audiofocus.identity.source_classifier import SourceClassifier
from audiofocus.media_source import BrowserFamily, MediaCapability, MediaSourceKind


@pytest.mark.parametrize(
    "name",
    ["audiodg.exe", "svchost.exe", "System", "Idle", "GoogleUpdate.exe", "crashpad_handler.exe"],
)
def test_system_and_ignored_processes_classify_as_system(name):
    classifier = SourceClassifier()
    assert classifier.classify(name, MediaSourceKind.DESKTOP_APP) is MediaCapability.SYSTEM
    assert classifier.should_ignore(name) is True


def test_ignored_takes_precedence_over_browser_kind():
    kind = MediaSourceKind.browser(BrowserFamily.CHROME)
    assert SourceClassifier().classify("chrome_telemetry.exe", kind) is MediaCapability.SYSTEM


def test_browser_kind_classifies_as_browser():
    kind = MediaSourceKind.browser(BrowserFamily.FIREFOX)
    assert SourceClassifier().classify("firefox.exe", kind) is MediaCapability.BROWSER


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("Spotify.exe", MediaCapability.STREAMING_APP),
        ("Netflix.exe", MediaCapability.STREAMING_APP),
        ("TIDAL.exe", MediaCapability.STREAMING_APP),
        ("vlc.exe", MediaCapability.DEDICATED_PLAYER),
        ("foobar2000.exe", MediaCapability.DEDICATED_PLAYER),
        ("Music.UI.exe", MediaCapability.DEDICATED_PLAYER),
        ("notepad.exe", MediaCapability.UNKNOWN),
    ],
)
def test_desktop_apps_by_name(name, expected):
    assert SourceClassifier().classify(name, MediaSourceKind.DESKTOP_APP) is expected


@pytest.mark.parametrize("name", ["SlackHelper.exe", "Discord.exe", "vlc.exe"])
def test_regular_apps_are_not_ignored(name):
    assert SourceClassifier().should_ignore(name) is False