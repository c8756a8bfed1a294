# audiofocus

`audiofocus` holds the decision logic for keeping a single application in
charge of audio playback. It gives media sources stable identities, turns
successive polls of per-process audio sessions into start/stop/active/inactive
events, and decides what should happen when a new source starts playing while
another one owns playback.

## Modules

- `audiofocus.media_source` – `MediaSource`, `MediaSourceKind`,
  `BrowserFamily`, `SourceType`, `MediaCapability`, `ProcessIdentity`, and
  `normalize_component`, which trims and ASCII-lower-cases text and replaces
  everything except `a-z`, `0-9`, `.`, `_` and `-` with `_`.
  `MediaSource.unresolved(aumid)` builds a source with the id
  `smtc:unresolved:<normalized aumid>` for an application id whose process
  could not be found.
- `audiofocus.events` – `SessionState` (`INACTIVE`, `ACTIVE`, `EXPIRED`, or
  any other state code), `AudioSessionSnapshot` and `AudioSessionEvent`.
  A snapshot is audible when its peak is above `AUDIO_ACTIVITY_THRESHOLD`
  (0.001).
- `audiofocus.media_events` – `PlaybackState`, `MediaMetadata` (with
  `fingerprint()`) and `MediaEvent`; every event kind except
  `ACTIVE_SESSION_CHANGED` requires a source.
- `audiofocus.process` – process enumeration through `psutil`
  (`enumerate_processes`, `resolve_process`), matching of application user
  model ids to processes (`ProcessResolver`, `process_matches_aumid`,
  `process_rank`) and `browser_family_for_exe` for `chrome.exe`,
  `msedge.exe`, `brave.exe` and `firefox.exe`.
- `audiofocus.identity` – `identity_manager.IdentityManager` (id
  generation, per-tab ids for browsers), `source_classifier.SourceClassifier`,
  `source_registry.SourceRegistry` (thread-safe), `session_reconciler.SessionReconciler`
  (merges audio-session and transport-control views of one process into a
  hybrid source), `stale_source_collector.StaleSourceCollector`,
  `process_inspector.ProcessInspector`, and `system.IdentitySystem`, which
  ties them together. `IdentitySystem` accepts a custom `inspector`.
- `audiofocus.session_registry` – `AudioSessionRegistry.reconcile(snapshots)`
  returns `(AudioSessionEvent, MediaSource)` pairs. Expired sessions are
  skipped, and a session must be missing for `STOP_CONFIRMATION_POLLS` (3)
  consecutive polls before it is reported stopped.
- `audiofocus.arbitration` – the building blocks of arbitration:
  `state.ArbitrationState` and its snapshot, `decision.decide_started`,
  `ownership` (`promote_active`, `mark_paused_by_audiofocus`,
  `mark_pause_observed`, `remove_source`), `debounce.DebounceCoordinator`,
  `suppression.SuppressionWindows` and `loop_guard.PauseLoopGuard`.
- `audiofocus.hardening` – `storm.EventStormProtector` (sliding-window event
  limit), `watchdog.Watchdog` (worker heartbeats) and
  `diagnostics.DiagnosticsCollector` (a text report of the source registry).

The time-based classes take an optional `clock` callable, defaulting to
`time.monotonic`. Modules log through the standard `logging` module.

## Installation

Python 3.10 or later; the only dependency is `psutil`.

## Examples

Normalising a component of a source id:

```python
from audiofocus.media_source import normalize_component

normalize_component("  Spotify Music! ")   # "spotify_music_"
```

Resolving an application id against a given list of processes:

```python
from audiofocus.process import ProcessResolver, ProcessSnapshot

processes = [
    ProcessSnapshot(
        process_id=10,
        executable_name="Spotify.exe",
        executable_path=r"C:\Apps\Spotify.exe",
    )
]
source = ProcessResolver().resolve_media_source("Spotify.exe", processes)
source.id   # "process:c__apps_spotify.exe"
```

Deciding what happens when a second source starts:

```python
from audiofocus.arbitration.decision import DecisionKind, decide_started
from audiofocus.arbitration.ownership import promote_active
from audiofocus.arbitration.state import ArbitrationState
from audiofocus.media_source import (
    MediaCapability, MediaSource, MediaSourceKind, SourceType,
)

def source(source_id):
    return MediaSource(
        id=source_id,
        kind=MediaSourceKind.DESKTOP_APP,
        source_type=SourceType.NON_SMTC,
        capability=MediaCapability.UNKNOWN,
        source_app_user_model_id=source_id,
    )

state = ArbitrationState()
player = source("process:player.exe")
decision = decide_started(state, player, False)          # DecisionKind.PROMOTE
promote_active(state, decision.source, state.next_generation())

decision = decide_started(state, source("process:radio.exe"), False)
decision.kind                 # DecisionKind.SWITCH
decision.from_source.id       # "process:player.exe"
```

## What the package does not do

- It does not read audio sessions from the operating system; the
  `AudioSessionSnapshot` values given to `AudioSessionRegistry.reconcile`
  must come from the caller.
- It does not send pause or play commands to applications; the
  `audiofocus.smtc` package holds no modules.
- There is no running arbitration engine or worker thread: the
  `audiofocus.arbitration` modules provide state, decisions and guards, and
  the caller applies them.
- It sets up no logging handlers, and it has no command-line program or tray
  interface.

## Running the tests

Install the `test` extra and run `pytest` from the project root.