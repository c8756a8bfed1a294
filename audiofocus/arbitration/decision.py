"""Deciding who owns playback when a source starts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..media_source import MediaSource
from .state import ArbitrationState


class DecisionKind(Enum):
    NOOP = "noop"
    PROMOTE = "promote"
    SWITCH = "switch"
    REJECT_CHALLENGER = "reject_challenger"


@dataclass(frozen=True)
class ArbitrationDecision:
    """The outcome of a start event.

    NOOP carries ``reason``; PROMOTE carries ``source``; SWITCH carries
    ``from_source`` and ``to_source``; REJECT_CHALLENGER carries
    ``challenger`` and ``active``.
    """

    kind: DecisionKind
    reason: str | None = None
    source: MediaSource | None = None
    from_source: MediaSource | None = None
    to_source: MediaSource | None = None
    challenger: MediaSource | None = None
    active: MediaSource | None = None


def decide_started(
    state: ArbitrationState, source: MediaSource, simultaneous_conflict: bool
) -> ArbitrationDecision:
    active_id = state.currently_active_source
    if active_id is None:
        return ArbitrationDecision(DecisionKind.PROMOTE, source=source)
    if active_id == source.id:
        return ArbitrationDecision(DecisionKind.NOOP, reason="source already owns playback")

    active_record = state.sources.get(active_id)
    if active_record is None:
        return ArbitrationDecision(DecisionKind.PROMOTE, source=source)

    active = active_record.source
    if simultaneous_conflict and _deterministic_winner(active, source).id != source.id:
        return ArbitrationDecision(
            DecisionKind.REJECT_CHALLENGER, challenger=source, active=active
        )
    return ArbitrationDecision(DecisionKind.SWITCH, from_source=active, to_source=source)


def _deterministic_winner(left: MediaSource, right: MediaSource) -> MediaSource:
    # For effectively simultaneous starts the smaller id wins, so the choice
    # does not depend on callback ordering.
    return right if right.id < left.id else left