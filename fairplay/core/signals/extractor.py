"""Flag extraction for a single player's observation.

Responsibilities:
  - Validate the observation before any statistic is computed.
  - Evaluate each signal module independently and assemble PlayerFlags.
Must not:
  - Apply decision table logic; emits flags only.
"""

from __future__ import annotations

from fairplay.config import DEFAULT_THRESHOLDS, AssessmentThresholds
from fairplay.core.domain.enums import Color, Speed
from fairplay.core.domain.errors import InvalidObservationError
from fairplay.core.domain.models import Observation, PlayerFlags
from .accuracy import eval_advantage_always_held, eval_high_accuracy
from .blurs import eval_high_blur_rate, eval_moderate_blur_rate
from .move_times import (
    eval_highly_consistent_move_times,
    eval_moderately_consistent_move_times,
    eval_no_fast_moves,
)


def validate_observation(obs: Observation) -> None:
    if not isinstance(obs.speed, Speed):
        raise InvalidObservationError(f"unknown speed tier: {obs.speed!r}")
    if not isinstance(obs.color, Color):
        raise InvalidObservationError(f"unknown color: {obs.color!r}")
    if obs.winner is not None and not isinstance(obs.winner, Color):
        raise InvalidObservationError(f"unknown winner: {obs.winner!r}")
    if len(obs.blurs) != len(obs.move_times):
        raise InvalidObservationError(
            f"blur bitmap length {len(obs.blurs)} != move times length {len(obs.move_times)}"
        )
    if any(t < 0 for t in obs.move_times):
        raise InvalidObservationError("move times must be >= 0")
    if obs.played_plies < 0:
        raise InvalidObservationError("played_plies must be >= 0")


def extract_flags(obs: Observation, thresholds: AssessmentThresholds = DEFAULT_THRESHOLDS) -> PlayerFlags:
    validate_observation(obs)
    return PlayerFlags(
        high_accuracy=eval_high_accuracy(obs, thresholds),
        advantage_always_held=eval_advantage_always_held(obs, thresholds),
        high_blur_rate=eval_high_blur_rate(obs, thresholds),
        moderate_blur_rate=eval_moderate_blur_rate(obs, thresholds),
        highly_consistent_move_times=eval_highly_consistent_move_times(obs, thresholds),
        moderately_consistent_move_times=eval_moderately_consistent_move_times(obs, thresholds),
        no_fast_moves=eval_no_fast_moves(obs, thresholds),
        suspicious_hold_alert=bool(obs.hold_alert),
    )
