"""Signals: move-time consistency and NO_FAST_MOVES.

Definition:
  - Consistency signals need a clock whose estimated total exceeds
    min_clock_seconds; shorter or untimed games never emit them.
  - A signal fires on the whole-game CV or on the lowest window CV, each
    against its own flatness tier.
  - NO_FAST_MOVES uses the speed tier's reflex threshold.
"""

from __future__ import annotations

from fairplay.config import AssessmentThresholds
from fairplay.core.domain.models import Observation
from fairplay.core.stats.move_times import (
    FlatnessTier,
    cv_indicates_flat_times,
    has_no_fast_moves,
    lowest_sliding_move_time_cv,
    move_time_cv,
)


def clock_long_enough(obs: Observation, thresholds: AssessmentThresholds) -> bool:
    if obs.clock is None:
        return False
    return obs.clock.estimate_total_seconds() > thresholds.min_clock_seconds


def _global_cv_flat(obs: Observation, tier: FlatnessTier, thresholds: AssessmentThresholds) -> bool:
    cv = move_time_cv(obs.move_times)
    if cv is None:
        return False
    return cv_indicates_flat_times(cv, tier, thresholds)


def _streak_cv_flat(obs: Observation, tier: FlatnessTier, thresholds: AssessmentThresholds) -> bool:
    cv = lowest_sliding_move_time_cv(obs.move_times, thresholds.streak_window)
    if cv is None:
        return False
    return cv_indicates_flat_times(cv, tier, thresholds)


def has_move_time_streak(obs: Observation, thresholds: AssessmentThresholds) -> bool:
    if not clock_long_enough(obs, thresholds):
        return False
    return _streak_cv_flat(obs, FlatnessTier.HIGHLY_FOR_STREAKS, thresholds)


def eval_highly_consistent_move_times(obs: Observation, thresholds: AssessmentThresholds) -> bool:
    if not clock_long_enough(obs, thresholds):
        return False
    return _global_cv_flat(obs, FlatnessTier.HIGHLY, thresholds) or _streak_cv_flat(
        obs, FlatnessTier.HIGHLY_FOR_STREAKS, thresholds
    )


def eval_moderately_consistent_move_times(obs: Observation, thresholds: AssessmentThresholds) -> bool:
    if not clock_long_enough(obs, thresholds):
        return False
    return _global_cv_flat(obs, FlatnessTier.MODERATELY, thresholds) or _streak_cv_flat(
        obs, FlatnessTier.MODERATELY_FOR_STREAKS, thresholds
    )


def eval_no_fast_moves(obs: Observation, thresholds: AssessmentThresholds) -> bool:
    if not obs.move_times:
        return False
    return has_no_fast_moves(obs.move_times, thresholds.fast_move_centis(obs.speed))
