"""Signals: HIGH_BLUR_RATE and MODERATE_BLUR_RATE.

Definition:
  - Blur percent of own moves, counted only once the game is past its
    first few plies.
  - Densest chunk: most blurs in any run of blur_chunk_size own moves.
  - Either the percent or the chunk crossing its bound sets the flag.
  - Simultaneous exhibitions never emit blur signals.
"""

from __future__ import annotations

from fairplay.config import AssessmentThresholds
from fairplay.core.domain.models import Observation
from fairplay.core.stats.windows import densest_boolean_window


def blur_percent(obs: Observation, thresholds: AssessmentThresholds) -> int:
    own_moves = len(obs.blurs)
    if obs.played_plies < thresholds.min_plies_for_blur_percent or own_moves == 0:
        return 0
    return sum(1 for b in obs.blurs if b) * 100 // own_moves


def highest_chunk_blurs(obs: Observation, thresholds: AssessmentThresholds) -> int:
    return densest_boolean_window(obs.blurs, thresholds.blur_chunk_size)


def eval_high_blur_rate(obs: Observation, thresholds: AssessmentThresholds) -> bool:
    if obs.is_simul:
        return False
    return (
        blur_percent(obs, thresholds) > thresholds.high_blur_percent
        or highest_chunk_blurs(obs, thresholds) >= thresholds.high_chunk_blurs
    )


def eval_moderate_blur_rate(obs: Observation, thresholds: AssessmentThresholds) -> bool:
    if obs.is_simul:
        return False
    return (
        blur_percent(obs, thresholds) > thresholds.moderate_blur_percent
        or highest_chunk_blurs(obs, thresholds) >= thresholds.moderate_chunk_blurs
    )
