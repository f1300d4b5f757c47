"""Signals: HIGH_ACCURACY and ADVANTAGE_ALWAYS_HELD.

Definition:
  - Centipawn loss per own move from (before, after) evaluation pairs, scores
    clamped to +/-CP_CEILING and mates mapped to the ceiling by sign.
  - HIGH_ACCURACY when the average loss is under the speed threshold.
  - ADVANTAGE_ALWAYS_HELD when no scored position was worse than the margin
    for the player.
  - No samples means no signal (False).
"""

from __future__ import annotations

from typing import List, Optional

from fairplay.config import AssessmentThresholds
from fairplay.core.domain.enums import Color
from fairplay.core.domain.models import Evaluation, Observation
from fairplay.core.stats.summary import average

CP_CEILING = 1000
START_EVALUATION = Evaluation(cp=15)


def _with_sign_of(value: int, signed: int) -> int:
    return -value if signed < 0 else value


def _ceiled_score(evaluation: Evaluation) -> Optional[int]:
    if evaluation.cp is not None:
        return max(-CP_CEILING, min(CP_CEILING, evaluation.cp))
    if evaluation.mate is not None:
        return _with_sign_of(CP_CEILING, evaluation.mate)
    return None


def centipawn_losses(obs: Observation) -> List[int]:
    trace = list(obs.evaluations)
    if obs.color == obs.start_color:
        trace.insert(0, START_EVALUATION)

    losses: List[int] = []
    for i in range(0, len(trace) - 1, 2):
        before = _ceiled_score(trace[i])
        after = _ceiled_score(trace[i + 1])
        if before is None or after is None:
            continue
        diff = after - before
        loss = -diff if obs.color == Color.WHITE else diff
        losses.append(max(loss, 0))
    return losses


def eval_high_accuracy(obs: Observation, thresholds: AssessmentThresholds) -> bool:
    losses = centipawn_losses(obs)
    if not losses:
        return False
    return average(losses) < thresholds.error_rate(obs.speed)


def _is_disadvantage(evaluation: Evaluation, color: Color, margin: int) -> bool:
    if evaluation.cp is not None:
        if color == Color.WHITE:
            return evaluation.cp < -margin
        return evaluation.cp > margin
    if evaluation.mate is not None:
        if color == Color.WHITE:
            return evaluation.mate < 0
        return evaluation.mate > 0
    return False


def eval_advantage_always_held(obs: Observation, thresholds: AssessmentThresholds) -> bool:
    scored = [e for e in obs.evaluations if e.is_scored()]
    if not scored:
        return False
    return not any(
        _is_disadvantage(e, obs.color, thresholds.advantage_margin_cp) for e in scored
    )
