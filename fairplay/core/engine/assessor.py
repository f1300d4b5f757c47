"""Player assessment for one completed game.

Responsibilities:
  - Extract flags, classify them and apply the outcome override.
  - Assemble the immutable PlayerAssessment record.

Inputs/Outputs:
  - Inputs: Observation, caller-supplied creation time, thresholds.
  - Outputs: PlayerAssessment with identity "<game id>/<color>".

Invariants:
  - Pure: equal inputs give equal records; the clock is never read here.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable

from fairplay.config import DEFAULT_THRESHOLDS, AssessmentThresholds
from fairplay.core.domain.models import (
    Basics,
    Observation,
    PlayerAssessment,
    PlayerFlags,
    assessment_id,
)
from fairplay.core.policy.decision_table import DECISION_TABLE, first_match
from fairplay.core.policy.overrides import apply_outcome_override
from fairplay.core.signals.accuracy import centipawn_losses
from fairplay.core.signals.blurs import blur_percent, highest_chunk_blurs
from fairplay.core.signals.extractor import extract_flags
from fairplay.core.signals.move_times import has_move_time_streak
from fairplay.core.stats.move_times import round_tenths
from fairplay.core.stats.summary import int_avg_sd
from .result import ClassificationResult

_DEBUG_FN: Callable[[str], None] | None = None


def set_assessor_debug(fn: Callable[[str], None] | None) -> None:
    global _DEBUG_FN
    _DEBUG_FN = fn


def classify(flags: PlayerFlags, won: bool) -> ClassificationResult:
    row = first_match(DECISION_TABLE, flags)
    override = apply_outcome_override(row.verdict, flags, won)
    return ClassificationResult(
        rule=row.code,
        table_verdict=row.verdict,
        verdict=override.verdict,
        downgraded=override.downgraded,
    )


def assess(
    observation: Observation,
    now: datetime,
    thresholds: AssessmentThresholds = DEFAULT_THRESHOLDS,
) -> PlayerAssessment:
    flags = extract_flags(observation, thresholds)
    result = classify(flags, observation.won())

    record_id = assessment_id(observation.game_id, observation.color)
    if _DEBUG_FN is not None:
        _DEBUG_FN(
            f"ASSESS id={record_id} rule={result.rule.value} "
            f"table={result.table_verdict.name} final={result.verdict.name} "
            f"downgraded={result.downgraded} flags={flags.as_tuple()}"
        )

    chunk_blurs = highest_chunk_blurs(observation, thresholds)
    basics = Basics(
        move_times=int_avg_sd(round_tenths(t) for t in observation.move_times),
        hold=flags.suspicious_hold_alert,
        blurs=blur_percent(observation, thresholds),
        blur_streak=chunk_blurs if chunk_blurs > 0 else None,
        mt_streak=True if has_move_time_streak(observation, thresholds) else None,
    )

    return PlayerAssessment(
        id=record_id,
        game_id=observation.game_id,
        user_id=observation.user_id,
        color=observation.color,
        verdict=result.verdict,
        date=now,
        basics=basics,
        analysis=int_avg_sd(centipawn_losses(observation)),
        flags=flags,
        tc_factor=thresholds.tc_factor(observation.speed),
    )
