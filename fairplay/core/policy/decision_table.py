"""Ordered decision table mapping PlayerFlags to a Verdict.

Responsibilities:
  - Hold the rows in priority order; the first matching row wins.
  - Keep a total default row so every flag tuple resolves.
Must not:
  - Apply outcome or hold overrides; see overrides.py.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, List

from fairplay.core.domain.enums import RuleCode, Verdict
from fairplay.core.domain.models import PlayerFlags

Predicate = Callable[[PlayerFlags], bool]


@dataclass(frozen=True)
class DecisionRow:
    code: RuleCode
    verdict: Verdict
    predicate: Predicate


def build_decision_table() -> List[DecisionRow]:
    return [
        DecisionRow(
            RuleCode.ACCURACY_HIGH_BLURS_NO_FAST_MOVES,
            Verdict.CHEATING,
            lambda f: f.high_accuracy and f.high_blur_rate and f.no_fast_moves,
        ),
        DecisionRow(
            RuleCode.ACCURACY_MODERATE_BLURS,
            Verdict.CHEATING,
            lambda f: f.high_accuracy and f.moderate_blur_rate,
        ),
        DecisionRow(
            RuleCode.ACCURACY_HIGHLY_FLAT_TIMES,
            Verdict.CHEATING,
            lambda f: f.high_accuracy and f.highly_consistent_move_times,
        ),
        DecisionRow(
            RuleCode.HIGH_BLURS_HIGHLY_FLAT_TIMES,
            Verdict.CHEATING,
            lambda f: f.high_blur_rate and f.highly_consistent_move_times,
        ),
        DecisionRow(
            RuleCode.MODERATE_BLURS_FLAT_TIMES,
            Verdict.LIKELY_CHEATING,
            lambda f: f.moderate_blur_rate and f.moderately_consistent_move_times,
        ),
        DecisionRow(
            RuleCode.ACCURACY_HOLD_ALERT,
            Verdict.LIKELY_CHEATING,
            lambda f: f.high_accuracy and f.suspicious_hold_alert,
        ),
        DecisionRow(
            RuleCode.ADVANTAGE_HOLD_ALERT,
            Verdict.LIKELY_CHEATING,
            lambda f: f.advantage_always_held and f.suspicious_hold_alert,
        ),
        DecisionRow(
            RuleCode.HIGHLY_FLAT_TIMES,
            Verdict.LIKELY_CHEATING,
            lambda f: f.highly_consistent_move_times,
        ),
        DecisionRow(
            RuleCode.ADVANTAGE_HIGH_BLURS,
            Verdict.LIKELY_CHEATING,
            lambda f: f.advantage_always_held and f.high_blur_rate,
        ),
        DecisionRow(
            RuleCode.ADVANTAGE_FLAT_TIMES_NO_FAST_MOVES,
            Verdict.UNCLEAR,
            lambda f: f.advantage_always_held
            and f.moderately_consistent_move_times
            and f.no_fast_moves,
        ),
        DecisionRow(
            RuleCode.ACCURACY_FLAT_TIMES_NO_FAST_MOVES,
            Verdict.UNCLEAR,
            lambda f: f.high_accuracy and f.moderately_consistent_move_times and f.no_fast_moves,
        ),
        # High accuracy without fast moves, but no blurs or flat timing either.
        DecisionRow(
            RuleCode.ACCURACY_ONLY_NO_FAST_MOVES,
            Verdict.UNCLEAR,
            lambda f: f.high_accuracy
            and not f.moderate_blur_rate
            and not f.moderately_consistent_move_times
            and f.no_fast_moves,
        ),
        DecisionRow(
            RuleCode.ACCURACY_WITH_FAST_MOVES,
            Verdict.UNLIKELY_CHEATING,
            lambda f: f.high_accuracy and not f.no_fast_moves,
        ),
        DecisionRow(
            RuleCode.LOW_ACCURACY_NO_ADVANTAGE,
            Verdict.NOT_CHEATING,
            lambda f: not f.high_accuracy and not f.advantage_always_held,
        ),
        DecisionRow(RuleCode.DEFAULT, Verdict.NOT_CHEATING, lambda f: True),
    ]


DECISION_TABLE: List[DecisionRow] = build_decision_table()


def first_match(rows: Iterable[DecisionRow], flags: PlayerFlags) -> DecisionRow:
    for row in rows:
        if row.predicate(flags):
            return row
    raise RuntimeError(f"Decision table exhausted for flags {flags.as_tuple()}")


_codes = [row.code for row in DECISION_TABLE]
if _codes != list(RuleCode):
    raise RuntimeError("DECISION_TABLE rows must follow RuleCode order exactly once each")
