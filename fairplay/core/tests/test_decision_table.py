"""Tests for decision table ordering and totality."""

from __future__ import annotations

import itertools

import pytest

from fairplay.core.domain.enums import RuleCode, Verdict
from fairplay.core.domain.models import PlayerFlags
from fairplay.core.policy.decision_table import (
    DECISION_TABLE,
    DecisionRow,
    build_decision_table,
    first_match,
)

ALL_FLAGS = [PlayerFlags(*bits) for bits in itertools.product([False, True], repeat=8)]


def mk_flags(**on) -> PlayerFlags:
    values = {
        "high_accuracy": False,
        "advantage_always_held": False,
        "high_blur_rate": False,
        "moderate_blur_rate": False,
        "highly_consistent_move_times": False,
        "moderately_consistent_move_times": False,
        "no_fast_moves": False,
        "suspicious_hold_alert": False,
    }
    values.update(on)
    return PlayerFlags(**values)


def test_every_flag_tuple_resolves() -> None:
    assert len(ALL_FLAGS) == 256
    for flags in ALL_FLAGS:
        row = first_match(DECISION_TABLE, flags)
        assert isinstance(row.verdict, Verdict)


def test_default_row_is_last_and_total() -> None:
    assert DECISION_TABLE[-1].code == RuleCode.DEFAULT
    assert all(DECISION_TABLE[-1].predicate(flags) for flags in ALL_FLAGS)


def test_table_is_rebuilt_identically() -> None:
    rebuilt = build_decision_table()
    assert [(r.code, r.verdict) for r in rebuilt] == [(r.code, r.verdict) for r in DECISION_TABLE]


def test_exhausted_table_raises() -> None:
    rows = [DecisionRow(RuleCode.DEFAULT, Verdict.NOT_CHEATING, lambda f: False)]
    with pytest.raises(RuntimeError):
        first_match(rows, mk_flags())


@pytest.mark.parametrize(
    "flags, expected_code, expected_verdict",
    [
        (mk_flags(high_accuracy=True, high_blur_rate=True, no_fast_moves=True),
         RuleCode.ACCURACY_HIGH_BLURS_NO_FAST_MOVES, Verdict.CHEATING),
        (mk_flags(high_accuracy=True, moderate_blur_rate=True),
         RuleCode.ACCURACY_MODERATE_BLURS, Verdict.CHEATING),
        (mk_flags(high_accuracy=True, highly_consistent_move_times=True),
         RuleCode.ACCURACY_HIGHLY_FLAT_TIMES, Verdict.CHEATING),
        (mk_flags(high_blur_rate=True, highly_consistent_move_times=True),
         RuleCode.HIGH_BLURS_HIGHLY_FLAT_TIMES, Verdict.CHEATING),
        (mk_flags(moderate_blur_rate=True, moderately_consistent_move_times=True),
         RuleCode.MODERATE_BLURS_FLAT_TIMES, Verdict.LIKELY_CHEATING),
        (mk_flags(high_accuracy=True, suspicious_hold_alert=True),
         RuleCode.ACCURACY_HOLD_ALERT, Verdict.LIKELY_CHEATING),
        (mk_flags(advantage_always_held=True, suspicious_hold_alert=True),
         RuleCode.ADVANTAGE_HOLD_ALERT, Verdict.LIKELY_CHEATING),
        (mk_flags(highly_consistent_move_times=True),
         RuleCode.HIGHLY_FLAT_TIMES, Verdict.LIKELY_CHEATING),
        (mk_flags(advantage_always_held=True, high_blur_rate=True),
         RuleCode.ADVANTAGE_HIGH_BLURS, Verdict.LIKELY_CHEATING),
        (mk_flags(advantage_always_held=True, moderately_consistent_move_times=True, no_fast_moves=True),
         RuleCode.ADVANTAGE_FLAT_TIMES_NO_FAST_MOVES, Verdict.UNCLEAR),
        (mk_flags(high_accuracy=True, moderately_consistent_move_times=True, no_fast_moves=True),
         RuleCode.ACCURACY_FLAT_TIMES_NO_FAST_MOVES, Verdict.UNCLEAR),
        (mk_flags(high_accuracy=True, no_fast_moves=True),
         RuleCode.ACCURACY_ONLY_NO_FAST_MOVES, Verdict.UNCLEAR),
        (mk_flags(high_accuracy=True),
         RuleCode.ACCURACY_WITH_FAST_MOVES, Verdict.UNLIKELY_CHEATING),
        (mk_flags(),
         RuleCode.LOW_ACCURACY_NO_ADVANTAGE, Verdict.NOT_CHEATING),
        (mk_flags(advantage_always_held=True),
         RuleCode.DEFAULT, Verdict.NOT_CHEATING),
    ],
)
def test_each_row_is_reachable(flags, expected_code, expected_verdict) -> None:
    row = first_match(DECISION_TABLE, flags)
    assert row.code == expected_code
    assert row.verdict == expected_verdict


def test_earlier_row_wins_on_overlap() -> None:
    # Matches rows 1, 2 and 6; row 1 must win.
    flags = mk_flags(
        high_accuracy=True,
        high_blur_rate=True,
        moderate_blur_rate=True,
        no_fast_moves=True,
        suspicious_hold_alert=True,
    )
    assert first_match(DECISION_TABLE, flags).code == RuleCode.ACCURACY_HIGH_BLURS_NO_FAST_MOVES


def test_negated_conditions_of_accuracy_only_row() -> None:
    # Moderately consistent times route to the earlier accuracy row, moderate
    # blurs to the Cheating row; neither reaches the accuracy-only row.
    flags = mk_flags(high_accuracy=True, no_fast_moves=True, moderately_consistent_move_times=True)
    assert first_match(DECISION_TABLE, flags).code == RuleCode.ACCURACY_FLAT_TIMES_NO_FAST_MOVES


def test_low_accuracy_without_advantage_is_not_cheating_unless_timing_or_blur_rows_fire() -> None:
    timing_or_blur_rows = {
        RuleCode.HIGH_BLURS_HIGHLY_FLAT_TIMES,
        RuleCode.MODERATE_BLURS_FLAT_TIMES,
        RuleCode.HIGHLY_FLAT_TIMES,
    }
    for flags in ALL_FLAGS:
        if flags.high_accuracy or flags.advantage_always_held:
            continue
        row = first_match(DECISION_TABLE, flags)
        if row.code in timing_or_blur_rows:
            continue
        assert row.code == RuleCode.LOW_ACCURACY_NO_ADVANTAGE
        assert row.verdict == Verdict.NOT_CHEATING
