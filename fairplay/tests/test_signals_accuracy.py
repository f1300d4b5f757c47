"""Tests for HIGH_ACCURACY and ADVANTAGE_ALWAYS_HELD."""

from __future__ import annotations

from dataclasses import replace

from fairplay.config import DEFAULT_THRESHOLDS
from fairplay.core.domain.enums import Color, Speed
from fairplay.core.domain.models import ClockConfig, Evaluation, Observation
from fairplay.core.signals.accuracy import (
    centipawn_losses,
    eval_advantage_always_held,
    eval_high_accuracy,
)


def mk_obs(**overrides) -> Observation:
    base = Observation(
        game_id="g1",
        user_id="alice",
        color=Color.WHITE,
        speed=Speed.BLITZ,
        move_times=(),
        blurs=(),
        evaluations=(),
        hold_alert=False,
        clock=ClockConfig(limit_seconds=180, increment_seconds=2),
        played_plies=40,
    )
    return replace(base, **overrides)


def white_trace(losses: list[int], start: int = 15) -> tuple[Evaluation, ...]:
    evals = []
    current = start
    for i, loss in enumerate(losses):
        current -= loss
        evals.append(Evaluation(cp=current))
        if i < len(losses) - 1:
            evals.append(Evaluation(cp=current))
    return tuple(evals)


def test_white_losses_pair_from_start_position() -> None:
    obs = mk_obs(evaluations=white_trace([10, 0, 35]))
    assert centipawn_losses(obs) == [10, 0, 35]


def test_black_losses_use_mover_perspective() -> None:
    evals = (
        Evaluation(cp=20),
        Evaluation(cp=50),
        Evaluation(cp=50),
        Evaluation(cp=10),
    )
    obs = mk_obs(color=Color.BLACK, evaluations=evals)
    assert centipawn_losses(obs) == [30, 0]


def test_mate_scores_use_sign_of_distance() -> None:
    obs = mk_obs(evaluations=(Evaluation(mate=-3),))
    assert centipawn_losses(obs) == [1015]


def test_scores_are_clamped_to_ceiling() -> None:
    obs = mk_obs(evaluations=(Evaluation(cp=-2500),))
    assert centipawn_losses(obs) == [1015]


def test_unscored_plies_are_skipped_not_zero() -> None:
    evals = (Evaluation(), Evaluation(cp=0), Evaluation(cp=-30))
    obs = mk_obs(evaluations=evals)
    assert centipawn_losses(obs) == [30]


def test_black_to_move_first_prepends_start_for_black() -> None:
    obs = mk_obs(color=Color.BLACK, start_color=Color.BLACK, evaluations=(Evaluation(cp=60),))
    assert centipawn_losses(obs) == [45]


def test_high_accuracy_threshold_is_strict_per_speed() -> None:
    assert eval_high_accuracy(mk_obs(evaluations=white_trace([19] * 6)), DEFAULT_THRESHOLDS) is True
    assert eval_high_accuracy(mk_obs(evaluations=white_trace([20] * 6)), DEFAULT_THRESHOLDS) is False

    bullet = mk_obs(speed=Speed.BULLET, evaluations=white_trace([24] * 6))
    assert eval_high_accuracy(bullet, DEFAULT_THRESHOLDS) is True

    classical = mk_obs(speed=Speed.CLASSICAL, evaluations=white_trace([16] * 6))
    assert eval_high_accuracy(classical, DEFAULT_THRESHOLDS) is False


def test_ultra_bullet_uses_default_accuracy_threshold() -> None:
    ultra = mk_obs(speed=Speed.ULTRA_BULLET, evaluations=white_trace([18] * 6))
    assert eval_high_accuracy(ultra, DEFAULT_THRESHOLDS) is False

    bullet = mk_obs(speed=Speed.BULLET, evaluations=white_trace([18] * 6))
    assert eval_high_accuracy(bullet, DEFAULT_THRESHOLDS) is True


def test_high_accuracy_absent_without_samples() -> None:
    assert eval_high_accuracy(mk_obs(), DEFAULT_THRESHOLDS) is False
    unscored = mk_obs(evaluations=(Evaluation(), Evaluation()))
    assert eval_high_accuracy(unscored, DEFAULT_THRESHOLDS) is False


def test_advantage_held_margin_is_exclusive() -> None:
    evals = (Evaluation(cp=50), Evaluation(cp=-100), Evaluation(cp=300))
    assert eval_advantage_always_held(mk_obs(evaluations=evals), DEFAULT_THRESHOLDS) is True

    dipped = evals + (Evaluation(cp=-101),)
    assert eval_advantage_always_held(mk_obs(evaluations=dipped), DEFAULT_THRESHOLDS) is False


def test_advantage_held_for_black() -> None:
    ok = (Evaluation(cp=-400), Evaluation(mate=-5), Evaluation(cp=100))
    assert eval_advantage_always_held(mk_obs(color=Color.BLACK, evaluations=ok), DEFAULT_THRESHOLDS) is True

    bad_cp = ok + (Evaluation(cp=101),)
    assert eval_advantage_always_held(mk_obs(color=Color.BLACK, evaluations=bad_cp), DEFAULT_THRESHOLDS) is False

    bad_mate = ok + (Evaluation(mate=2),)
    assert eval_advantage_always_held(mk_obs(color=Color.BLACK, evaluations=bad_mate), DEFAULT_THRESHOLDS) is False


def test_advantage_held_absent_without_scored_positions() -> None:
    assert eval_advantage_always_held(mk_obs(), DEFAULT_THRESHOLDS) is False
    unscored = mk_obs(evaluations=(Evaluation(), Evaluation()))
    assert eval_advantage_always_held(unscored, DEFAULT_THRESHOLDS) is False
