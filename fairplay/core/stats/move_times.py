"""Move-time statistics.

Definition:
  - Move times are centiseconds per own move, ordered by ply.
  - Global CV skips the first OPENING_MOVES_SKIPPED moves; window CVs trim the
    fastest and slowest move of each window.
  - Every time is padded by MOVE_TIME_PAD_CENTIS so 0.1s and 0s differ.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterator, Optional, Sequence

from fairplay.config import DEFAULT_THRESHOLDS, AssessmentThresholds
from .summary import coefficient_of_variation
from .windows import sliding_windows

OPENING_MOVES_SKIPPED = 2
MOVE_TIME_PAD_CENTIS = 10
INSTANTANEOUS_CENTIS = 0
MAX_INSTANT_MOVES_PER_WINDOW = 3
FAST_MOVES_PER_TOLERATED = 20
FAST_MOVES_BASE_TOLERANCE = 2


class FlatnessTier(Enum):
    HIGHLY = "HIGHLY"
    HIGHLY_FOR_STREAKS = "HIGHLY_FOR_STREAKS"
    MODERATELY = "MODERATELY"
    MODERATELY_FOR_STREAKS = "MODERATELY_FOR_STREAKS"


def _cv_bound(tier: FlatnessTier, thresholds: AssessmentThresholds) -> float:
    if tier == FlatnessTier.HIGHLY:
        return thresholds.highly_flat_cv
    if tier == FlatnessTier.HIGHLY_FOR_STREAKS:
        return thresholds.highly_flat_streak_cv
    if tier == FlatnessTier.MODERATELY:
        return thresholds.moderately_flat_cv
    return thresholds.moderately_flat_streak_cv


def cv_indicates_flat_times(
    cv: float,
    tier: FlatnessTier,
    thresholds: AssessmentThresholds = DEFAULT_THRESHOLDS,
) -> bool:
    return cv < _cv_bound(tier, thresholds)


def round_tenths(centis: int) -> int:
    if centis > 0:
        return (centis + 5) // 10
    return 0


def _padded(move_times: Sequence[int]) -> list[int]:
    return [t + MOVE_TIME_PAD_CENTIS for t in move_times]


def move_time_cv(move_times: Sequence[int]) -> Optional[float]:
    return coefficient_of_variation(_padded(move_times[OPENING_MOVES_SKIPPED:]))


def sliding_move_time_cvs(move_times: Sequence[int], window: int) -> Iterator[float]:
    for chunk in sliding_windows(move_times, window):
        trimmed = sorted(chunk)[1:-1]
        if trimmed.count(INSTANTANEOUS_CENTIS) > MAX_INSTANT_MOVES_PER_WINDOW:
            continue
        cv = coefficient_of_variation(_padded(trimmed))
        if cv is not None:
            yield cv


def lowest_sliding_move_time_cv(move_times: Sequence[int], window: int) -> Optional[float]:
    return min(sliding_move_time_cvs(move_times, window), default=None)


def count_fast_moves(move_times: Sequence[int], fast_move_centis: int) -> int:
    return sum(1 for t in move_times if t < fast_move_centis)


def has_no_fast_moves(move_times: Sequence[int], fast_move_centis: int) -> bool:
    # A few premoves are tolerated; the allowance grows with game length.
    allowance = len(move_times) // FAST_MOVES_PER_TOLERATED + FAST_MOVES_BASE_TOLERANCE
    return count_fast_moves(move_times, fast_move_centis) <= allowance
