"""Summary statistics over numeric samples.

Responsibilities:
  - Average, standard deviation and coefficient of variation.
  - Integer avg/sd summaries stored on assessment records.

Invariants:
  - Empty input yields 0.0 summaries, never NaN.
  - CV is absent (None) for fewer than MIN_CV_SAMPLES samples or a zero mean.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

import numpy as np

MIN_CV_SAMPLES = 2


@dataclass(frozen=True)
class IntAvgSd:
    avg: int
    sd: int


def _as_array(values: Iterable[float]) -> np.ndarray:
    return np.asarray(list(values), dtype=float)


def average(values: Iterable[float]) -> float:
    arr = _as_array(values)
    if arr.size == 0:
        return 0.0
    return float(np.mean(arr))


def standard_deviation(values: Iterable[float]) -> float:
    """Population standard deviation; 0.0 for an empty sample."""
    arr = _as_array(values)
    if arr.size == 0:
        return 0.0
    return float(np.std(arr))


def int_avg_sd(values: Iterable[float]) -> IntAvgSd:
    arr = _as_array(values)
    return IntAvgSd(avg=int(average(arr)), sd=int(standard_deviation(arr)))


def coefficient_of_variation(values: Iterable[float]) -> Optional[float]:
    """Sample standard deviation over mean."""
    arr = _as_array(values)
    if arr.size < MIN_CV_SAMPLES:
        return None
    mean = float(np.mean(arr))
    if mean == 0:
        return None
    return float(np.std(arr, ddof=1)) / mean
