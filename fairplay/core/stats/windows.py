from __future__ import annotations

from typing import Iterator, Sequence, Tuple, TypeVar

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

T = TypeVar("T")


def sliding_windows(values: Sequence[T], size: int) -> Iterator[Tuple[T, ...]]:
    """Yield every contiguous window of `size` items, oldest first.

    Each call starts over from `values`; nothing is cached between calls.
    Yields nothing when the sequence is shorter than the window. A size
    below 1 raises ValueError at call time, before any iteration.
    """
    if size < 1:
        raise ValueError("window size must be >= 1")
    return _iter_windows(values, size)


def _iter_windows(values: Sequence[T], size: int) -> Iterator[Tuple[T, ...]]:
    for start in range(len(values) - size + 1):
        yield tuple(values[start : start + size])


def densest_boolean_window(bits: Sequence[bool], size: int) -> int:
    if size < 1:
        raise ValueError("window size must be >= 1")
    if len(bits) < size:
        return 0
    arr = np.asarray(bits, dtype=int)
    return int(sliding_window_view(arr, size).sum(axis=1).max())
