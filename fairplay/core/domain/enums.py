"""Domain enums for player assessment.

Responsibilities:
  - Define Color, Speed, Verdict and RuleCode identifiers persisted with records.
  - Provide verdict display metadata for moderation views.

Invariants:
  - Enum values must remain stable for persistence and audits.
  - Verdict ordering is severity ordering; overrides rely on it.
  - VERDICT_METADATA must be complete and deterministic.
"""

from __future__ import annotations

from enum import Enum, IntEnum


class Color(Enum):
    WHITE = "white"
    BLACK = "black"


# Speed tiers, fastest first.
class Speed(Enum):
    ULTRA_BULLET = "ultraBullet"
    BULLET = "bullet"
    BLITZ = "blitz"
    RAPID = "rapid"
    CLASSICAL = "classical"
    CORRESPONDENCE = "correspondence"


# Value is the persisted assessment id; higher is more severe.
class Verdict(IntEnum):
    NOT_CHEATING = 1
    UNLIKELY_CHEATING = 2
    UNCLEAR = 3
    LIKELY_CHEATING = 4
    CHEATING = 5


# Stable identifiers for decision table rows, in table order.
class RuleCode(Enum):
    ACCURACY_HIGH_BLURS_NO_FAST_MOVES = "ACCURACY_HIGH_BLURS_NO_FAST_MOVES"
    ACCURACY_MODERATE_BLURS = "ACCURACY_MODERATE_BLURS"
    ACCURACY_HIGHLY_FLAT_TIMES = "ACCURACY_HIGHLY_FLAT_TIMES"
    HIGH_BLURS_HIGHLY_FLAT_TIMES = "HIGH_BLURS_HIGHLY_FLAT_TIMES"
    MODERATE_BLURS_FLAT_TIMES = "MODERATE_BLURS_FLAT_TIMES"
    ACCURACY_HOLD_ALERT = "ACCURACY_HOLD_ALERT"
    ADVANTAGE_HOLD_ALERT = "ADVANTAGE_HOLD_ALERT"
    HIGHLY_FLAT_TIMES = "HIGHLY_FLAT_TIMES"
    ADVANTAGE_HIGH_BLURS = "ADVANTAGE_HIGH_BLURS"
    ADVANTAGE_FLAT_TIMES_NO_FAST_MOVES = "ADVANTAGE_FLAT_TIMES_NO_FAST_MOVES"
    ACCURACY_FLAT_TIMES_NO_FAST_MOVES = "ACCURACY_FLAT_TIMES_NO_FAST_MOVES"
    ACCURACY_ONLY_NO_FAST_MOVES = "ACCURACY_ONLY_NO_FAST_MOVES"
    ACCURACY_WITH_FAST_MOVES = "ACCURACY_WITH_FAST_MOVES"
    LOW_ACCURACY_NO_ADVANTAGE = "LOW_ACCURACY_NO_ADVANTAGE"
    DEFAULT = "DEFAULT"


# Moderation view metadata keyed by verdict.
VERDICT_METADATA: dict[Verdict, dict[str, object]] = {
    Verdict.CHEATING: {
        "description": "Cheating",
        "emoticon": ">:(",
        "color_class": 4,
    },
    Verdict.LIKELY_CHEATING: {
        "description": "Likely cheating",
        "emoticon": ":(",
        "color_class": 3,
    },
    Verdict.UNCLEAR: {
        "description": "Unclear",
        "emoticon": ":|",
        "color_class": 2,
    },
    Verdict.UNLIKELY_CHEATING: {
        "description": "Unlikely cheating",
        "emoticon": ":)",
        "color_class": 1,
    },
    Verdict.NOT_CHEATING: {
        "description": "Not cheating",
        "emoticon": ":D",
        "color_class": 1,
    },
}


def verdict_description(verdict: Verdict) -> str:
    return str(VERDICT_METADATA[verdict]["description"])


def verdict_from_persisted(value: int) -> Verdict | None:
    try:
        return Verdict(value)
    except ValueError:
        return None


_missing = [v for v in Verdict if v not in VERDICT_METADATA]
if _missing:
    raise RuntimeError(f"Missing VERDICT_METADATA for: {[m.name for m in _missing]}")

_extra = [k for k in VERDICT_METADATA.keys() if k not in set(Verdict)]
if _extra:
    raise RuntimeError(f"Extra VERDICT_METADATA keys: {[e.name for e in _extra]}")
