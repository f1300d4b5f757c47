"""Domain models for observations, flags and assessment records.

Responsibilities:
  - Define immutable carriers for one player's game observation.
  - Define the flag tuple consumed by the decision table.
  - Define the assessment record handed to external storage.

Invariants:
  - Models are frozen; equal inputs give equal values.
  - Record identity is derived from (game id, color), never random.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Optional

from fairplay.core.stats.summary import IntAvgSd
from .enums import Color, Speed, Verdict

MOVES_PER_CLOCK_ESTIMATE = 40


@dataclass(frozen=True)
class ClockConfig:
    limit_seconds: int
    increment_seconds: int

    def estimate_total_seconds(self) -> int:
        return self.limit_seconds + MOVES_PER_CLOCK_ESTIMATE * self.increment_seconds


@dataclass(frozen=True)
class Evaluation:
    """Engine score after a ply, from white's point of view.

    Both fields None means the ply was not scored.
    """

    cp: Optional[int] = None
    mate: Optional[int] = None

    def is_scored(self) -> bool:
        return self.cp is not None or self.mate is not None


@dataclass(frozen=True)
class Observation:
    game_id: str
    user_id: str
    color: Color
    speed: Speed
    move_times: tuple[int, ...]  # centiseconds per own move
    blurs: tuple[bool, ...]  # one entry per own move
    evaluations: tuple[Evaluation, ...]  # per analysed ply
    hold_alert: bool
    clock: Optional[ClockConfig]
    played_plies: int
    is_simul: bool = False
    winner: Optional[Color] = None
    start_color: Color = Color.WHITE

    def won(self) -> bool:
        return self.winner is not None and self.winner == self.color


@dataclass(frozen=True)
class PlayerFlags:
    high_accuracy: bool
    advantage_always_held: bool
    high_blur_rate: bool
    moderate_blur_rate: bool
    highly_consistent_move_times: bool
    moderately_consistent_move_times: bool
    no_fast_moves: bool
    suspicious_hold_alert: bool

    def as_tuple(self) -> tuple[bool, ...]:
        return tuple(getattr(self, f.name) for f in fields(self))


@dataclass(frozen=True)
class Basics:
    move_times: IntAvgSd  # tenths of a second
    hold: bool
    blurs: int  # percent of own moves
    blur_streak: Optional[int]
    mt_streak: Optional[bool]


@dataclass(frozen=True)
class PlayerAssessment:
    id: str
    game_id: str
    user_id: str
    color: Color
    verdict: Verdict
    date: datetime
    basics: Basics
    analysis: IntAvgSd  # centipawn loss per move
    flags: PlayerFlags
    tc_factor: Optional[float]


def assessment_id(game_id: str, color: Color) -> str:
    return f"{game_id}/{color.value}"
