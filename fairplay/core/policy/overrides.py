"""Outcome override applied after the decision table.

Responsibilities:
  - Keep the table verdict when a hold alert fired or the player did not win.
  - Otherwise soften by exactly one step (Cheating and LikelyCheating only).

Invariants:
  - Deterministic; the final verdict is never more than one step below the
    table verdict and never below NOT_CHEATING.
"""

from __future__ import annotations

from dataclasses import dataclass

from fairplay.core.domain.enums import Verdict
from fairplay.core.domain.models import PlayerFlags


@dataclass(frozen=True)
class OverrideResult:
    verdict: Verdict
    downgraded: bool


ONE_STEP_DOWNGRADE: dict[Verdict, Verdict] = {
    Verdict.CHEATING: Verdict.LIKELY_CHEATING,
    Verdict.LIKELY_CHEATING: Verdict.UNCLEAR,
}


def apply_outcome_override(verdict: Verdict, flags: PlayerFlags, won: bool) -> OverrideResult:
    if flags.suspicious_hold_alert:
        return OverrideResult(verdict=verdict, downgraded=False)

    # Draws and unfinished results count as "did not win".
    if not won:
        return OverrideResult(verdict=verdict, downgraded=False)

    softened = ONE_STEP_DOWNGRADE.get(verdict)
    if softened is None:
        return OverrideResult(verdict=verdict, downgraded=False)
    return OverrideResult(verdict=softened, downgraded=True)
