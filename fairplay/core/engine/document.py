"""Store-facing rendering of PlayerAssessment records.

Responsibilities:
  - Flatten a record into the JSON-ready document an external store keys by
    "_id" (game id and color).
  - Encode flags as a fixed-order bit string so stored documents stay compact.
Must not:
  - Perform I/O; the caller owns persistence.
"""

from __future__ import annotations

from typing import Any

from fairplay.core.domain.enums import Color
from fairplay.core.domain.models import PlayerAssessment, PlayerFlags


def flags_to_persisted(flags: PlayerFlags) -> str:
    return "".join("1" if value else "0" for value in flags.as_tuple())


def flags_from_persisted(encoded: str) -> PlayerFlags:
    if len(encoded) != 8 or any(ch not in "01" for ch in encoded):
        raise ValueError(f"Invalid persisted flags: {encoded!r}")
    return PlayerFlags(*(ch == "1" for ch in encoded))


def assessment_to_document(record: PlayerAssessment) -> dict[str, Any]:
    doc: dict[str, Any] = {
        "_id": record.id,
        "gameId": record.game_id,
        "userId": record.user_id,
        "white": record.color == Color.WHITE,
        "assessment": int(record.verdict),
        "date": record.date.isoformat(),
        "flags": flags_to_persisted(record.flags),
        "sfAvg": record.analysis.avg,
        "sfSd": record.analysis.sd,
        "mtAvg": record.basics.move_times.avg,
        "mtSd": record.basics.move_times.sd,
        "blurs": record.basics.blurs,
        "hold": record.basics.hold,
    }
    if record.basics.blur_streak is not None:
        doc["blurStreak"] = record.basics.blur_streak
    if record.basics.mt_streak is not None:
        doc["mtStreak"] = record.basics.mt_streak
    if record.tc_factor is not None:
        doc["tcFactor"] = record.tc_factor
    return doc
