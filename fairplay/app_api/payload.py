"""Observation payload parsing for app-level inputs.

Responsibilities:
  - Turn a JSON object from a game data source into a typed Observation.
  - Reject missing or mistyped fields with InvalidObservationError.
Must not:
  - Compute signals; length checks between sequences belong to the extractor.
"""

from __future__ import annotations

from typing import Any, Optional

from fairplay.core.domain.enums import Color, Speed
from fairplay.core.domain.errors import InvalidObservationError
from fairplay.core.domain.models import ClockConfig, Evaluation, Observation


def _require(payload: dict[str, Any], key: str, expected_type: type) -> Any:
    if key not in payload:
        raise InvalidObservationError(f"Missing required field '{key}' in observation")
    value = payload[key]
    if expected_type is int:
        if not isinstance(value, int) or isinstance(value, bool):
            raise InvalidObservationError(f"Field '{key}' must be int")
        return value
    if not isinstance(value, expected_type):
        raise InvalidObservationError(f"Field '{key}' must be {expected_type.__name__}")
    return value


def _optional_bool(payload: dict[str, Any], key: str, default: bool = False) -> bool:
    if key not in payload:
        return default
    return _require(payload, key, bool)


def _color(raw: Any, key: str) -> Color:
    try:
        return Color(raw)
    except ValueError:
        raise InvalidObservationError(f"Field '{key}' has unknown color {raw!r}") from None


def _speed(raw: Any) -> Speed:
    try:
        return Speed(raw)
    except ValueError:
        raise InvalidObservationError(f"Field 'speed' has unknown speed tier {raw!r}") from None


def _int_or_none(raw: dict[str, Any], key: str) -> Optional[int]:
    value = raw.get(key)
    if value is None:
        return None
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidObservationError(f"Evaluation field '{key}' must be int")
    return value


def _evaluation(raw: Any) -> Evaluation:
    if raw is None:
        return Evaluation()
    if not isinstance(raw, dict):
        raise InvalidObservationError("Evaluations must be objects or null")
    return Evaluation(cp=_int_or_none(raw, "cp"), mate=_int_or_none(raw, "mate"))


def _clock(raw: Any) -> Optional[ClockConfig]:
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise InvalidObservationError("Field 'clock' must be an object or null")
    return ClockConfig(
        limit_seconds=_require(raw, "limit_seconds", int),
        increment_seconds=_require(raw, "increment_seconds", int),
    )


def observation_from_payload(payload: dict[str, Any]) -> Observation:
    if not isinstance(payload, dict):
        raise InvalidObservationError("Observation must be a JSON object")

    move_times = _require(payload, "move_times", list)
    for t in move_times:
        if not isinstance(t, int) or isinstance(t, bool):
            raise InvalidObservationError("Field 'move_times' must contain ints (centiseconds)")

    blurs = _require(payload, "blurs", list)
    for b in blurs:
        if not isinstance(b, bool):
            raise InvalidObservationError("Field 'blurs' must contain booleans")

    evaluations = payload.get("evaluations", [])
    if not isinstance(evaluations, list):
        raise InvalidObservationError("Field 'evaluations' must be a list")

    winner_raw = payload.get("winner")
    winner = None if winner_raw is None else _color(winner_raw, "winner")

    return Observation(
        game_id=_require(payload, "game_id", str),
        user_id=_require(payload, "user_id", str) if payload.get("user_id") is not None else "",
        color=_color(_require(payload, "color", str), "color"),
        speed=_speed(_require(payload, "speed", str)),
        move_times=tuple(move_times),
        blurs=tuple(blurs),
        evaluations=tuple(_evaluation(e) for e in evaluations),
        hold_alert=_optional_bool(payload, "hold_alert"),
        clock=_clock(payload.get("clock")),
        played_plies=_require(payload, "played_plies", int),
        is_simul=_optional_bool(payload, "is_simul"),
        winner=winner,
        start_color=_color(payload.get("start_color", Color.WHITE.value), "start_color"),
    )
