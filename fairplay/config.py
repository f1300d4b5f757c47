from __future__ import annotations

import json
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any

from fairplay.core.domain.enums import Speed


# Tiers not listed (ultraBullet included) fall back to default_error_rate.
def _default_error_rates() -> dict[Speed, int]:
    return {
        Speed.BULLET: 25,
        Speed.BLITZ: 20,
    }


# Reflex threshold per tier. Every tier shares 50 cs by default; the map
# exists so a deployment can tune single tiers through load_thresholds.
def _default_fast_move_centis() -> dict[Speed, int]:
    return {speed: 50 for speed in Speed}


def _default_tc_factors() -> dict[Speed, float]:
    return {
        Speed.BULLET: 1.25,
        Speed.BLITZ: 1.25,
        Speed.RAPID: 1.0,
        Speed.CLASSICAL: 0.6,
    }


@dataclass(frozen=True)
class AssessmentThresholds:
    # Average centipawn loss below this is suspiciously accurate.
    error_rate_by_speed: dict[Speed, int] = field(default_factory=_default_error_rates)
    default_error_rate: int = 15
    advantage_margin_cp: int = 100
    high_blur_percent: int = 90
    moderate_blur_percent: int = 70
    min_plies_for_blur_percent: int = 6
    blur_chunk_size: int = 12
    high_chunk_blurs: int = 11
    moderate_chunk_blurs: int = 8
    min_clock_seconds: int = 60
    highly_flat_cv: float = 0.25
    highly_flat_streak_cv: float = 0.14
    moderately_flat_cv: float = 0.4
    moderately_flat_streak_cv: float = 0.25
    streak_window: int = 14
    fast_move_centis_by_speed: dict[Speed, int] = field(default_factory=_default_fast_move_centis)
    tc_factor_by_speed: dict[Speed, float] = field(default_factory=_default_tc_factors)
    default_tc_factor: float = 1.0

    def error_rate(self, speed: Speed) -> int:
        return self.error_rate_by_speed.get(speed, self.default_error_rate)

    def fast_move_centis(self, speed: Speed) -> int:
        return self.fast_move_centis_by_speed[speed]

    def tc_factor(self, speed: Speed) -> float:
        return self.tc_factor_by_speed.get(speed, self.default_tc_factor)


DEFAULT_THRESHOLDS = AssessmentThresholds()

_SPEED_MAP_TYPES: dict[str, type] = {
    "error_rate_by_speed": int,
    "fast_move_centis_by_speed": int,
    "tc_factor_by_speed": float,
}


def _coerce(key: str, value: Any, expected_type: type) -> Any:
    if expected_type is float:
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            raise ValueError(f"Field '{key}' must be float")
        return float(value)
    if expected_type is int:
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError(f"Field '{key}' must be int")
        return value
    raise ValueError(f"Field '{key}' has unsupported type")


def _speed_map(key: str, value: Any, expected_type: type, base: dict[Speed, Any]) -> dict[Speed, Any]:
    if not isinstance(value, dict):
        raise ValueError(f"Field '{key}' must be an object keyed by speed")
    merged = dict(base)
    for raw_speed, raw_value in value.items():
        try:
            speed = Speed(raw_speed)
        except ValueError:
            raise ValueError(f"Unknown speed '{raw_speed}' in '{key}'") from None
        merged[speed] = _coerce(f"{key}.{raw_speed}", raw_value, expected_type)
    return merged


def thresholds_from_payload(payload: dict[str, Any], base: AssessmentThresholds = DEFAULT_THRESHOLDS) -> AssessmentThresholds:
    if not isinstance(payload, dict):
        raise ValueError("Thresholds config must be a JSON object")

    field_types = {f.name: f.type for f in fields(AssessmentThresholds)}
    updates: dict[str, Any] = {}
    for key, value in payload.items():
        if key not in field_types:
            raise ValueError(f"Unknown thresholds field '{key}'")
        if key in _SPEED_MAP_TYPES:
            updates[key] = _speed_map(key, value, _SPEED_MAP_TYPES[key], getattr(base, key))
        elif field_types[key] == "float":
            updates[key] = _coerce(key, value, float)
        else:
            updates[key] = _coerce(key, value, int)

    thresholds = replace(base, **updates)
    if thresholds.blur_chunk_size < 1 or thresholds.streak_window < 3:
        raise ValueError("Window sizes must be >= 1 (blur chunk) and >= 3 (streak)")
    return thresholds


def load_thresholds(path: str | Path) -> AssessmentThresholds:
    config_path = Path(path)
    if not config_path.exists():
        raise ValueError(f"Thresholds config not found: {config_path}")
    payload = json.loads(config_path.read_text(encoding="utf-8"))
    return thresholds_from_payload(payload)
