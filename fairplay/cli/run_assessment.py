"""Assess prepared game observations from a JSON file.

Purpose:
  - Run the player assessment on one observation or a list of them.
Inputs:
  - --observation JSON file, optional --thresholds overrides, --now timestamp.
Outputs:
  - SUMMARY lines per record, or store documents with --json.
Example:
  - PYTHONPATH=. python3 fairplay/cli/run_assessment.py --observation game.json --json
"""

from __future__ import annotations

import argparse
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from fairplay.app_api.payload import observation_from_payload
from fairplay.cli._debug_utils import _dbg
from fairplay.config import DEFAULT_THRESHOLDS, load_thresholds
from fairplay.core.domain.errors import InvalidObservationError
from fairplay.core.engine.assessor import assess, set_assessor_debug
from fairplay.core.engine.document import assessment_to_document, flags_to_persisted


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Assess players of completed games for fair play")
    parser.add_argument("--observation", required=True, help="Observation JSON file (object or list)")
    parser.add_argument("--thresholds", default=None, help="Thresholds override JSON file")
    parser.add_argument("--now", default=None, help="Record creation time (ISO 8601); defaults to current UTC")
    parser.add_argument("--json", action="store_true", dest="print_json", help="Print store documents as JSON")
    parser.add_argument("--debug", action="store_true", help="Print debug lines")
    return parser.parse_args()


def _load_payloads(path: Path) -> list[Any]:
    payload = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(payload, list):
        return payload
    return [payload]


def _error(message: str) -> None:
    print(f"SUMMARY status=ERROR message={message}")
    raise SystemExit(2)


def main() -> None:
    args = parse_args()

    observation_path = Path(args.observation)
    if not observation_path.exists():
        _error("OBSERVATION_NOT_FOUND")

    thresholds = DEFAULT_THRESHOLDS
    if args.thresholds is not None:
        try:
            thresholds = load_thresholds(args.thresholds)
        except ValueError as exc:
            _dbg(args, f"thresholds error: {exc}")
            _error("THRESHOLDS_INVALID")

    if args.now is not None:
        try:
            now = datetime.fromisoformat(args.now)
        except ValueError:
            _error("NOW_INVALID")
    else:
        now = datetime.now(timezone.utc)

    set_assessor_debug((lambda msg: _dbg(args, msg)) if args.debug else None)
    try:
        records = []
        for payload in _load_payloads(observation_path):
            observation = observation_from_payload(payload)
            records.append(assess(observation, now, thresholds))
    except (InvalidObservationError, json.JSONDecodeError) as exc:
        _dbg(args, f"observation error: {exc}")
        _error("OBSERVATION_INVALID")
    finally:
        set_assessor_debug(None)

    if args.print_json:
        documents = [assessment_to_document(r) for r in records]
        print(json.dumps(documents if len(documents) != 1 else documents[0], indent=2, sort_keys=True))
        return

    for record in records:
        print(
            f"SUMMARY id={record.id} verdict={record.verdict.name} "
            f"flags={flags_to_persisted(record.flags)} blurs={record.basics.blurs} "
            f"tc_factor={record.tc_factor}"
        )
    print(f"assessed={len(records)}")


if __name__ == "__main__":
    main()
