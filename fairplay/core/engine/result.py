"""Classification payload for a single player's flags.

Responsibilities:
  - Capture the matched table row, its verdict and the post-override verdict
    for audit and debug output.

Inputs/Outputs:
  - Inputs: produced by assessor.classify.
  - Outputs: immutable dataclass consumed by assess and the CLI.
"""

from __future__ import annotations

from dataclasses import dataclass

from fairplay.core.domain.enums import RuleCode, Verdict


@dataclass(frozen=True)
class ClassificationResult:
    rule: RuleCode
    table_verdict: Verdict
    verdict: Verdict
    downgraded: bool
