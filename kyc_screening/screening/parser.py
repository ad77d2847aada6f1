"""Extract the JSON payload from completion text."""

from __future__ import annotations

import json
import re
from typing import Any

from kyc_screening.errors import ResponseParseError
from kyc_screening.models.adverse_media import ParsedCompletion

# Greedy: spans from the first "{" to the last "}" (or "[" to "]"); object alternative tried first.
# Braces inside string values and multiple JSON blocks are not handled.
JSON_BLOCK_PATTERN = re.compile(r"\{[\s\S]*\}|\[[\s\S]*\]")


def parse_completion(raw: str) -> ParsedCompletion:
    """Parse completion text into findings / next steps / risk assessment.

    Raises `ResponseParseError` when neither the embedded block nor the raw
    text decodes as JSON.
    """
    match = JSON_BLOCK_PATTERN.search(raw)
    candidate = match.group(0) if match else raw
    try:
        decoded = json.loads(candidate)
    except (ValueError, RecursionError) as exc:
        raise ResponseParseError(raw, f"Completion text is not valid JSON: {exc}") from exc
    return _shape(decoded)


def _shape(decoded: Any) -> ParsedCompletion:
    if isinstance(decoded, list):
        return ParsedCompletion(findings=decoded, next_steps=[], overall_risk_assessment=None)
    if isinstance(decoded, dict):
        return ParsedCompletion(
            findings=decoded.get("findings") or [],
            next_steps=decoded.get("nextSteps") or [],
            overall_risk_assessment=decoded.get("overallRiskAssessment") or None,
        )
    return ParsedCompletion()
