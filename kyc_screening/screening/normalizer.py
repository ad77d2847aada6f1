"""Default-filling for parsed completion payloads."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, TypeVar

import structlog

from kyc_screening.models.adverse_media import (
    ELEVATED_SEVERITIES,
    Finding,
    FindingCategory,
    NextStep,
    ParsedCompletion,
    RiskAssessment,
    Severity,
)

logger = structlog.get_logger(__name__)

E = TypeVar("E", bound=Enum)

NO_FINDINGS_SUMMARY = "No significant adverse media findings identified."
NO_FINDINGS_RECOMMENDATION = "No additional due diligence required based on adverse media screening."
FINDINGS_RECOMMENDATION = "Review findings and conduct appropriate due diligence based on risk level."


@dataclass
class NormalizedResult:
    findings: list[Finding] = field(default_factory=list)
    next_steps: list[NextStep] = field(default_factory=list)
    overall_risk_assessment: RiskAssessment | None = None


def normalize(parsed: ParsedCompletion, *, today: date) -> NormalizedResult:
    """Fill every missing field with its default and derive the risk assessment.

    Never raises: malformed values degrade to defaults and non-object list
    items are dropped.
    """
    findings = [normalize_finding(item, today=today) for item in _mappings(parsed.findings, "findings")]
    next_steps = [normalize_next_step(item) for item in _mappings(parsed.next_steps, "nextSteps")]
    derived = derive_risk_assessment(findings)

    supplied = parsed.overall_risk_assessment
    if isinstance(supplied, Mapping):
        assessment = RiskAssessment(
            level=_enum_value(supplied.get("level"), Severity, derived.level),
            summary=_text(supplied.get("summary"), derived.summary),
            recommendation=_text(supplied.get("recommendation"), derived.recommendation),
        )
    else:
        assessment = derived

    return NormalizedResult(findings=findings, next_steps=next_steps, overall_risk_assessment=assessment)


def normalize_finding(raw: Mapping[str, Any], *, today: date) -> Finding:
    return Finding(
        title=_text(raw.get("title"), "No title"),
        description=_text(raw.get("description"), ""),
        date=_text(raw.get("date"), today.isoformat()),
        source=_text(raw.get("source"), "Unknown"),
        severity=_enum_value(raw.get("severity"), Severity, Severity.MEDIUM),
        category=_enum_value(raw.get("category"), FindingCategory, FindingCategory.OTHER),
    )


def normalize_next_step(raw: Mapping[str, Any]) -> NextStep:
    return NextStep(
        action=_text(raw.get("action"), "Review Required"),
        priority=_enum_value(raw.get("priority"), Severity, Severity.MEDIUM),
        description=_text(raw.get("description"), ""),
        timeline=_text(raw.get("timeline"), "As soon as possible"),
    )


def derive_risk_assessment(findings: list[Finding]) -> RiskAssessment:
    """Aggregate risk used when the model does not supply one."""
    elevated = sum(1 for finding in findings if finding.severity in ELEVATED_SEVERITIES)
    if findings:
        summary = (
            f"Found {len(findings)} adverse media finding(s). "
            f"{elevated} high or critical risk item(s) identified."
        )
        recommendation = FINDINGS_RECOMMENDATION
    else:
        summary = NO_FINDINGS_SUMMARY
        recommendation = NO_FINDINGS_RECOMMENDATION
    return RiskAssessment(
        level=Severity.HIGH if elevated else Severity.MEDIUM,
        summary=summary,
        recommendation=recommendation,
    )


def _mappings(value: Any, label: str) -> list[Mapping[str, Any]]:
    if not isinstance(value, list):
        if value:
            logger.warning("completion_field_not_a_list", field=label, value_type=type(value).__name__)
        return []
    items = [item for item in value if isinstance(item, Mapping)]
    if len(items) != len(value):
        logger.warning("completion_items_skipped", field=label, skipped=len(value) - len(items))
    return items


def _text(value: Any, default: str) -> str:
    if isinstance(value, bool) or value is None:
        return default
    if isinstance(value, str):
        return value if value.strip() else default
    if isinstance(value, (int, float)):
        return str(value)
    return default


def _canonical(value: str) -> str:
    return "".join(ch for ch in value.lower() if ch.isalnum())


def _enum_value(value: Any, enum_cls: type[E], default: E | str) -> str:
    if isinstance(value, str) and value.strip():
        wanted = _canonical(value)
        for member in enum_cls:
            if _canonical(member.value) == wanted:
                return member.value
    return default.value if isinstance(default, Enum) else default
