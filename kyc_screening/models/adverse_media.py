"""Adverse media screening models."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from kyc_screening.errors import PARSE_ERROR_MESSAGE, InvalidRequestError

DEFAULT_DATE_RANGE = "30"
ALL_DATES = "all"


def utc_now() -> datetime:
    """Return timezone-aware current UTC timestamp."""
    return datetime.now(timezone.utc)


class Severity(str, Enum):
    CRITICAL = "Critical"
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class FindingCategory(str, Enum):
    REGULATORY = "Regulatory"
    LEGAL = "Legal"
    FRAUD = "Fraud"
    CORRUPTION = "Corruption"
    MONEY_LAUNDERING = "Money Laundering"
    SANCTIONS = "Sanctions"
    REPUTATIONAL = "Reputational"
    ESG = "ESG"
    FINANCIAL_DISTRESS = "Financial Distress"
    OTHER = "Other"


ELEVATED_SEVERITIES = frozenset({Severity.CRITICAL.value, Severity.HIGH.value})


class _WireModel(BaseModel):
    """Base for models exchanged as camelCase JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, use_enum_values=True)


class ReportRequest(_WireModel):
    """Validated adverse media screening request."""

    entity_name: str = Field(min_length=1)
    date_range: str = DEFAULT_DATE_RANGE
    date_range_days: int | Literal["all"] = 30

    @classmethod
    def from_payload(
        cls,
        entity_name: Any,
        date_range: Any = None,
        *,
        default_days: int = 30,
    ) -> "ReportRequest":
        """Build a request from loosely typed input, rejecting a blank entity name."""
        name = entity_name.strip() if isinstance(entity_name, str) else ""
        if not name:
            raise InvalidRequestError("Entity name is required")

        raw_range = str(date_range).strip() if date_range not in (None, "") else str(default_days)
        return cls(
            entity_name=name,
            date_range=raw_range,
            date_range_days=parse_date_range(raw_range, default_days=default_days),
        )


def parse_date_range(value: str, *, default_days: int = 30) -> int | Literal["all"]:
    """Return lookback days for a `dateRange` value; `"all"` means no lower bound."""
    text = value.strip().lower()
    if text == ALL_DATES:
        return ALL_DATES
    try:
        days = int(text)
    except ValueError:
        return default_days
    return days if days > 0 else default_days


class Finding(_WireModel):
    """A single adverse media item about the screened entity."""

    title: str = "No title"
    description: str = ""
    date: str
    source: str = "Unknown"
    severity: Severity = Severity.MEDIUM
    category: FindingCategory = FindingCategory.OTHER


class NextStep(_WireModel):
    """A recommended compliance action keyed to the findings."""

    action: str = "Review Required"
    priority: Severity = Severity.MEDIUM
    description: str = ""
    timeline: str = "As soon as possible"


class RiskAssessment(_WireModel):
    """Aggregate risk level and guidance over all findings."""

    level: Severity
    summary: str
    recommendation: str


class ParsedCompletion(_WireModel):
    """Loosely typed JSON payload extracted from completion text."""

    findings: Any = Field(default_factory=list)
    next_steps: Any = Field(default_factory=list)
    overall_risk_assessment: Any = None


class AdverseMediaReport(_WireModel):
    """Full screening report returned for one request."""

    entity_name: str
    date_range: str
    search_date: datetime = Field(default_factory=utc_now)
    findings_count: int = 0
    findings: list[Finding] = Field(default_factory=list)
    next_steps: list[NextStep] = Field(default_factory=list)
    overall_risk_assessment: RiskAssessment

    @model_validator(mode="after")
    def sync_findings_count(self) -> "AdverseMediaReport":
        self.findings_count = len(self.findings)
        return self


class DegradedReport(_WireModel):
    """Empty report returned when the completion text could not be parsed."""

    findings: list[Finding] = Field(default_factory=list)
    next_steps: list[NextStep] = Field(default_factory=list)
    overall_risk_assessment: RiskAssessment | None = None
    error: str = PARSE_ERROR_MESSAGE
    raw_response: str
