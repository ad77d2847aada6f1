"""Portfolio analysis request/response models."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class AnalysisType(str, Enum):
    LEAD_SCORING = "lead_scoring"
    COMPLIANCE_ANALYSIS = "compliance_analysis"
    RISK_ASSESSMENT = "risk_assessment"
    DASHBOARD_INSIGHTS = "dashboard_insights"


class _WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, use_enum_values=True)


class AnalysisData(_WireModel):
    """Records submitted for analysis; every collection is optional."""

    leads: list[Any] = Field(default_factory=list)
    clients: list[Any] = Field(default_factory=list)
    vendors: list[Any] = Field(default_factory=list)
    documents: list[Any] = Field(default_factory=list)
    risk_assessments: list[Any] = Field(default_factory=list)
    activities: list[Any] = Field(default_factory=list)
    meetings: list[Any] = Field(default_factory=list)
    messages: list[Any] = Field(default_factory=list)

    @field_validator(
        "leads",
        "clients",
        "vendors",
        "documents",
        "risk_assessments",
        "activities",
        "meetings",
        "messages",
        mode="before",
    )
    @classmethod
    def null_collection_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class AnalysisRequest(_WireModel):
    data: AnalysisData
    analysis_type: AnalysisType
    context: str | None = None


class ScoreBreakdown(_WireModel):
    """Per-dimension scores (0-100); absent dimensions are omitted from output."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    company_size: float | None = None
    industry: float | None = None
    geography: float | None = None
    contact_quality: float | None = None
    compliance_readiness: float | None = None
    risk_factors: float | None = None
    financial_health: float | None = None
    overall: float | None = None


class AnalysisResult(_WireModel):
    score: float | None = None
    breakdown: ScoreBreakdown = Field(default_factory=ScoreBreakdown)
    insights: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    risk_factors: list[str] = Field(default_factory=list)
    confidence: float = 75
    reasoning: str = ""
