"""Shared data models for kyc-screening."""

from kyc_screening.models.adverse_media import (
    AdverseMediaReport,
    DegradedReport,
    Finding,
    FindingCategory,
    NextStep,
    ParsedCompletion,
    ReportRequest,
    RiskAssessment,
    Severity,
    parse_date_range,
)
from kyc_screening.models.analysis import (
    AnalysisData,
    AnalysisRequest,
    AnalysisResult,
    AnalysisType,
    ScoreBreakdown,
)

__all__ = [
    "AdverseMediaReport",
    "AnalysisData",
    "AnalysisRequest",
    "AnalysisResult",
    "AnalysisType",
    "DegradedReport",
    "Finding",
    "FindingCategory",
    "NextStep",
    "ParsedCompletion",
    "ReportRequest",
    "RiskAssessment",
    "ScoreBreakdown",
    "Severity",
    "parse_date_range",
]
