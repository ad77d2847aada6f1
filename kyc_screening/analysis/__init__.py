"""AI-assisted portfolio analysis."""

from kyc_screening.analysis.prompt import ANALYSIS_SYSTEM_PROMPT, build_analysis_prompt
from kyc_screening.analysis.service import AnalysisService, fallback_analysis, normalize_analysis

__all__ = [
    "ANALYSIS_SYSTEM_PROMPT",
    "AnalysisService",
    "build_analysis_prompt",
    "fallback_analysis",
    "normalize_analysis",
]
