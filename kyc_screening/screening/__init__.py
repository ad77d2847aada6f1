"""Adverse media screening pipeline."""

from kyc_screening.screening.generator import AdverseMediaReportGenerator
from kyc_screening.screening.normalizer import NormalizedResult, derive_risk_assessment, normalize
from kyc_screening.screening.parser import parse_completion
from kyc_screening.screening.prompt import SYSTEM_PROMPT, build_prompt

__all__ = [
    "AdverseMediaReportGenerator",
    "NormalizedResult",
    "SYSTEM_PROMPT",
    "build_prompt",
    "derive_risk_assessment",
    "normalize",
    "parse_completion",
]
