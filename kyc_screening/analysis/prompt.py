"""Prompt construction for portfolio analysis requests."""

from __future__ import annotations

import json
from typing import Any

from kyc_screening.models.analysis import AnalysisRequest, AnalysisType

ANALYSIS_SYSTEM_PROMPT = (
    "You are an expert compliance and risk analysis AI. Analyze the provided data and return structured "
    "JSON responses with scores, insights, and recommendations. Always return valid JSON."
)

_LEAD_SCORING_INSTRUCTIONS = """
Please analyze this data and provide:
1. An overall lead score (0-100) based on:
   - Company size and growth potential
   - Industry fit and compliance needs
   - Geographic market attractiveness
   - Contact quality and decision-making authority
   - Financial indicators
   - Compliance readiness
   - Risk factors

2. A breakdown with scores (0-100) for:
   - companySize
   - industry
   - geography
   - contactQuality
   - complianceReadiness (optional)
   - riskFactors (optional)
   - financialHealth (optional)
   - overall

3. Key insights (array of strings)
4. Recommendations (array of strings)
5. Risk factors (array of strings, if any)
6. Confidence level (0-100)
7. Reasoning (brief explanation of the analysis)

Return your response as JSON with this structure:
{
  "score": <number>,
  "breakdown": { ... },
  "insights": [ ... ],
  "recommendations": [ ... ],
  "riskFactors": [ ... ],
  "confidence": <number>,
  "reasoning": "<string>"
}"""

_DASHBOARD_INSTRUCTIONS = """
Please analyze this comprehensive data and provide:
1. Overall health score (0-100) for the organization
2. Key insights about:
   - Pipeline health
   - Compliance status
   - Risk trends
   - Growth opportunities
   - Areas of concern

3. Actionable recommendations
4. Risk factors to monitor
5. Confidence level

Return as JSON with: score, breakdown, insights, recommendations, riskFactors, confidence, reasoning"""

_GENERIC_INSTRUCTIONS = (
    "\nPlease provide comprehensive analysis with scores, insights, recommendations, and risk factors."
)

# (attribute, heading, rows sent, noun for the "... and N more" trailer or None)
_SECTIONS: tuple[tuple[str, str, int | None, str | None], ...] = (
    ("leads", "LEADS DATA", 10, "leads"),
    ("clients", "CLIENTS DATA", 5, "clients"),
    ("vendors", "VENDORS DATA", 5, "vendors"),
    ("documents", "DOCUMENTS DATA", 10, "documents"),
    ("risk_assessments", "RISK ASSESSMENTS DATA", None, None),
    ("activities", "ACTIVITIES DATA", 20, None),
    ("meetings", "MEETINGS DATA", 10, None),
)


def _dump(rows: list[Any]) -> str:
    return json.dumps(rows, indent=2, ensure_ascii=False, default=str)


def _section(rows: list[Any], heading: str, limit: int | None, noun: str | None) -> str:
    if limit is None:
        return f"{heading}:\n{_dump(rows)}\n"

    text = f"{heading} ({len(rows)} {noun or heading.split()[0].lower()}):\n{_dump(rows[:limit])}"
    if noun is not None and len(rows) > limit:
        text += f"\n... and {len(rows) - limit} more {noun}\n"
    return text + "\n"


def build_analysis_prompt(request: AnalysisRequest) -> str:
    """Build the analysis prompt; large collections are truncated to keep token usage bounded."""
    prompt = f"Analyze the following compliance and risk management data for {request.analysis_type}.\n\n"

    if request.context:
        prompt += f"Context: {request.context}\n\n"

    for attribute, heading, limit, noun in _SECTIONS:
        rows = getattr(request.data, attribute)
        if rows:
            prompt += _section(rows, heading, limit, noun)

    if request.analysis_type == AnalysisType.LEAD_SCORING.value:
        prompt += _LEAD_SCORING_INSTRUCTIONS
    elif request.analysis_type == AnalysisType.DASHBOARD_INSIGHTS.value:
        prompt += _DASHBOARD_INSTRUCTIONS
    else:
        prompt += _GENERIC_INSTRUCTIONS

    return prompt
