"""Prompt text for adverse media screening."""

from __future__ import annotations

from datetime import date

SYSTEM_PROMPT = (
    "You are a senior compliance analyst at a financial institution with expertise in KYC/AML due "
    "diligence and adverse media screening. You have deep knowledge of regulatory requirements including "
    "FATF guidelines, FinCEN regulations, and international sanctions regimes. Your role is to identify and "
    "assess compliance-relevant negative information about entities from credible sources. You provide "
    "objective, fact-based analysis focused on material compliance risks. You distinguish between verified "
    "facts and allegations, and you prioritize information by recency and credibility. When providing next "
    "steps and recommendations, be specific, actionable, and prioritize based on risk level. Your "
    "recommendations should align with standard compliance practices and regulatory expectations."
)

ADVERSE_MEDIA_SCOPE = (
    "Regulatory violations, fines, or enforcement actions",
    "Legal proceedings (civil or criminal)",
    "Fraud, corruption, or bribery allegations",
    "Money laundering or terrorist financing connections",
    "Sanctions violations or exposure to sanctioned entities",
    "Significant reputational damage or ethical controversies",
    "Environmental, social, or governance (ESG) violations",
    "Bankruptcy or financial distress indicators",
)

_OUTPUT_REQUIREMENTS = """**Output Requirements:**
For EACH finding, provide:
- **title**: Clear, concise headline (max 100 characters)
- **description**: Detailed but concise summary (2-3 sentences, focus on compliance relevance)
- **date**: Exact date in YYYY-MM-DD format (or best available date)
- **source**: Credible source name (e.g., "Financial Times", "Reuters", "SEC.gov")
- **severity**: Assessment based on compliance impact:
  * "Critical" - Major regulatory violations, criminal charges, significant sanctions
  * "High" - Serious legal issues, large fines, regulatory warnings
  * "Medium" - Minor violations, ongoing investigations, reputational concerns
  * "Low" - Historical issues (resolved), minor infractions
- **category**: Primary category from: "Regulatory", "Legal", "Fraud", "Corruption", "Money Laundering", \
"Sanctions", "Reputational", "ESG", "Financial Distress", "Other"

**Important Instructions:**
1. Prioritize recent and credible sources
2. Exclude unverified rumors or social media speculation
3. Focus on materially significant events
4. If no adverse media found, return empty array: []
5. Return ONLY valid JSON, no markdown formatting, no explanatory text

**Next Steps & Recommendations:**
After analyzing all findings, provide structured recommendations based on:
- Risk level of findings (Critical/High findings require immediate action)
- Recency of events (recent issues require enhanced due diligence)
- Category patterns (multiple regulatory issues suggest systemic problems)
- Materiality (consider financial impact and reputational risk)

**Output Format (JSON only):**
{
  "findings": [
    {
      "title": "Example: SEC fines company $2M for accounting violations",
      "description": "The Securities and Exchange Commission imposed a $2 million fine on the company for \
material misstatements in financial reports. The violations occurred between 2020-2022 and involved revenue \
recognition issues.",
      "date": "2024-01-15",
      "source": "SEC.gov",
      "severity": "High",
      "category": "Regulatory"
    }
  ],
  "nextSteps": [
    {
      "action": "Enhanced Due Diligence (EDD)",
      "priority": "High",
      "description": "Conduct enhanced due diligence review focusing on financial reporting and regulatory \
compliance. Request additional documentation and certifications.",
      "timeline": "Within 5 business days"
    },
    {
      "action": "Regulatory Verification",
      "priority": "Medium",
      "description": "Verify current regulatory status with relevant authorities and check for any ongoing \
investigations.",
      "timeline": "Within 10 business days"
    }
  ],
  "overallRiskAssessment": {
    "level": "High",
    "summary": "Multiple regulatory violations indicate elevated compliance risk. Enhanced monitoring required.",
    "recommendation": "Approve with conditions: Enhanced monitoring, quarterly reviews, and additional \
documentation requirements."
  }
}"""


def format_review_period(start_date: date | None, end_date: date) -> str:
    """Render the review window; `None` start means no lower bound."""
    if start_date is None:
        return f"All available records to {end_date.isoformat()}"
    return f"{start_date.isoformat()} to {end_date.isoformat()}"


def build_prompt(entity_name: str, start_date: date | None, end_date: date) -> str:
    """Build the adverse media research prompt for one entity and review window.

    The caller validates `entity_name` and computes the window; identical
    inputs always produce identical text.
    """
    scope = "\n".join(f"- {item}" for item in ADVERSE_MEDIA_SCOPE)
    return (
        "You are an experienced financial compliance analyst conducting comprehensive adverse media research "
        "for Know Your Customer (KYC) and Anti-Money Laundering (AML) due diligence.\n\n"
        f'**Entity Under Review:** "{entity_name}"\n'
        f"**Review Period:** {format_review_period(start_date, end_date)}\n\n"
        "**Task:** Conduct a thorough search for adverse media related to the entity. Focus on information "
        "that would be relevant for compliance risk assessment in financial services.\n\n"
        "**Scope of Adverse Media Includes:**\n"
        f"{scope}\n\n"
        f"{_OUTPUT_REQUIREMENTS}"
    )
