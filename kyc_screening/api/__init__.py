"""FastAPI route modules."""

from kyc_screening.api import adverse_media, analysis, body, health

__all__ = ["adverse_media", "analysis", "body", "health"]
