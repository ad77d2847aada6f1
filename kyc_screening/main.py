"""kyc-screening — FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from kyc_screening import __version__
from kyc_screening.analysis import AnalysisService
from kyc_screening.api import adverse_media, analysis, health
from kyc_screening.clients import CompletionClient
from kyc_screening.config import get_settings
from kyc_screening.logging_setup import setup_logging
from kyc_screening.screening import AdverseMediaReportGenerator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.logging_config_path)
    logger.info("kyc-screening starting up...")
    session: httpx.AsyncClient | None = None

    try:
        session = httpx.AsyncClient(timeout=float(settings.completion_timeout_seconds))
        completion_client = CompletionClient(
            settings.deepseek_api_key,
            api_url=settings.deepseek_api_url,
            model=settings.deepseek_model,
            timeout_seconds=settings.completion_timeout_seconds,
            session=session,
        )
        if not settings.completion_api_configured:
            logger.warning("Completion API key is not configured; screening requests will fail with 500.")

        app.state.settings = settings
        app.state.completion_client = completion_client
        app.state.report_generator = AdverseMediaReportGenerator(
            completion_client,
            temperature=settings.adverse_media_temperature,
            max_tokens=settings.adverse_media_max_tokens,
        )
        app.state.analysis_service = AnalysisService(
            completion_client,
            temperature=settings.analysis_temperature,
            max_tokens=settings.analysis_max_tokens,
        )
        logger.info(
            "Configuration loaded successfully (model=%s, api_configured=%s).",
            settings.deepseek_model,
            completion_client.configured,
        )

        logger.info("kyc-screening ready.")
        yield
    finally:
        logger.info("kyc-screening shutting down...")
        if session is not None:
            await session.aclose()


app = FastAPI(
    title="kyc-screening",
    description="Adverse media screening and AI-assisted compliance analysis",
    version=__version__,
    lifespan=lifespan,
)
app.include_router(adverse_media.router)
app.include_router(analysis.router)
app.include_router(health.router)


@app.get("/health")
async def health_check():
    """Basic health check endpoint."""
    return {"status": "healthy", "version": __version__}
