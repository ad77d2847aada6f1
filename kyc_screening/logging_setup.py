"""Logging bootstrap: stdlib handlers from YAML plus structlog JSON events."""

from __future__ import annotations

import logging
import logging.config
from pathlib import Path

import structlog
import yaml


def setup_logging(config_path: str | Path = "config/logging.yaml") -> None:
    """Load logging configuration from YAML, then configure structlog."""
    log_config_path = Path(config_path)
    if log_config_path.exists():
        with open(log_config_path, encoding="utf-8") as f:
            config = yaml.safe_load(f)
        logging.config.dictConfig(config)
    else:
        logging.basicConfig(level=logging.INFO, format="%(message)s")
    configure_structured_logging()


def configure_structured_logging() -> None:
    """Render structlog events as JSON through stdlib loggers."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
