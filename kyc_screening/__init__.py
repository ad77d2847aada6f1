"""Adverse media screening and AI-assisted compliance analysis service."""

__version__ = "0.1.0"
