"""Outbound API clients."""

from kyc_screening.clients.completion import CompletionClient

__all__ = ["CompletionClient"]
