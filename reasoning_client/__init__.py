"""Responses API client with reasoning effort and reply normalization."""

from __future__ import annotations

import os

from .client import ClientError, ReasoningClient, ResponsesClient
from .config import ClientSettings
from .mock import MockClient
from .parse import extract_text, parse_response
from .service import ReasoningService, summarize_response
from .types import ApiResponse, Error, Partial, ReasoningEffort, Success


def create_client(
    backend: str | None = None, settings: ClientSettings | None = None
) -> ReasoningClient:
    """Return a client based on ``backend`` or environment."""

    if backend is None:
        key = settings.api_key if settings else os.getenv("OPENAI_API_KEY")
        backend = "OPENAI" if key else "MOCK"
    backend = backend.upper()
    if backend == "OPENAI":
        return ResponsesClient.from_settings(settings or ClientSettings.from_env())
    return MockClient()


__all__ = [
    "ApiResponse",
    "ClientError",
    "ClientSettings",
    "Error",
    "MockClient",
    "Partial",
    "ReasoningClient",
    "ReasoningEffort",
    "ReasoningService",
    "ResponsesClient",
    "Success",
    "create_client",
    "extract_text",
    "parse_response",
    "summarize_response",
]
