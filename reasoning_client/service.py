"""Caller-side helpers for consuming :data:`ApiResponse` values."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from .client import ReasoningClient
from .types import ApiResponse, Error, Partial, ReasoningEffort, Success

LOGGER = logging.getLogger(__name__)


class ResponseStatus(Enum):
    SUCCESS = "success"
    ERROR = "error"
    PARTIAL = "partial"


@dataclass(slots=True, frozen=True)
class ResponseSummary:
    """Compact description of a response for logs and displays."""

    status: ResponseStatus
    content_length: int
    total_tokens: int
    details: str


def extract_safe_content(response: ApiResponse) -> str | None:
    """Return the usable text of ``response`` and log how it was obtained."""

    match response:
        case Success(input_tokens=input_tokens, output_tokens=output_tokens):
            LOGGER.info(
                "success with %d input token(s), %d output token(s)",
                input_tokens,
                output_tokens,
            )
            return response.text
        case Error(message=message, code=code):
            LOGGER.warning("API error [%s]: %s", code, message)
            return None
        case Partial(reason=reason):
            LOGGER.info("partial response: %s", reason)
            return response.available_text
    raise TypeError(f"not an ApiResponse: {type(response).__name__}")


def summarize_response(response: ApiResponse) -> ResponseSummary:
    """Reduce ``response`` to status, length, token count and a detail tag."""

    match response:
        case Success():
            return ResponseSummary(
                ResponseStatus.SUCCESS,
                len(response.text),
                response.input_tokens + response.output_tokens,
                response.reasoning_effort,
            )
        case Error():
            return ResponseSummary(ResponseStatus.ERROR, 0, 0, response.code)
        case Partial():
            return ResponseSummary(
                ResponseStatus.PARTIAL,
                len(response.available_text),
                0,
                response.reason,
            )
    raise TypeError(f"not an ApiResponse: {type(response).__name__}")


class ReasoningService:
    """Thin facade applying a default reasoning effort to a client."""

    def __init__(
        self,
        client: ReasoningClient,
        *,
        default_effort: ReasoningEffort = ReasoningEffort.MEDIUM,
    ) -> None:
        self.client = client
        self.default_effort = default_effort

    def reasoning_answer(
        self, prompt: str, effort: ReasoningEffort | None = None
    ) -> ApiResponse:
        return self.client.send_reasoning_request(
            prompt, effort or self.default_effort
        )

    def text_answer(
        self, prompt: str, effort: ReasoningEffort | None = None
    ) -> str | None:
        return self.client.send_for_text(prompt, effort or self.default_effort)


__all__ = [
    "ReasoningService",
    "ResponseStatus",
    "ResponseSummary",
    "extract_safe_content",
    "summarize_response",
]
