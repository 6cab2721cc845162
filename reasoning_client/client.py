"""OpenAI Responses API client with a reasoning-effort knob."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Protocol

import requests

from .config import DEFAULT_MODEL, DEFAULT_TIMEOUT, ClientSettings
from .contracts import ResponsesRequest
from .parse import parse_response
from .types import ApiResponse, ReasoningEffort

LOGGER = logging.getLogger(__name__)

SEND_FAILED_MESSAGE = "Failed to send request to OpenAI API"
_RESPONSES_PATH = "/responses"


class ClientError(RuntimeError):
    """Raised when a request could not be completed at all."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class ReasoningClient(Protocol):
    """Interface shared by the real and mock clients."""

    def send(
        self, messages: Iterable[Mapping[str, str]], effort: ReasoningEffort
    ) -> ApiResponse:
        """Send ``messages`` and return the normalized reply."""

    def send_reasoning_request(
        self, prompt: str, effort: ReasoningEffort
    ) -> ApiResponse:
        """Send a single user ``prompt`` and return the normalized reply."""

    def send_for_text(self, prompt: str, effort: ReasoningEffort) -> str | None:
        """Return only the text of the reply to ``prompt``."""


def text_of(response: ApiResponse) -> str | None:
    """Project ``response`` onto its text; upstream errors yield ``None``."""

    return response.text_content


class ResponsesClient:
    """Client posting to ``<base_url>/responses``."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        *,
        model: str = DEFAULT_MODEL,
        project_id: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.url = base_url.rstrip("/") + _RESPONSES_PATH
        self.api_key = api_key
        self.model = model
        self.project_id = project_id
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: ClientSettings) -> ResponsesClient:
        """Build a client from ``settings``; an API key is required."""

        if not settings.api_key:
            raise RuntimeError("OPENAI_API_KEY is not set")
        return cls(
            settings.base_url,
            settings.api_key,
            model=settings.model,
            project_id=settings.project_id,
            timeout=settings.timeout,
        )

    def _headers(self) -> dict[str, str]:
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        if self.project_id:
            headers["OpenAI-Project"] = self.project_id
        return headers

    def send(
        self, messages: Iterable[Mapping[str, str]], effort: ReasoningEffort
    ) -> ApiResponse:
        """Send ``messages`` (ordered role/content pairs) with ``effort``.

        Raises :class:`ClientError` when the body cannot be serialized,
        the transport fails, the status is not 2xx or the reply is not
        JSON. Errors reported inside a JSON reply are returned as
        :class:`~reasoning_client.types.Error`.
        """

        try:
            request = ResponsesRequest.build(self.model, messages, effort)
            body = request.to_json()
        except (TypeError, ValueError) as exc:
            raise ClientError(SEND_FAILED_MESSAGE, exc) from exc

        LOGGER.debug(
            "posting to %s (model %s, effort %s)",
            self.url,
            request.model,
            request.reasoning.effort.value,
        )
        try:
            resp = requests.post(
                self.url, headers=self._headers(), data=body, timeout=self.timeout
            )
            resp.raise_for_status()
            data: Any = resp.json()
        except (requests.RequestException, ValueError) as exc:
            raise ClientError(SEND_FAILED_MESSAGE, exc) from exc
        return parse_response(data)

    def send_reasoning_request(
        self, prompt: str, effort: ReasoningEffort
    ) -> ApiResponse:
        """Send a single user ``prompt`` with ``effort``."""

        return self.send([{"role": "user", "content": prompt}], effort)

    def send_for_text(self, prompt: str, effort: ReasoningEffort) -> str | None:
        return text_of(self.send_reasoning_request(prompt, effort))


__all__ = [
    "ClientError",
    "ReasoningClient",
    "ResponsesClient",
    "SEND_FAILED_MESSAGE",
    "text_of",
]
