"""Deterministic mock client for tests and offline use."""

from __future__ import annotations

import copy
import logging
from collections import deque
from collections.abc import Iterable, Mapping
from typing import Any

from .client import text_of
from .parse import parse_response
from .types import ApiResponse, ReasoningEffort

LOGGER = logging.getLogger(__name__)

_RESPONSE: dict[str, Any] = {
    "id": "resp_mock",
    "object": "response",
    "status": "completed",
    "model": "mock",
    "output": [
        {"type": "reasoning", "summary": []},
        {
            "type": "message",
            "role": "assistant",
            "content": [{"type": "output_text", "text": "mock answer"}],
        },
    ],
    "reasoning": {"effort": None, "trace": "mock trace"},
    "usage": {"input_tokens": 0, "output_tokens": 2},
}


class MockClient:
    """Client returning a canned Responses document regardless of input.

    ``requests`` keeps the most recent ``history`` calls for inspection in
    tests; older calls are discarded.
    """

    def __init__(self, document: Any | None = None, *, history: int = 100) -> None:
        self.document = _RESPONSE if document is None else document
        self._echo_effort = document is None
        self.requests: deque[tuple[list[dict[str, str]], ReasoningEffort]] = deque(
            maxlen=history
        )

    def send(
        self, messages: Iterable[Mapping[str, str]], effort: ReasoningEffort
    ) -> ApiResponse:
        """Record the call and return the canned document, parsed."""

        self.requests.append(([dict(m) for m in messages], effort))
        raw = copy.deepcopy(self.document)
        if self._echo_effort:
            raw["reasoning"]["effort"] = effort.value
        LOGGER.debug("mock client answering with effort %s", effort.value)
        return parse_response(raw)

    def send_reasoning_request(
        self, prompt: str, effort: ReasoningEffort
    ) -> ApiResponse:
        return self.send([{"role": "user", "content": prompt}], effort)

    def send_for_text(self, prompt: str, effort: ReasoningEffort) -> str | None:
        return text_of(self.send_reasoning_request(prompt, effort))


__all__ = ["MockClient"]
