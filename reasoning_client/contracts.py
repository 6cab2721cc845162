"""Pydantic contracts for the outbound Responses API request body."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from pydantic import BaseModel, Field

from .types import ReasoningEffort


class InputMessage(BaseModel):
    """One conversational turn sent to the model."""

    role: str = Field(..., description="Author role: user, system or assistant")
    content: str = Field(..., description="Plain-text message content")


class ReasoningOptions(BaseModel):
    """Reasoning controls forwarded to the model."""

    effort: ReasoningEffort = Field(..., description="Reasoning effort level")


class ResponsesRequest(BaseModel):
    """Body of ``POST /responses``."""

    model: str = Field(..., description="Model identifier")
    input: list[InputMessage] = Field(..., description="Ordered input messages")
    reasoning: ReasoningOptions

    @classmethod
    def build(
        cls,
        model: str,
        messages: Iterable[Mapping[str, str]],
        effort: ReasoningEffort,
    ) -> ResponsesRequest:
        """Validate ``messages`` and ``effort`` into a request body."""

        return cls.model_validate(
            {
                "model": model,
                "input": [dict(message) for message in messages],
                "reasoning": {"effort": effort},
            }
        )

    def to_json(self) -> str:
        """Return the wire JSON with the effort as its lowercase string."""

        return self.model_dump_json()


__all__ = ["InputMessage", "ReasoningOptions", "ResponsesRequest"]
