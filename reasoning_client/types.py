"""Typed structures shared by the client and the response normalizer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ReasoningEffort(Enum):
    """How much reasoning the upstream model spends before answering."""

    MINIMAL = "minimal"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def parse(cls, value: str) -> ReasoningEffort:
        """Return the member whose wire-string matches ``value``.

        Matching ignores case and surrounding whitespace. Unknown values
        raise ``ValueError`` listing the accepted wire-strings.
        """

        try:
            return cls(value.strip().lower())
        except ValueError:
            choices = ", ".join(member.value for member in cls)
            raise ValueError(
                f"unknown reasoning effort {value!r} (expected one of: {choices})"
            ) from None


@dataclass(slots=True, frozen=True)
class Success:
    """A completed answer with reasoning and usage metadata."""

    text: str
    reasoning_effort: str
    reasoning_trace: str
    input_tokens: int
    output_tokens: int
    raw: Any

    @property
    def raw_json(self) -> Any:
        return self.raw

    @property
    def is_success(self) -> bool:
        return True

    @property
    def text_content(self) -> str | None:
        return self.text


@dataclass(slots=True, frozen=True)
class Error:
    """Failure reported by the upstream inside a received document."""

    message: str
    code: str
    raw: Any

    @property
    def raw_json(self) -> Any:
        return self.raw

    @property
    def is_success(self) -> bool:
        return False

    @property
    def text_content(self) -> str | None:
        return None


@dataclass(slots=True, frozen=True)
class Partial:
    """Document received but no usable answer text could be located."""

    available_text: str
    reason: str
    raw: Any

    @property
    def raw_json(self) -> Any:
        return self.raw

    @property
    def is_success(self) -> bool:
        return False

    @property
    def text_content(self) -> str | None:
        return self.available_text


# Closed union; callers branch on it with ``match`` or ``isinstance``.
ApiResponse = Success | Error | Partial


__all__ = ["ApiResponse", "Error", "Partial", "ReasoningEffort", "Success"]
