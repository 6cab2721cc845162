"""Normalize Responses API documents into :data:`ApiResponse` values.

The upstream reply has no single stable shape: text may sit in a direct
``output_text`` field, inside typed ``output`` items, or at one of a few
legacy paths. Parsing never raises for a decoded JSON value; missing or
malformed fields degrade to defaults.
"""

from __future__ import annotations

import logging
from typing import Any

from .pointer import MISSING, as_int, as_text, first_node, first_text, resolve
from .types import ApiResponse, Error, Partial, Success

LOGGER = logging.getLogger(__name__)

NO_TEXT_REASON = "No text content available"

_FALLBACK_TEXT_POINTERS = ("/output/0/content/0/text", "/response/0/content/0/text")
_REASONING_POINTERS = ("/reasoning", "/meta/reasoning")


def _member(node: Any, key: str) -> Any:
    return node.get(key, MISSING) if isinstance(node, dict) else MISSING


def _append_message(item: dict[str, Any], parts: list[str]) -> None:
    content = item.get("content")
    if not isinstance(content, list):
        return
    for chunk in content:
        chunk_type = as_text(_member(chunk, "type"), "")
        if chunk_type in ("output_text", "text"):
            value = as_text(_member(chunk, "text"))
        elif chunk_type == "markdown":
            value = as_text(_member(chunk, "content"))
        else:
            continue
        if value and not value.isspace():
            parts.append(value)


def _append_function_call(item: dict[str, Any], parts: list[str]) -> None:
    # Function calls carry no answer text yet; surface them as a marker.
    name = as_text(resolve(item, "/function/name"), "")
    if name:
        parts.append(f"[Function: {name}] ")


def extract_text(raw: Any) -> str | None:
    """Return the answer text carried by ``raw`` or ``None``.

    Sources are tried in order and the first hit wins:

    1. a non-null top-level ``output_text``;
    2. the ``output`` array, concatenating ``message`` content chunks
       (``output_text``/``text``/``markdown``) and ``function_call``
       markers in document order;
    3. the first of ``/output/0/content/0/text`` and
       ``/response/0/content/0/text`` that resolves.
    """

    direct = _member(raw, "output_text")
    if direct is not MISSING and direct is not None:
        return as_text(direct)

    output = _member(raw, "output")
    if isinstance(output, list):
        parts: list[str] = []
        for item in output:
            if not isinstance(item, dict):
                continue
            item_type = as_text(item.get("type"), "")
            if item_type == "message":
                _append_message(item, parts)
            elif item_type == "function_call":
                _append_function_call(item, parts)
            # "error" items and unknown types are skipped so adjacent text survives
        if parts:
            return "".join(parts)

    return first_text(raw, *_FALLBACK_TEXT_POINTERS)


def parse_response(raw: Any) -> ApiResponse:
    """Classify ``raw`` as :class:`Error`, :class:`Partial` or :class:`Success`."""

    # ``"error": null`` accompanies successful replies; any other value is an error
    error = _member(raw, "error")
    if error is not MISSING and error is not None:
        message = as_text(_member(error, "message"), "Unknown error")
        code = as_text(_member(error, "code"), "unknown")
        LOGGER.debug("upstream reported error %s: %s", code, message)
        return Error(message=message, code=code, raw=raw)

    text = extract_text(raw)
    if not text:
        LOGGER.debug("no text content found in response")
        return Partial(available_text="", reason=NO_TEXT_REASON, raw=raw)

    reasoning = first_node(raw, *_REASONING_POINTERS)
    effort = as_text(_member(reasoning, "effort"), "unknown")
    trace = as_text(_member(reasoning, "trace"), "")
    input_tokens = as_int(resolve(raw, "/usage/input_tokens"))
    output_tokens = as_int(resolve(raw, "/usage/output_tokens"))
    LOGGER.debug(
        "parsed response: %d char(s), effort %s, %d input / %d output token(s)",
        len(text),
        effort,
        input_tokens,
        output_tokens,
    )
    return Success(
        text=text,
        reasoning_effort=effort,
        reasoning_trace=trace,
        input_tokens=input_tokens,
        output_tokens=output_tokens,
        raw=raw,
    )


__all__ = ["NO_TEXT_REASON", "extract_text", "parse_response"]
