"""Command-line entry point: send one prompt and print the answer."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from . import create_client
from .client import ClientError
from .config import ClientSettings
from .service import ReasoningService, extract_safe_content, summarize_response
from .types import Success


def main(argv: list[str] | None = None) -> int:
    """Send the prompt given in ``argv`` and print the result."""
    log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(level=getattr(logging, log_level, logging.INFO))
    args = sys.argv[1:] if argv is None else argv
    prompt = " ".join(args).strip()
    if not prompt:
        print("usage: python -m reasoning_client PROMPT...", file=sys.stderr)
        return 2

    config_path = os.environ.get("REASONING_CLIENT_CONFIG")
    if config_path:
        settings = ClientSettings.from_yaml(Path(config_path))
    else:
        settings = ClientSettings.from_env()
    client = create_client(settings=settings)
    service = ReasoningService(client, default_effort=settings.effort)
    logging.info(
        "sending prompt (model: %s, effort: %s)", settings.model, settings.effort.value
    )
    try:
        response = service.reasoning_answer(prompt)
    except ClientError as err:
        logging.error("%s: %s", err, err.cause)
        return 2

    summary = summarize_response(response)
    print(
        f"[{summary.status.value}] {summary.details} "
        f"({summary.content_length} chars, {summary.total_tokens} tokens)"
    )
    text = extract_safe_content(response)
    if text:
        print(text)
    return 0 if isinstance(response, Success) else 1


if __name__ == "__main__":  # pragma: no cover - manual entry
    sys.exit(main())
