"""Client settings loaded from the environment or a YAML file."""

from __future__ import annotations

import math
import os
from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from yaml import safe_load

from .types import ReasoningEffort

DEFAULT_BASE_URL = "https://api.openai.com/v1"
DEFAULT_MODEL = "gpt-5-nano"
DEFAULT_TIMEOUT = 60.0


def _parse_timeout(value: Any, source: str) -> float:
    """Return ``value`` as a positive, finite number of seconds."""

    try:
        timeout = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{source} must be a number, got {value!r}") from None
    if not math.isfinite(timeout) or timeout <= 0:
        raise ValueError(f"{source} must be positive, got {value!r}")
    return timeout


@dataclass(slots=True, frozen=True)
class ClientSettings:
    """Connection and request defaults for :class:`ResponsesClient`."""

    api_key: str | None = None
    base_url: str = DEFAULT_BASE_URL
    model: str = DEFAULT_MODEL
    project_id: str | None = None
    timeout: float = DEFAULT_TIMEOUT
    effort: ReasoningEffort = ReasoningEffort.MEDIUM

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ClientSettings:
        """Read settings from ``environ`` (defaults to ``os.environ``)."""

        env = os.environ if environ is None else environ
        raw_timeout = env.get("OPENAI_TIMEOUT_SECONDS")
        timeout = (
            _parse_timeout(raw_timeout, "OPENAI_TIMEOUT_SECONDS")
            if raw_timeout
            else DEFAULT_TIMEOUT
        )
        effort = env.get("REASONING_EFFORT")
        return cls(
            api_key=env.get("OPENAI_API_KEY") or None,
            base_url=env.get("OPENAI_BASE_URL") or DEFAULT_BASE_URL,
            model=env.get("OPENAI_MODEL") or DEFAULT_MODEL,
            project_id=env.get("OPENAI_PROJECT_ID") or None,
            timeout=timeout,
            effort=ReasoningEffort.parse(effort) if effort else ReasoningEffort.MEDIUM,
        )

    @classmethod
    def from_yaml(cls, path: Path) -> ClientSettings:
        """Load settings from a YAML mapping at ``path``.

        Keys mirror the field names. A missing file yields the defaults.
        """

        try:
            raw = safe_load(path.read_text()) or {}
        except FileNotFoundError:
            return cls()
        if not isinstance(raw, dict):
            raise ValueError(f"{path} must contain a mapping of settings")
        unknown = set(raw) - _FIELDS
        if unknown:
            raise ValueError(f"unknown setting(s) in {path}: {sorted(unknown)}")
        values: dict[str, Any] = dict(raw)
        if "effort" in values:
            values["effort"] = ReasoningEffort.parse(str(values["effort"]))
        if "timeout" in values:
            values["timeout"] = _parse_timeout(
                values["timeout"], f"timeout in {path}"
            )
        return cls(**values)


_FIELDS = {f.name for f in fields(ClientSettings)}


__all__ = ["ClientSettings", "DEFAULT_BASE_URL", "DEFAULT_MODEL", "DEFAULT_TIMEOUT"]
