"""Centralized environment variable helpers."""

from __future__ import annotations

import os
from collections.abc import Mapping

from .result import Err, Ok, Probe

_TRUE_WORDS = frozenset({"1", "yes", "y", "true", "t", "on"})
_FALSE_WORDS = frozenset({"0", "no", "n", "false", "f", "off"})


def getenv(name: str, default: str | None = None, env: Mapping[str, str] | None = None) -> str | None:
    source = os.environ if env is None else env
    return source.get(name, default)


def parse_boolean(raw: str) -> Probe:
    word = raw.strip().lower()
    if word in _TRUE_WORDS:
        return Ok(True)
    if word in _FALSE_WORDS:
        return Ok(False)
    return Err(f"invalid boolean value: {raw!r}")


def getenv_bool(name: str, env: Mapping[str, str] | None = None) -> Probe:
    """Read `name` as a tri-state boolean.

    Returns `Ok(True)`/`Ok(False)` for a recognised value and `Err` with a
    diagnostic when the variable is unset or cannot be parsed.
    """
    raw = getenv(name, env=env)
    if raw is None:
        return Err(f"{name} is not set")
    parsed = parse_boolean(raw)
    if isinstance(parsed, Err):
        return Err(f"parsing {name}: {parsed.error}")
    return parsed
