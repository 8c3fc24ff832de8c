from __future__ import annotations

import json
import sys
from datetime import datetime, timezone

from .config import LOG_LEVELS, LogLevel, Settings
from .errors import ScriptError

_RANK = {name: idx for idx, name in enumerate(LOG_LEVELS)}
_level: LogLevel | None = None
_json_output: bool | None = None


def configure_logging(level: LogLevel | None = None, json_output: bool | None = None) -> None:
    global _level, _json_output
    if level is not None:
        if level not in _RANK:
            raise ValueError(f"unknown log level: {level}")
        _level = level
    if json_output is not None:
        _json_output = json_output


def reset_logging() -> None:
    global _level, _json_output
    _level = None
    _json_output = None


def _effective() -> tuple[LogLevel, bool]:
    if _level is not None and _json_output is not None:
        return _level, _json_output
    try:
        settings = Settings.from_env()
    except ScriptError:
        # Strict validation belongs to the CLI; library callers log with defaults.
        settings = Settings()
    level = _level if _level is not None else settings.log_level
    json_output = _json_output if _json_output is not None else settings.log_format == "json"
    return level, json_output


def log_event(level: LogLevel, component: str, action: str, **fields: object) -> None:
    threshold, json_output = _effective()
    if _RANK[level] < _RANK[threshold]:
        return
    ts = datetime.now(timezone.utc).isoformat()
    if json_output:
        payload = {"ts": ts, "level": level, "component": component, "action": action, **fields}
        sys.stderr.write(json.dumps(payload, sort_keys=True) + "\n")
        return
    core = f"ts={ts} level={level} component={component} action={action}"
    extras = " ".join(f"{key}={_render(value)}" for key, value in sorted(fields.items()))
    sys.stderr.write((core if not extras else f"{core} {extras}") + "\n")


def _render(value: object) -> str:
    text = str(value)
    if not text or any(ch.isspace() for ch in text) or '"' in text:
        return json.dumps(text)
    return text
