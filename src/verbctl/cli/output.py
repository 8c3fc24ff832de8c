"""CLI payload output helpers."""

from __future__ import annotations

import json
import sys
from typing import Any

from ..contracts.validate import ERROR, validate_self
from ..core.errors import ScriptError


def dumps_json(payload: Any, pretty: bool = False) -> str:
    if pretty:
        return json.dumps(payload, indent=2, sort_keys=True)
    return json.dumps(payload, sort_keys=True)


def emit(payload: dict[str, object], as_json: bool) -> None:
    print(dumps_json(payload, pretty=not as_json))


def build_base_payload(schema_name: str, status: str = "ok") -> dict[str, object]:
    return {
        "schema_name": schema_name,
        "schema_version": 1,
        "tool": "verbctl",
        "status": status,
    }


def render_error(exc: ScriptError, as_json: bool) -> None:
    if not as_json:
        print(str(exc), file=sys.stderr)
        return
    payload = {
        **build_base_payload(ERROR, status="fail"),
        "error": exc.as_payload(),
    }
    print(dumps_json(validate_self(ERROR, payload)), file=sys.stderr)
