from __future__ import annotations

import errno
import json
from pathlib import Path

ERROR_REGISTRY = Path(__file__).resolve().parent / "error-registry.json"

EXIT_FAILURE = 1


def _load_registry() -> dict[str, int]:
    payload = json.loads(ERROR_REGISTRY.read_text(encoding="utf-8"))
    mapping: dict[str, int] = {}
    for row in payload.get("codes", []):
        mapping[str(row["name"])] = -int(getattr(errno, str(row["errno"])))
    for row in payload.get("exit", []):
        mapping[str(row["name"])] = int(row["code"])
    return mapping


_REG = _load_registry()

OK = 0
ERR_INVALID_ARGUMENT = _REG["VERB_ERR_INVALID_ARGUMENT"]
ERR_PERMISSION = _REG["VERB_ERR_PERMISSION"]
ERR_CONFIG = _REG["VERB_ERR_CONFIG"]
ERR_VALIDATION = _REG["VERB_ERR_VALIDATION"]
ERR_INTERNAL = _REG["VERB_ERR_INTERNAL"]


def exit_status(code: int) -> int:
    """Map a dispatcher result to a process exit status."""
    return EXIT_FAILURE if code < 0 else code
