from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ScriptError(Exception):
    """Failure carrying a verbctl exit code and a machine-readable kind."""

    message: str
    code: int
    kind: str = "generic_error"

    def __str__(self) -> str:
        return self.message

    def as_payload(self) -> dict[str, object]:
        return {"message": self.message, "code": self.code, "kind": self.kind}
