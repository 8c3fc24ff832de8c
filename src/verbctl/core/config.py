from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal

from .env import getenv
from .errors import ScriptError
from .exit_codes import ERR_CONFIG

LogLevel = Literal["debug", "info", "warning", "error"]
LogFormat = Literal["text", "json"]

OFFLINE_ENV = "VERBCTL_OFFLINE"
IGNORE_CHROOT_ENV = "VERBCTL_IGNORE_CHROOT"
LOG_LEVEL_ENV = "VERBCTL_LOG_LEVEL"
LOG_FORMAT_ENV = "VERBCTL_LOG_FORMAT"

LOG_LEVELS: tuple[LogLevel, ...] = ("debug", "info", "warning", "error")
LOG_FORMATS: tuple[LogFormat, ...] = ("text", "json")


@dataclass(frozen=True)
class Settings:
    offline_env: str = OFFLINE_ENV
    ignore_chroot_env: str = IGNORE_CHROOT_ENV
    log_level: LogLevel = "info"
    log_format: LogFormat = "text"

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "Settings":
        level = (getenv(LOG_LEVEL_ENV, "info", env=env) or "info").strip().lower()
        if level not in LOG_LEVELS:
            raise ScriptError(f"invalid {LOG_LEVEL_ENV}: {level!r} (expected one of {', '.join(LOG_LEVELS)})", ERR_CONFIG, "config")
        fmt = (getenv(LOG_FORMAT_ENV, "text", env=env) or "text").strip().lower()
        if fmt not in LOG_FORMATS:
            raise ScriptError(f"invalid {LOG_FORMAT_ENV}: {fmt!r} (expected one of {', '.join(LOG_FORMATS)})", ERR_CONFIG, "config")
        return cls(log_level=level, log_format=fmt)  # type: ignore[arg-type]

    def as_payload(self) -> dict[str, object]:
        return {
            "offline_env": self.offline_env,
            "ignore_chroot_env": self.ignore_chroot_env,
            "log_level": self.log_level,
            "log_format": self.log_format,
        }
