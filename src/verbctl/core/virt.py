"""Chroot detection."""

from __future__ import annotations

import os
from collections.abc import Mapping

from .config import IGNORE_CHROOT_ENV
from .env import getenv_bool
from .result import Err, Ok, Probe

INIT_ROOT = "/proc/1/root"


def _same_file(left: str, right: str) -> bool:
    a = os.stat(left)
    b = os.stat(right)
    return (a.st_dev, a.st_ino) == (b.st_dev, b.st_ino)


def running_in_chroot(
    env: Mapping[str, str] | None = None,
    *,
    root: str = "/",
    init_root: str = INIT_ROOT,
    ignore_env: str = IGNORE_CHROOT_ENV,
) -> Probe:
    """Report whether our root differs from the root of PID 1.

    Setting `ignore_env` to a true value short-circuits the probe to
    `Ok(False)`. An unreadable `init_root` yields `Err`.
    """
    ignore = getenv_bool(ignore_env, env=env)
    if isinstance(ignore, Ok) and ignore.value:
        return Ok(False)
    try:
        return Ok(not _same_file(init_root, root))
    except OSError as exc:
        return Err(f"comparing {init_root} with {root}: {exc.strerror or exc}")
