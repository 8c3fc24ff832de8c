from __future__ import annotations

import os

from .errors import ScriptError
from .exit_codes import ERR_PERMISSION


def must_be_root() -> None:
    if os.geteuid() == 0:
        return
    raise ScriptError("need to be root", ERR_PERMISSION, "permission")
