from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]


def run_verbctl(*args: str, env: dict[str, str] | None = None) -> subprocess.CompletedProcess[str]:
    proc_env = {k: v for k, v in os.environ.items() if not k.startswith("VERBCTL_")}
    proc_env["PYTHONPATH"] = str(ROOT / "src")
    proc_env["VERBCTL_IGNORE_CHROOT"] = "1"
    proc_env.update(env or {})
    return subprocess.run(
        [sys.executable, "-m", "verbctl.cli", *args],
        cwd=ROOT,
        env=proc_env,
        text=True,
        capture_output=True,
        check=False,
    )


class Recorder:
    """Verb handler double that records each invocation."""

    def __init__(self, result: int = 0) -> None:
        self.result = result
        self.calls: list[tuple[list[str], object]] = []

    def __call__(self, args: list[str], userdata: object) -> int:
        self.calls.append((list(args), userdata))
        return self.result
