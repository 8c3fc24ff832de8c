from __future__ import annotations

import argparse
import os
import sys
from dataclasses import dataclass

from .. import __version__
from ..contracts.validate import STATUS, VERBS, validate_self
from ..core.config import Settings
from ..core.errors import ScriptError
from ..core.exit_codes import ERR_INTERNAL, exit_status
from ..core.logging import configure_logging, log_event
from ..verbs import VERB_ANY, Verb, VerbFlag, decide_offline, dispatch_verb
from .output import build_base_payload, emit, render_error

PROG = "verbctl"


@dataclass(frozen=True)
class CliContext:
    settings: Settings
    as_json: bool


def _flag_names(flags: VerbFlag) -> list[str]:
    return [flag.name for flag in VerbFlag if flag in flags]


def run_status(args: list[str], ctx: CliContext) -> int:
    decision = decide_offline()
    payload = {
        **build_base_payload(STATUS),
        "offline": {"offline": decision.offline, "source": decision.source, "reason": decision.reason},
        "euid": os.geteuid(),
        "settings": ctx.settings.as_payload(),
    }
    if ctx.as_json:
        emit(validate_self(STATUS, payload), True)
        return 0
    print(f"offline: {'yes' if decision.offline else 'no'} ({decision.source}: {decision.reason})")
    print(f"euid: {payload['euid']}")
    print(f"offline override: {ctx.settings.offline_env}")
    return 0


def run_verbs(args: list[str], ctx: CliContext) -> int:
    rows = [
        {"name": verb.name, "min_args": verb.min_args, "max_args": verb.max_args, "flags": _flag_names(verb.flags)}
        for verb in VERB_TABLE
    ]
    if ctx.as_json:
        emit(validate_self(VERBS, {**build_base_payload(VERBS), "verbs": rows}), True)
        return 0
    for row in rows:
        bounds = f"{_bound(row['min_args'])}..{_bound(row['max_args'])}"
        flags = ",".join(row["flags"]) or "-"
        print(f"{row['name']:<12} {bounds:<8} {flags}")
    return 0


def _bound(value: object) -> str:
    return "any" if value is None else str(value)


def run_online(args: list[str], ctx: CliContext) -> int:
    print(" ".join(["online", *args[1:]]))
    return 0


def run_privileged(args: list[str], ctx: CliContext) -> int:
    print("root")
    return 0


def run_version(args: list[str], ctx: CliContext) -> int:
    print(f"{PROG} {__version__}")
    return 0


VERB_TABLE: tuple[Verb[CliContext], ...] = (
    Verb("status", 1, 1, VerbFlag.DEFAULT, run_status),
    Verb("verbs", 1, 1, VerbFlag(0), run_verbs),
    Verb("online", 1, VERB_ANY, VerbFlag.ONLINE_ONLY, run_online),
    Verb("privileged", 1, 1, VerbFlag.MUST_BE_ROOT, run_privileged),
    Verb("version", 1, 1, VerbFlag(0), run_version),
)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog=PROG)
    p.add_argument("--version", action="version", version=f"{PROG} {__version__}")
    p.add_argument("--json", action="store_true", help="emit JSON output")
    p.add_argument("--log-format", choices=["text", "json"], default=None, help="diagnostic log format")
    vg = p.add_mutually_exclusive_group()
    vg.add_argument("--verbose", action="store_true", help="enable debug diagnostics")
    vg.add_argument("--quiet", action="store_true", help="only emit errors")
    p.add_argument("argv", nargs=argparse.REMAINDER, metavar="VERB", help="verb followed by its arguments")
    return p


def main(argv: list[str] | None = None) -> int:
    p = build_parser()
    ns = p.parse_args(argv)
    try:
        settings = Settings.from_env()
        level = "debug" if ns.verbose else "error" if ns.quiet else settings.log_level
        configure_logging(level, (ns.log_format or settings.log_format) == "json")
        ctx = CliContext(settings=settings, as_json=ns.json)
        log_event("debug", "cli", "start", argv=" ".join(ns.argv) or "<none>")
        return exit_status(dispatch_verb([PROG, *ns.argv], VERB_TABLE, ctx))
    except ScriptError as exc:
        render_error(exc, ns.json)
        return exit_status(exc.code)
    except Exception as exc:
        render_error(ScriptError(f"internal error: {exc}", ERR_INTERNAL, "internal"), ns.json)
        return ERR_INTERNAL


if __name__ == "__main__":
    sys.exit(main())
