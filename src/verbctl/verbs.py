"""Verb table dispatch for subcommand-style tools.

A tool declares its verbs once, as an ordered tuple of `Verb` entries, and
hands its already-tokenized argument vector to `dispatch_verb`. The verb at
`argv[optind]` selects the entry; with no verb given, the entry flagged
`VerbFlag.DEFAULT` runs as if its own name had been typed.

Handlers receive the argument list starting at the verb name (so `args[0]`
is always the verb) together with the caller's user data, and return an
integer result: negative for errors, non-negative for success.
"""

from __future__ import annotations

import enum
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from .core.config import OFFLINE_ENV
from .core.env import getenv_bool
from .core.errors import ScriptError
from .core.exit_codes import ERR_INVALID_ARGUMENT, OK
from .core.logging import log_event
from .core.privileges import must_be_root
from .core.result import Err, Ok
from .core.virt import running_in_chroot

T = TypeVar("T")

VERB_ANY = None


class VerbFlag(enum.Flag):
    DEFAULT = enum.auto()
    ONLINE_ONLY = enum.auto()
    MUST_BE_ROOT = enum.auto()


@dataclass(frozen=True)
class Verb(Generic[T]):
    name: str
    min_args: int | None
    max_args: int | None
    flags: VerbFlag
    handler: Callable[[list[str], T], int]

    def __post_init__(self) -> None:
        if self.min_args is not None and self.max_args is not None and self.min_args > self.max_args:
            raise ValueError(f"verb {self.name!r}: min_args {self.min_args} exceeds max_args {self.max_args}")


@dataclass(frozen=True)
class OfflineDecision:
    offline: bool
    source: str
    reason: str


def decide_offline(env: Mapping[str, str] | None = None) -> OfflineDecision:
    """Decide whether online-only verbs must be skipped.

    An explicit `VERBCTL_OFFLINE` value wins in both directions; only when it
    is unset or unparseable is chroot detection consulted.
    """
    override = getenv_bool(OFFLINE_ENV, env=env)
    if isinstance(override, Ok):
        return OfflineDecision(override.value, "env", f"{OFFLINE_ENV} is {'true' if override.value else 'false'}")
    log_event("debug", "verbs", "offline_override", message=override.error)

    chroot = running_in_chroot(env)
    if isinstance(chroot, Err):
        log_event("debug", "verbs", "chroot_probe", message=chroot.error)
    elif chroot.value:
        return OfflineDecision(True, "chroot", "running in chroot")
    return OfflineDecision(False, "default", "not offline")


def running_in_chroot_or_offline(env: Mapping[str, str] | None = None) -> bool:
    return decide_offline(env).offline


def _find_verb(verbs: Sequence[Verb[T]], name: str | None) -> Verb[T]:
    for verb in verbs:
        if name is not None:
            if verb.name == name:
                return verb
        elif VerbFlag.DEFAULT in verb.flags:
            return verb
    if name is not None:
        raise ScriptError(f"unknown operation {name}", ERR_INVALID_ARGUMENT, "unknown_verb")
    raise ScriptError("requires operation parameter", ERR_INVALID_ARGUMENT, "missing_verb")


def _check_arg_count(verb: Verb[T], left: int) -> None:
    if verb.min_args is not None and left < verb.min_args:
        raise ScriptError("too few arguments", ERR_INVALID_ARGUMENT, "too_few_arguments")
    if verb.max_args is not None and left > verb.max_args:
        raise ScriptError("too many arguments", ERR_INVALID_ARGUMENT, "too_many_arguments")


def _log_failure(exc: ScriptError, name: str | None) -> None:
    fields: dict[str, object] = {"message": exc.message, "kind": exc.kind, "code": exc.code}
    if name is not None:
        fields["verb"] = name
    log_event("error", "verbs", "dispatch", **fields)


def dispatch_verb(
    argv: Sequence[str],
    verbs: Sequence[Verb[T]],
    userdata: T,
    *,
    optind: int = 1,
    env: Mapping[str, str] | None = None,
) -> int:
    """Select the verb named by `argv[optind]` and run its handler.

    Returns the handler's result unchanged, `ERR_INVALID_ARGUMENT` for an
    unknown or missing verb or an argument count out of bounds,
    `ERR_PERMISSION` when a root-only verb runs unprivileged, and `OK` when
    an online-only verb is skipped in a chroot or offline environment.
    """
    assert verbs, "verb table must not be empty"
    assert callable(verbs[0].handler), "first verb must carry a handler"
    assert argv is not None
    assert 0 <= optind <= len(argv), f"optind {optind} outside argv of length {len(argv)}"

    name = argv[optind] if optind < len(argv) else None
    try:
        verb = _find_verb(verbs, name)
        # A default verb runs as if its own name were the only argument.
        _check_arg_count(verb, len(argv) - optind if name is not None else 1)
    except ScriptError as exc:
        _log_failure(exc, name)
        return exc.code

    if VerbFlag.ONLINE_ONLY in verb.flags and running_in_chroot_or_offline(env):
        if name is not None:
            log_event("info", "verbs", "skip", message="running in chroot, ignoring request", verb=name)
        else:
            log_event("info", "verbs", "skip", message="running in chroot, ignoring request")
        return OK

    if VerbFlag.MUST_BE_ROOT in verb.flags:
        try:
            must_be_root()
        except ScriptError as exc:
            _log_failure(exc, name)
            return exc.code

    if name is not None:
        return verb.handler(list(argv[optind:]), userdata)
    return verb.handler([verb.name], userdata)


__all__ = [
    "OfflineDecision",
    "VERB_ANY",
    "Verb",
    "VerbFlag",
    "decide_offline",
    "dispatch_verb",
    "running_in_chroot_or_offline",
]
