"""Result helpers for probes that can be undetermined.

Probes such as boolean environment parsing or chroot detection either
determine a value or fail with a diagnostic; callers branch on `Ok`/`Err`
instead of catching exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E


Result = Ok[T] | Err[E]
Probe = Result[bool, str]
