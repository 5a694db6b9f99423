"""Ok/Err result values.

Components in hc-swap never raise for expected failures (network, archive,
filesystem). They return ``Ok(value)`` or ``Err(error)`` and the caller
decides what to do:

    match inspect_store(path):
        case Ok(Missing()):
            ...
        case Ok(Populated(versions=versions)):
            ...
        case Err(error):
            console.error(error.message)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Successful result carrying ``value``."""

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err[E]:
    """Failed result carrying ``error``."""

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]
