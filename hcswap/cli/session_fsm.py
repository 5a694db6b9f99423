from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TypeVar

from hcswap.core.result import Err, Ok, Result
from hcswap.releases.errors import SwapError

S = TypeVar("S")
K = TypeVar("K")


@dataclass(frozen=True, slots=True)
class StepAdvance[S]:
    session: S


@dataclass(frozen=True, slots=True)
class StepFinish:
    pass


StepOutcome = StepAdvance[S] | StepFinish
StepHandler = Callable[[S], Result[StepOutcome[S], SwapError]]
GetStep = Callable[[S], K]


FINISH = StepFinish()


def advance[S](session: S) -> StepAdvance[S]:
    return StepAdvance(session=session)


def run_state_machine(
    *,
    initial_state: S,
    get_step: GetStep[S, K],
    handlers: Mapping[K, StepHandler[S]],
    on_transition: Callable[[S], None] | None = None,
) -> Result[None, SwapError]:
    """Drive ``handlers`` until one finishes or fails.

    Each handler returns ``advance(next_state)`` to keep going or ``FINISH``
    to end the session. The first Err is returned unchanged.
    """
    current = initial_state

    while True:
        step = get_step(current)
        handler = handlers.get(step)
        if handler is None:
            raise ValueError(f"no handler for session step: {step}")

        outcome = handler(current)
        if isinstance(outcome, Err):
            return outcome

        if isinstance(outcome.value, StepFinish):
            return Ok(None)

        current = outcome.value.session
        if on_transition is not None:
            on_transition(current)
