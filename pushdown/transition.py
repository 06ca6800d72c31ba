"""pushdown.transition — Stack mutations requested by states.

States return one of these from ``update()`` / ``handle_event()`` instead
of touching the machine's stack.  The machine reads the value and applies
exactly one mutation before control returns to the host.

    NoTransition()    leave the stack alone
    Pop()             remove the top state
    Push(state)       suspend the top state, put *state* above it
    Switch(state)     replace the top state with *state*
    Quit()            unwind every state and stop the machine
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Union

if TYPE_CHECKING:
    from pushdown.state import State


class TransitionError(TypeError):
    """A state returned something that is not a transition."""


@dataclass(frozen=True, slots=True)
class NoTransition:
    """Keep the current stack."""


@dataclass(frozen=True, slots=True)
class Pop:
    """Remove the top state and resume the one beneath it."""


@dataclass(frozen=True, slots=True)
class Push:
    """Pause the top state and start *state* above it."""
    state: State


@dataclass(frozen=True, slots=True)
class Switch:
    """Stop the top state and start *state* in its place."""
    state: State


@dataclass(frozen=True, slots=True)
class Quit:
    """Stop every state, top first, and halt the machine."""


# Union of every transition type.
Transition = Union[NoTransition, Pop, Push, Switch, Quit]

_KINDS = (NoTransition, Pop, Push, Switch, Quit)


def coerce(value: Any, source: str = "?") -> Transition:
    """Normalise a state's return value.

    ``None`` means the state had nothing to say and becomes
    ``NoTransition()``.  Anything that is not a transition, or a Push or
    Switch that does not carry a ``State``, raises ``TransitionError``.
    """
    if value is None:
        return NoTransition()
    if isinstance(value, (Push, Switch)):
        from pushdown.state import State
        if not isinstance(value.state, State):
            raise TransitionError(
                f"{source} returned {type(value).__name__} carrying "
                f"{value.state!r}, expected a State")
        return value
    if isinstance(value, _KINDS):
        return value
    raise TransitionError(
        f"{source} returned {value!r}, expected one of "
        f"{', '.join(k.__name__ for k in _KINDS)}")


def describe(trans: Transition) -> str:
    """Short human label, e.g. ``"Push(PauseMenu)"``."""
    target = getattr(trans, "state", None)
    if target is None:
        return type(trans).__name__
    label = getattr(target, "name", type(target).__name__)
    return f"{type(trans).__name__}({label})"
