"""pushdown — Stack-based state machine for screen and mode flow.

States are pushed, popped, switched and unwound by the transitions they
return.  Only the top state is active.  The pygame shell lives in
``pushdown.app`` and is imported separately so the core runs without a
display.
"""

from pushdown.state import State
from pushdown.transition import (
    NoTransition, Pop, Push, Switch, Quit, Transition, TransitionError,
)
from pushdown.machine import StateMachine
from pushdown.journal import Journal

__all__ = [
    "State", "StateMachine", "Journal",
    "NoTransition", "Pop", "Push", "Switch", "Quit",
    "Transition", "TransitionError",
]
