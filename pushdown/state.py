"""
pushdown/state.py — State interface

Every screen or mode of the application is a State. The machine holds a
stack of them. Only the top state gets render/update/event calls; states
below stay frozen until they are resumed.

To make a new state:

    class MyState(State):
        def on_start(self):
            # setup, called once when pushed or switched in
            pass

        def handle_event(self, event):
            # one input event; return a transition
            return NoTransition()

        def update(self):
            # one tick; return a transition
            return NoTransition()

        def render(self, surface):
            # draw to the surface, never touch the stack
            pass

A state never mutates the machine directly. It returns a transition and
the machine applies it.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Any

from pushdown.transition import NoTransition

if TYPE_CHECKING:
    from pushdown.transition import Transition


class State:
    # -- Lifecycle --

    def on_start(self) -> None:
        """Called when this state is pushed or switched onto the stack."""
        pass

    def on_stop(self) -> None:
        """Called after this state has been removed from the stack."""
        pass

    def on_pause(self) -> None:
        """Called when another state is pushed on top of this one."""
        pass

    def on_resume(self) -> None:
        """Called when the state above this one is popped."""
        pass

    # -- Per-frame --

    def handle_event(self, event: Any) -> Transition | None:
        """Process a single input event."""
        return NoTransition()

    def update(self) -> Transition | None:
        """Advance one tick."""
        return NoTransition()

    def render(self, surface: Any) -> None:
        """Draw to the surface."""
        pass

    @property
    def name(self) -> str:
        """Label used by the journal and log lines."""
        return type(self).__name__
