"""pushdown.machine — Pushdown state machine.

Owns an ordered stack of ``State`` objects.  Only the top one is active:
it alone receives ``render`` / ``update`` / ``handle_event``.  Whatever
transition it returns is applied before the call returns.

    machine = StateMachine(TitleScreen())
    machine.start()
    while machine.is_running():
        for event in poll():
            machine.handle_event(event)
        machine.update()
        machine.render(surface)

Hook order per transition:

    Pop          top.on_stop -> new top.on_resume (skipped if none left)
    Push(s)      top.on_pause -> s.on_start
    Switch(s)    top.on_stop -> s.on_start   (state below untouched)
    Quit         on_stop for every state, top to bottom

The running flag is derived from the stack: the machine runs when it has
been started and still holds at least one state.  Emptying the stack
stops it in the same step, and a stopped machine cannot be restarted.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Any

from pushdown.transition import (
    NoTransition, Pop, Push, Switch, Quit, coerce, describe,
)

if TYPE_CHECKING:
    from pushdown.journal import Journal
    from pushdown.state import State
    from pushdown.transition import Transition


class StateMachine:
    __slots__ = ("_states", "_started", "journal", "verbose")

    def __init__(self, state: State, journal: Journal | None = None,
                 verbose: bool = False):
        self._states: list[State] = [state]
        self._started = False
        self.journal = journal
        self.verbose = verbose

    # ── queries ─────────────────────────────────────────────────────

    @property
    def running(self) -> bool:
        return self._started and bool(self._states)

    def is_running(self) -> bool:
        return self.running

    @property
    def active(self) -> State | None:
        """The top state, or *None* once the stack has emptied."""
        return self._states[-1] if self._states else None

    @property
    def stack(self) -> tuple[State, ...]:
        """Snapshot of the stack, bottom first."""
        return tuple(self._states)

    def __len__(self) -> int:
        return len(self._states)

    def __repr__(self) -> str:
        names = ", ".join(_label(s) for s in self._states)
        return f"StateMachine(running={self.running}, stack=[{names}])"

    # ── host operations ─────────────────────────────────────────────

    def start(self) -> None:
        """Start the initial state.  Does nothing if already started."""
        if self._started:
            return
        self._fire(self._states[-1], "on_start")
        self._started = True

    def stop(self) -> None:
        """Unwind every state, as if the top state had returned ``Quit``."""
        self.apply(Quit())

    def render(self, surface: Any) -> None:
        if self.running:
            self._states[-1].render(surface)

    def update(self) -> None:
        if not self.running:
            return
        state = self.active
        if state is None:
            trans = NoTransition()
        else:
            trans = coerce(state.update(), f"{_label(state)}.update()")
        self.apply(trans)

    def handle_event(self, event: Any) -> None:
        if not self.running:
            return
        state = self.active
        if state is None:
            trans = NoTransition()
        else:
            trans = coerce(state.handle_event(event),
                           f"{_label(state)}.handle_event()")
        self.apply(trans)

    # ── transition algebra ──────────────────────────────────────────

    def apply(self, trans: Transition) -> None:
        """Apply one transition to the stack.  No-op unless running."""
        if not self.running:
            return
        trans = coerce(trans, "apply()")
        if isinstance(trans, NoTransition):
            return

        self._log("transition", self._states[-1], describe(trans))
        if isinstance(trans, Pop):
            self._pop()
        elif isinstance(trans, Push):
            self._push(trans.state)
        elif isinstance(trans, Switch):
            self._switch(trans.state)
        elif isinstance(trans, Quit):
            self._quit()

    def _pop(self) -> None:
        state = self._states.pop()
        self._fire(state, "on_stop")
        if self._states:
            self._fire(self._states[-1], "on_resume")

    def _push(self, state: State) -> None:
        self._fire(self._states[-1], "on_pause")
        self._states.append(state)
        self._fire(state, "on_start")

    def _switch(self, state: State) -> None:
        old = self._states.pop()
        self._fire(old, "on_stop")
        self._states.append(state)
        self._fire(state, "on_start")

    def _quit(self) -> None:
        while self._states:
            self._fire(self._states.pop(), "on_stop")

    # ── hooks & logging ─────────────────────────────────────────────

    def _fire(self, state: State, hook: str) -> None:
        self._log(hook, state)
        getattr(state, hook)()

    def _log(self, kind: str, state: State, msg: str = "") -> None:
        if self.journal is not None:
            self.journal.record(kind, _label(state), msg)
        if self.verbose:
            if kind == "transition":
                print(f"[STATE] {_label(state)} -> {msg} (depth {len(self._states)})")
            else:
                print(f"[STATE] {kind} {_label(state)}")


def _label(state) -> str:
    return getattr(state, "name", type(state).__name__)
