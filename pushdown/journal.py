"""pushdown.journal — Ring-buffer record of machine activity.

The machine writes one entry per applied transition and one per
lifecycle hook it fires.  Hosts and tests read it back to see what the
stack did and in what order.

Usage:
    journal = Journal(max_entries=200)
    machine = StateMachine(TitleScreen(), journal=journal)
    ...
    journal.recent(10)
    journal.for_kind("on_stop")

Each entry is a dict:
    {"seq": int, "kind": str, "state": str, "msg": str}

``kind`` is either a hook name (``"on_start"``, ``"on_pause"`` …) or
``"transition"``.
"""

from __future__ import annotations
from dataclasses import dataclass, field


@dataclass
class Journal:
    """Ring-buffer of transitions and lifecycle hooks."""

    entries: list[dict] = field(default_factory=list)
    max_entries: int = 500
    _seq: int = 0
    _paused: bool = False

    # If non-empty, only entries whose ``kind`` is in the set are kept.
    kind_filter: set[str] = field(default_factory=set)

    def record(self, kind: str, state: str, msg: str = "") -> None:
        if self._paused:
            return
        if self.kind_filter and kind not in self.kind_filter:
            return
        self._seq += 1
        self.entries.append({
            "seq": self._seq,
            "kind": kind,
            "state": state,
            "msg": msg,
        })
        if len(self.entries) > self.max_entries:
            self.entries = self.entries[-self.max_entries:]

    def clear(self):
        self.entries.clear()

    def pause(self):
        self._paused = True

    def resume(self):
        self._paused = False

    def recent(self, n: int = 50) -> list[dict]:
        """Return the *n* most recent entries (newest last)."""
        return self.entries[-n:]

    def for_kind(self, kind: str, n: int = 50) -> list[dict]:
        """Return last *n* entries of one kind."""
        return [e for e in self.entries if e["kind"] == kind][-n:]

    def for_state(self, name: str, n: int = 50) -> list[dict]:
        """Return last *n* entries about a specific state."""
        return [e for e in self.entries if e["state"] == name][-n:]

    def hooks(self) -> list[tuple[str, str]]:
        """``(hook, state)`` pairs in firing order, transitions omitted."""
        return [(e["kind"], e["state"]) for e in self.entries
                if e["kind"] != "transition"]

    def __len__(self) -> int:
        return len(self.entries)
