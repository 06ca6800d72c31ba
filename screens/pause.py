"""screens/pause.py — Pause overlay pushed over gameplay."""

from __future__ import annotations

from pushdown import Pop, Quit, Transition
from screens.menu_base import MenuState


class PauseMenu(MenuState):
    title = "PAUSED"
    entries = [
        ("Resume", "Back to the run"),
        ("Quit", "Leave the application"),
    ]
    footer = "Up/Down = navigate   Enter/Space = select   Esc = resume"

    def choose(self, index: int) -> Transition:
        if index == 0:
            return Pop()
        return Quit()

    def back(self) -> Transition:
        return Pop()
