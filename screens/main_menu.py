"""screens/main_menu.py — Main menu: start a run or quit."""

from __future__ import annotations

from pushdown import Push, Quit, Transition
from screens.gameplay import Gameplay
from screens.menu_base import MenuState


class MainMenu(MenuState):
    title = "MAIN MENU"
    entries = [
        ("Play", "Start a new run"),
        ("Quit", "Close the application"),
    ]
    footer = "Up/Down = navigate   Enter/Space = select   Esc = quit"

    def choose(self, index: int) -> Transition:
        if index == 0:
            return Push(Gameplay())
        return Quit()

    def back(self) -> Transition:
        return Quit()
