"""screens/title.py — Title screen.

Any key replaces it with the main menu.  The title is never paused
beneath the menu, so this is a Switch rather than a Push.
"""

from __future__ import annotations

import pygame

from pushdown import State, NoTransition, Switch, Transition
from pushdown.app import draw_text
from pushdown.events import Key
from screens.main_menu import MainMenu


class TitleScreen(State):
    BLINK_TICKS = 15

    def __init__(self):
        self.ticks = 0

    def on_start(self):
        self.ticks = 0

    def handle_event(self, event: Key) -> Transition:
        return Switch(MainMenu())

    def update(self) -> Transition:
        self.ticks += 1
        return NoTransition()

    def render(self, surface: pygame.Surface):
        surface.fill((8, 8, 12))
        sw, sh = surface.get_size()
        draw_text(surface, "P U S H D O W N", sw // 2 - 80, sh // 3, (0, 255, 200), 18)
        if (self.ticks // self.BLINK_TICKS) % 2 == 0:
            draw_text(surface, "press any key", sw // 2 - 50, sh // 2, (180, 180, 180))
