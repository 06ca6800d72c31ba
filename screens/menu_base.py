"""screens/menu_base.py — Vertical menu shared by the demo screens.

Subclasses list their entries as ``(label, description)`` pairs and
implement ``choose(index)`` returning the transition for that entry.
Up/Down (or W/S) move the cursor, Enter/Space choose, number keys choose
directly, Escape calls ``back()``.
"""

from __future__ import annotations

import pygame

from pushdown import State, NoTransition, Transition
from pushdown.app import draw_text
from pushdown.events import Key


class MenuState(State):
    title = "MENU"
    entries: list[tuple[str, str]] = []
    footer = "Up/Down = navigate   Enter/Space = select   Esc = back"

    def __init__(self):
        self.selected = 0

    def choose(self, index: int) -> Transition:
        return NoTransition()

    def back(self) -> Transition:
        return NoTransition()

    def handle_event(self, event: Key) -> Transition:
        total = len(self.entries)
        if event.is_(pygame.K_ESCAPE):
            return self.back()
        if event.is_(pygame.K_UP, pygame.K_w):
            self.selected = (self.selected - 1) % total
        elif event.is_(pygame.K_DOWN, pygame.K_s):
            self.selected = (self.selected + 1) % total
        elif event.is_(pygame.K_RETURN, pygame.K_SPACE):
            return self.choose(self.selected)
        elif pygame.K_1 <= event.key <= pygame.K_9:
            idx = event.key - pygame.K_1
            if idx < total:
                self.selected = idx
                return self.choose(idx)
        return NoTransition()

    def render(self, surface: pygame.Surface):
        surface.fill((16, 20, 24))
        sw, sh = surface.get_size()

        draw_text(surface, self.title, sw // 2 - 60, 30, (0, 255, 200), 18)

        y = 90
        for i, (name, desc) in enumerate(self.entries):
            is_sel = (i == self.selected)
            if is_sel:
                bg = pygame.Surface((400, 44), pygame.SRCALPHA)
                bg.fill((0, 80, 60, 100))
                surface.blit(bg, (sw // 2 - 200, y - 4))

            num_color = (0, 255, 200) if is_sel else (80, 140, 120)
            desc_color = (140, 180, 160) if is_sel else (90, 110, 100)

            marker = ">" if is_sel else " "
            draw_text(surface, f"{marker} [{i+1}] {name}", sw // 2 - 190, y,
                      num_color, 18)
            draw_text(surface, desc, sw // 2 - 140, y + 22, desc_color, 11)
            y += 52

        draw_text(surface, self.footer, sw // 2 - 200, sh - 30, (80, 100, 90), 11)
