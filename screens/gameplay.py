"""screens/gameplay.py — A tiny playfield: move the @ around.

Arrow keys / WASD move, Escape or P pushes the pause menu, Q pops back
to the main menu.  ``paused`` tracks the pause/resume hooks so the run
clock only advances while this state is on top.
"""

from __future__ import annotations

import pygame

from pushdown import State, NoTransition, Pop, Push, Transition
from pushdown.app import draw_text
from pushdown.events import Key
from screens.pause import PauseMenu

_MOVES = {
    pygame.K_UP: (0, -1), pygame.K_w: (0, -1),
    pygame.K_DOWN: (0, 1), pygame.K_s: (0, 1),
    pygame.K_LEFT: (-1, 0), pygame.K_a: (-1, 0),
    pygame.K_RIGHT: (1, 0), pygame.K_d: (1, 0),
}

CELL = 16
GRID_W, GRID_H = 30, 18


class Gameplay(State):
    def __init__(self):
        self.x = GRID_W // 2
        self.y = GRID_H // 2
        self.ticks = 0
        self.paused = False
        self.pauses = 0

    def on_pause(self):
        self.paused = True
        self.pauses += 1

    def on_resume(self):
        self.paused = False

    def handle_event(self, event: Key) -> Transition:
        if event.is_(pygame.K_ESCAPE, pygame.K_p):
            return Push(PauseMenu())
        if event.is_(pygame.K_q):
            return Pop()
        if event.key in _MOVES:
            dx, dy = _MOVES[event.key]
            self.x = max(0, min(GRID_W - 1, self.x + dx))
            self.y = max(0, min(GRID_H - 1, self.y + dy))
        return NoTransition()

    def update(self) -> Transition:
        self.ticks += 1
        return NoTransition()

    def render(self, surface: pygame.Surface):
        surface.fill((20, 24, 16))
        ox, oy = 40, 40
        pygame.draw.rect(surface, (60, 70, 50),
                         (ox - 1, oy - 1, GRID_W * CELL + 2, GRID_H * CELL + 2), 1)
        draw_text(surface, "@", ox + self.x * CELL + 3, oy + self.y * CELL,
                  (255, 255, 100))
        draw_text(surface, f"tick {self.ticks}   Esc = pause   Q = menu",
                  ox, 12, (140, 160, 130), 11)
