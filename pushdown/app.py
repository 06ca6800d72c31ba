"""
pushdown/app.py — Pygame host shell

Opens the window, runs the frame loop, and drives a StateMachine.
You don't edit this file to build your application.
You write States and return transitions from them.

    machine = StateMachine(TitleScreen())
    App(machine).run()

Each frame: key presses -> machine.handle_event, then machine.update,
then machine.render onto a fixed-size surface that is scaled to the
window.  The loop ends when the machine stops running, either because
its last state popped/quit or because the window was closed.
"""

from __future__ import annotations
from typing import Iterable

import pygame

from pushdown.config import Settings
from pushdown.events import translate
from pushdown.machine import StateMachine


class App:
    def __init__(self, machine: StateMachine, settings: Settings | None = None):
        settings = settings or Settings.from_config()
        pygame.init()
        self.settings = settings
        self._windowed_size = (settings.width, settings.height)
        # The virtual (design) resolution; states always draw at this size.
        self._virtual_size = (settings.width, settings.height)
        self._render_surface = pygame.Surface(self._virtual_size)
        self.screen = pygame.display.set_mode(self._windowed_size, pygame.RESIZABLE)
        pygame.display.set_caption(settings.title)
        self.clock = pygame.time.Clock()
        self.fullscreen = False
        self.fps = settings.fps
        self.frames = 0

        self.machine = machine

    # -- Main loop --

    def run(self):
        self.machine.start()
        if self.settings.verbose:
            print(f"[APP] running {self.machine!r}")
        while self.machine.is_running():
            self.clock.tick(self.fps)
            self.step(pygame.event.get())
        if self.settings.verbose:
            print(f"[APP] machine stopped after {self.frames} frames")
        pygame.quit()
        _fonts.clear()

    def step(self, events: Iterable[pygame.event.Event]):
        """Run one frame against an explicit list of pygame events."""
        self.frames += 1

        # Events
        for event in events:
            if event.type == pygame.QUIT:
                self.machine.stop()
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_F11:
                self.toggle_fullscreen()
            elif event.type == pygame.VIDEORESIZE and not self.fullscreen:
                self._windowed_size = (event.w, event.h)
                self.screen = pygame.display.set_mode(
                    (event.w, event.h), pygame.RESIZABLE)
            else:
                key = translate(event)
                if key is not None:
                    self.machine.handle_event(key)

        # Update
        self.machine.update()

        # Draw to the fixed-size virtual surface, then scale to screen
        if self.machine.is_running():
            self._render_surface.fill((0, 0, 0))
            self.machine.render(self._render_surface)
            pygame.transform.scale(self._render_surface,
                                   self.screen.get_size(), self.screen)
            pygame.display.flip()

    def toggle_fullscreen(self):
        """Switch between windowed and fullscreen (F11)."""
        self.fullscreen = not self.fullscreen
        if self.fullscreen:
            self.screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            self.screen = pygame.display.set_mode(
                self._windowed_size, pygame.RESIZABLE)


# -- Convenience --

_fonts: dict[int, pygame.font.Font] = {}


def font(size: int = 14) -> pygame.font.Font:
    """Monospace font of *size*, created once and cached."""
    if size not in _fonts:
        if not pygame.font.get_init():
            pygame.font.init()
        _fonts[size] = pygame.font.SysFont("monospace", size)
    return _fonts[size]


def draw_text(surface: pygame.Surface, text: str, x: int, y: int,
              color=(255, 255, 255), size: int = 14) -> pygame.Rect:
    """Quick text draw. Returns the rect for layout chaining."""
    img = font(size).render(text, True, color)
    return surface.blit(img, (x, y))
