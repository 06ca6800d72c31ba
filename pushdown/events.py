"""pushdown/events.py — Input events handed to states.

The machine never looks inside an event.  The pygame shell only forwards
key presses, wrapped in a small frozen ``Key`` so states can compare
against ``pygame.K_*`` constants without holding on to pygame's event
objects.
"""

from __future__ import annotations
from dataclasses import dataclass

import pygame


@dataclass(frozen=True, slots=True)
class Key:
    """A single key press."""
    key: int
    mod: int = 0
    unicode: str = ""

    def is_(self, *keys: int) -> bool:
        """True if this press is any of *keys*."""
        return self.key in keys


def translate(event: pygame.event.Event) -> Key | None:
    """Turn a pygame event into a ``Key``, or *None* if it isn't a press."""
    if event.type != pygame.KEYDOWN:
        return None
    return Key(key=event.key,
               mod=getattr(event, "mod", 0),
               unicode=getattr(event, "unicode", ""))
