"""Keyboard to engine input mapping"""
from typing import Optional
import pygame
from tetris_session import InputEvent

KEYMAP = {
    pygame.K_LEFT: InputEvent.MOVE_LEFT,
    pygame.K_RIGHT: InputEvent.MOVE_RIGHT,
    pygame.K_UP: InputEvent.ROTATE,
    pygame.K_DOWN: InputEvent.SOFT_DROP,
    pygame.K_SPACE: InputEvent.SOFT_DROP,
    pygame.K_q: InputEvent.QUIT,
    pygame.K_ESCAPE: InputEvent.QUIT,
}


def event_for(e) -> Optional[InputEvent]:
    if e.type == pygame.QUIT:
        return InputEvent.QUIT
    if e.type == pygame.KEYDOWN:
        return KEYMAP.get(e.key)
    return None


def poll() -> Optional[InputEvent]:
    """Drain pending events without blocking and return the first mapped one.

    A close request wins over any key press in the same batch.
    """
    found = None
    for e in pygame.event.get():
        ev = event_for(e)
        if ev is InputEvent.QUIT:
            return ev
        if found is None:
            found = ev
    return found
