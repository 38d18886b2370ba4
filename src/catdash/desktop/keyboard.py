"""
Keyboard and touch input for the desktop window.

pygame events update held-key state; the session polls a snapshot
once per frame through :meth:`KeyboardInput.sample`.

Mapping:
    SPACE / UP: Jump (held)
    DOWN: Fast fall (held)
    RETURN: Start / restart (one-shot)
    Touch or mouse button: Jump (held)
"""

import logging

import pygame

from catdash.game.input import InputState, Intent

logger = logging.getLogger(__name__)

KEY_INTENTS: dict[int, Intent] = {
    pygame.K_SPACE: Intent.JUMP,
    pygame.K_UP: Intent.JUMP,
    pygame.K_DOWN: Intent.FAST_FALL,
}

START_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER)

POINTER_DOWN = (pygame.MOUSEBUTTONDOWN, pygame.FINGERDOWN)
POINTER_UP = (pygame.MOUSEBUTTONUP, pygame.FINGERUP)


class KeyboardInput:
    """Tracks held controls and a pending start request."""

    def __init__(self) -> None:
        self._held_keys: set[int] = set()
        self._pointer_down = False
        self._start_pending = False

    def press(self, key: int) -> None:
        if key in START_KEYS:
            self._start_pending = True
        elif key in KEY_INTENTS:
            self._held_keys.add(key)

    def release(self, key: int) -> None:
        self._held_keys.discard(key)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Feed a pygame event. Returns True if it was an input event."""
        if event.type == pygame.KEYDOWN:
            self.press(event.key)
            return True
        if event.type == pygame.KEYUP:
            self.release(event.key)
            return True
        if event.type in POINTER_DOWN:
            self._pointer_down = True
            return True
        if event.type in POINTER_UP:
            self._pointer_down = False
            return True
        return False

    def clear(self) -> None:
        """Forget held keys, e.g. when the window loses focus."""
        self._held_keys.clear()
        self._pointer_down = False
        self._start_pending = False

    def sample(self) -> InputState:
        intents = {KEY_INTENTS[key] for key in self._held_keys}
        if self._pointer_down:
            intents.add(Intent.JUMP)
        if self._start_pending:
            intents.add(Intent.START)
            self._start_pending = False
        return InputState(frozenset(intents))
