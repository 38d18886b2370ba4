"""Desktop host: pygame window and keyboard input."""

from .keyboard import KeyboardInput
from .window import GameWindow

__all__ = ["GameWindow", "KeyboardInput"]
