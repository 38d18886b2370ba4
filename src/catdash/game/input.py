"""Control intents polled once per frame."""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol


class Intent(Enum):
    """Logical controls, independent of the device that produced them."""
    JUMP = auto()
    FAST_FALL = auto()
    START = auto()


@dataclass(frozen=True)
class InputState:
    """Snapshot of the intents active for one frame."""

    active: frozenset[Intent] = field(default_factory=frozenset)

    @classmethod
    def of(cls, *intents: Intent) -> "InputState":
        return cls(frozenset(intents))

    @classmethod
    def empty(cls) -> "InputState":
        return cls()

    def is_active(self, intent: Intent) -> bool:
        return intent in self.active

    @property
    def jump(self) -> bool:
        return Intent.JUMP in self.active

    @property
    def fast_fall(self) -> bool:
        return Intent.FAST_FALL in self.active

    @property
    def start(self) -> bool:
        return Intent.START in self.active


class InputProvider(Protocol):
    """Anything that can hand out a per-frame InputState.

    JUMP and FAST_FALL report held state; START is reported once per press.
    """

    def sample(self) -> InputState:
        ...
