"""
Lifecycle state machine for a game session.

Phases:
    IDLE: Before the first run, start overlay showing
    PLAYING: Frames are being simulated
    OVER: Collision ended the run, final score showing
"""

from enum import Enum, auto
from typing import Callable
import logging

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    """Session phases."""
    IDLE = auto()
    PLAYING = auto()
    OVER = auto()


PhaseListener = Callable[[GamePhase, GamePhase], None]


class PhaseMachine:
    """
    Tracks the session phase and guards its transitions.

    Only start, collision and restart move the phase; anything else
    is rejected and logged.
    """

    VALID_TRANSITIONS: list[tuple[GamePhase, GamePhase]] = [
        (GamePhase.IDLE, GamePhase.PLAYING),   # start
        (GamePhase.PLAYING, GamePhase.OVER),   # collision
        (GamePhase.OVER, GamePhase.PLAYING),   # restart
    ]

    def __init__(self, initial_phase: GamePhase = GamePhase.IDLE) -> None:
        self._phase = initial_phase
        self._listeners: list[PhaseListener] = []
        self._valid_transitions = set(self.VALID_TRANSITIONS)
        logger.debug(f"PhaseMachine initialized with phase: {initial_phase.name}")

    @property
    def phase(self) -> GamePhase:
        """Get current phase."""
        return self._phase

    def can_transition(self, to_phase: GamePhase) -> bool:
        """Check if transition to given phase is valid."""
        return (self._phase, to_phase) in self._valid_transitions

    def transition(self, to_phase: GamePhase) -> bool:
        """
        Attempt to move to a new phase.

        Returns:
            True if transition successful, False otherwise
        """
        if not self.can_transition(to_phase):
            logger.warning(
                f"Invalid transition: {self._phase.name} -> {to_phase.name}"
            )
            return False

        old_phase = self._phase
        self._phase = to_phase
        logger.info(f"Phase transition: {old_phase.name} -> {to_phase.name}")
        self._notify(old_phase, to_phase)
        return True

    def add_listener(self, callback: PhaseListener) -> None:
        """Add a phase change listener."""
        self._listeners.append(callback)

    def remove_listener(self, callback: PhaseListener) -> None:
        """Remove a phase change listener."""
        if callback in self._listeners:
            self._listeners.remove(callback)

    def reset(self) -> None:
        """Return to IDLE regardless of the current phase."""
        old_phase = self._phase
        self._phase = GamePhase.IDLE
        if old_phase != GamePhase.IDLE:
            self._notify(old_phase, GamePhase.IDLE)
        logger.info("PhaseMachine reset to IDLE")

    def _notify(self, old_phase: GamePhase, new_phase: GamePhase) -> None:
        for listener in self._listeners:
            try:
                listener(old_phase, new_phase)
            except Exception as e:
                logger.error(f"Error in phase listener: {e}")
