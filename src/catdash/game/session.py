"""
Game session: the per-frame loop, score and speed progression,
and the IDLE -> PLAYING -> OVER lifecycle.
"""

import logging
import math
import random
from typing import Optional, Union

from catdash.audio.cues import AudioCues, ToneOutput
from catdash.core.events import (
    Event,
    EventBus,
    EventType,
    game_over_event,
    phase_event,
    score_event,
)
from catdash.core.state import GamePhase, PhaseMachine
from catdash.game.backdrop import Backdrop
from catdash.game.collision import check_collision
from catdash.game.input import InputProvider, InputState
from catdash.game.obstacles import Obstacle, ObstacleField
from catdash.game.player import Player
from catdash.settings import Settings, get_settings

logger = logging.getLogger(__name__)

FRAME_MS = 1000.0 / 60.0    # baseline frame the per-tick constants are tuned for
MAX_ELAPSED_MS = 100.0      # longer stalls are simulated as 100ms


def format_score(score: float) -> str:
    """Floored score as a five digit, zero padded numeral."""
    return f"{int(math.floor(score)):05d}"


def dt_factor(elapsed_ms: float) -> float:
    """Elapsed frame time relative to a 60 FPS frame."""
    elapsed_ms = max(0.0, min(MAX_ELAPSED_MS, elapsed_ms))
    return elapsed_ms / FRAME_MS


class Session:
    """
    Owns the player, obstacle field and backdrop for one game.

    The host calls :meth:`tick` once per frame with the elapsed
    milliseconds. Ticks are inert unless the phase is PLAYING; only
    :meth:`start` re-arms the loop after a game over.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        audio: Union[AudioCues, ToneOutput, None] = None,
        event_bus: Optional[EventBus] = None,
        rng: Optional[random.Random] = None,
        input_provider: Optional[InputProvider] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.rng = rng or random.Random(self.settings.seed)
        self.event_bus = event_bus or EventBus()
        self.audio = audio if isinstance(audio, AudioCues) else AudioCues(audio)
        self.input_provider = input_provider

        display = self.settings.display
        self.width = display.width
        self.height = display.height
        self.ground_y = display.ground_y

        self.machine = PhaseMachine()
        self.machine.add_listener(self._on_phase_change)

        self.player = Player(self.settings.physics, self.ground_y, on_jump=self._on_jump)
        self.obstacles = ObstacleField(
            self.settings.spawn, self.width, self.ground_y, rng=self.rng
        )
        self.backdrop = Backdrop(
            self.settings.backdrop, self.width, self.height, self.ground_y, rng=self.rng
        )

        self.score = 0.0
        self.speed = self.settings.speed.initial
        self.final_score: Optional[int] = None
        self.last_elapsed_ms = 0.0
        self.frame_requested = False

    # Properties
    @property
    def phase(self) -> GamePhase:
        return self.machine.phase

    @property
    def is_playing(self) -> bool:
        return self.machine.phase == GamePhase.PLAYING

    @property
    def display_score(self) -> int:
        return int(math.floor(self.score))

    @property
    def score_text(self) -> str:
        return format_score(self.score)

    # Lifecycle
    def start(self) -> bool:
        """Reset everything and begin playing. Also used for restart."""
        if self.is_playing:
            return False

        self.score = 0.0
        self.speed = self.settings.speed.initial
        self.final_score = None
        self.last_elapsed_ms = 0.0
        self.obstacles.clear()
        self.backdrop.clear()
        self.player.reset()
        self.audio.resume()

        self.machine.transition(GamePhase.PLAYING)
        self.frame_requested = True
        logger.info(f"Session started at speed {self.speed:.1f}")
        self.event_bus.emit(score_event(0, self.score_text))
        return True

    def restart(self) -> bool:
        return self.start()

    def game_over(self) -> None:
        """Terminal transition after a collision."""
        if not self.is_playing:
            return

        self.frame_requested = False
        self.final_score = self.display_score
        self.machine.transition(GamePhase.OVER)
        self.audio.die()
        logger.info(f"Game over: score {self.final_score}, speed {self.speed:.2f}")
        self.event_bus.emit(game_over_event(self.final_score))

    def handle_input(self, inp: InputState) -> bool:
        """Act on the START intent while not playing."""
        if inp.start and not self.is_playing:
            return self.start()
        return False

    # Frame
    def tick(self, elapsed_ms: float, inp: Optional[InputState] = None) -> bool:
        """
        Advance one frame.

        Returns:
            True if state changed and the frame should be drawn
        """
        if not self.is_playing:
            return False

        if inp is None:
            inp = self.input_provider.sample() if self.input_provider else InputState.empty()

        self.last_elapsed_ms = elapsed_ms
        dt = dt_factor(elapsed_ms)

        self.backdrop.update(dt, self.speed)
        self.player.update(inp, dt)

        if self.obstacles.update(dt, self.speed, hit_test=self._hits_player):
            self.game_over()
            return True

        self._advance_score(dt)
        self.speed = min(
            self.settings.speed.maximum,
            self.speed + self.settings.speed.increment * dt,
        )

        self.event_bus.emit(score_event(self.display_score, self.score_text))
        self.frame_requested = True
        return True

    def _advance_score(self, dt: float) -> None:
        milestone = self.settings.speed.milestone
        previous = self.display_score
        self.score += self.settings.speed.score_rate * dt
        current = self.display_score

        for _ in range(current // milestone - previous // milestone):
            self.audio.score()
            self.event_bus.emit(Event(
                EventType.MILESTONE,
                data={"score": current},
                source="session",
            ))
            logger.debug(f"Milestone reached: {current}")

    def _hits_player(self, obstacle: Obstacle) -> bool:
        return check_collision(self.player, obstacle, self.settings.hitbox)

    def _on_jump(self) -> None:
        self.audio.jump()
        self.event_bus.emit(Event(EventType.JUMP, source="player"))

    def _on_phase_change(self, old: GamePhase, new: GamePhase) -> None:
        self.event_bus.emit(phase_event(old, new))
