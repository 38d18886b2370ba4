"""The cat: vertical physics against a hard ground line."""

import logging
from typing import Callable, Optional

from catdash.game.input import InputState
from catdash.settings import PhysicsSettings

logger = logging.getLogger(__name__)


class Player:
    """
    Player body with a fixed x and integrated vertical motion.

    All per-tick constants are scaled by ``dt_factor`` (elapsed time
    relative to a 60 FPS frame). The ground is a floor, not a trigger:
    after every update ``y <= ground_y - height``.
    """

    def __init__(
        self,
        physics: PhysicsSettings,
        ground_y: float,
        on_jump: Optional[Callable[[], None]] = None,
    ) -> None:
        self.jump_force = physics.jump_force
        self.weight = physics.weight
        self.fast_fall = physics.fast_fall

        self.x = physics.player_x
        self.width = physics.player_size
        self.height = physics.player_size
        self.ground_y = ground_y

        self.on_jump = on_jump

        self.y = self.floor_y
        self.vy = 0.0
        self.jumps = 0

    @property
    def floor_y(self) -> float:
        """Top edge of the player when standing on the ground."""
        return self.ground_y - self.height

    @property
    def grounded(self) -> bool:
        return self.y >= self.floor_y

    @property
    def rect(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)

    def reset(self) -> None:
        """Snap to the ground with no velocity."""
        self.y = self.floor_y
        self.vy = 0.0
        self.jumps = 0

    def update(self, inp: InputState, dt_factor: float) -> None:
        # A zero-length frame cannot move the body, so it must not consume a jump
        if dt_factor <= 0:
            return

        # Instantaneous impulse, only from the ground
        if inp.jump and self.grounded:
            self.vy = -self.jump_force
            self.jumps += 1
            logger.debug(f"Jump #{self.jumps}")
            if self.on_jump:
                self.on_jump()

        self.y += self.vy * dt_factor

        if not self.grounded:
            self.vy += self.weight * dt_factor
        else:
            self.vy = 0.0
            self.y = self.floor_y

        if inp.fast_fall and not self.grounded:
            self.vy += self.fast_fall * dt_factor
