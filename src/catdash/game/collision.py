"""Hitbox overlap tests between the player and obstacles."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from catdash.settings import HitboxSettings

if TYPE_CHECKING:
    from catdash.game.obstacles import Obstacle
    from catdash.game.player import Player


@dataclass(frozen=True)
class Box:
    """Axis-aligned rectangle, top-left origin."""

    x: float
    y: float
    w: float
    h: float

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def shrink(self, left: float, top: float, right: float, bottom: float) -> "Box":
        """Inset each edge by the given margin."""
        return Box(
            self.x + left,
            self.y + top,
            self.w - left - right,
            self.h - top - bottom,
        )


def overlaps(a: Box, b: Box) -> bool:
    """Strict AABB overlap; touching edges do not count."""
    return (
        a.x < b.right
        and a.right > b.x
        and a.y < b.bottom
        and a.bottom > b.y
    )


def player_hitbox(player: "Player", hitbox: HitboxSettings) -> Box:
    return Box(*player.rect).shrink(
        hitbox.player_left, hitbox.player_top, hitbox.player_right, hitbox.player_bottom
    )


def obstacle_hitbox(obstacle: "Obstacle", hitbox: HitboxSettings) -> Box:
    inset = hitbox.obstacle_inset
    return Box(*obstacle.rect).shrink(inset, inset, inset, inset)


def check_collision(player: "Player", obstacle: "Obstacle", hitbox: HitboxSettings) -> bool:
    """True when the shrunken player and obstacle boxes overlap."""
    return overlaps(player_hitbox(player, hitbox), obstacle_hitbox(obstacle, hitbox))
