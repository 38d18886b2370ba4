"""Procedurally spawned ground obstacles."""

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Protocol

from catdash.settings import SpawnSettings

logger = logging.getLogger(__name__)


class ObstacleKind(Enum):
    """Visual variants. Both collide identically."""
    DOG = "dog"
    POODLE = "poodle"


@dataclass
class Obstacle:
    """A single obstacle scrolling left along the ground."""

    x: float
    y: float
    width: float
    height: float
    kind: ObstacleKind = ObstacleKind.DOG
    retired: bool = False
    spawn_x: float = field(default=0.0, init=False)

    def __post_init__(self) -> None:
        self.spawn_x = self.x

    @property
    def rect(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)

    @property
    def travelled(self) -> float:
        """Horizontal distance covered since spawning."""
        return self.spawn_x - self.x

    def advance(self, dx: float) -> None:
        self.x -= dx
        if self.x < -self.width:
            self.retired = True


class SpawnPolicy(Protocol):
    """Decides when the field creates its next obstacle."""

    def should_spawn(self, obstacle_field: "ObstacleField") -> bool:
        ...

    def on_spawn(self, obstacle_field: "ObstacleField") -> None:
        ...

    def reset(self) -> None:
        ...


class GapSpawnPolicy:
    """
    Spawn once the field has scrolled a sampled gap since the last spawn.

    The gap is drawn uniformly from ``[min_gap, max_gap]``, both of which
    grow with speed. After each spawn there is a small chance that the
    next gap is forced short, producing a back-to-back pair.
    """

    def __init__(self, spawn: SpawnSettings, rng: random.Random) -> None:
        self.spawn = spawn
        self.rng = rng
        self.target_gap: Optional[float] = None
        self.double_pending = False

    def gap_bounds(self, speed: float) -> tuple[float, float]:
        s = self.spawn
        return (
            s.min_gap_base + speed * s.min_gap_per_speed,
            s.max_gap_base + speed * s.max_gap_per_speed,
        )

    def sample_gap(self, speed: float) -> float:
        low, high = self.gap_bounds(speed)
        return self.rng.uniform(low, high)

    def should_spawn(self, obstacle_field: "ObstacleField") -> bool:
        if obstacle_field.spawned == 0:
            return True
        if self.target_gap is None:
            self.target_gap = self.sample_gap(obstacle_field.speed)
        # Distance is tracked by the field, the last obstacle may already be gone
        return obstacle_field.distance_since_spawn >= self.target_gap

    def on_spawn(self, obstacle_field: "ObstacleField") -> None:
        if self.rng.random() < self.spawn.double_chance:
            self.target_gap = self.spawn.double_gap
            self.double_pending = True
            logger.debug("Double obstacle queued")
        else:
            self.target_gap = self.sample_gap(obstacle_field.speed)
            self.double_pending = False

    def reset(self) -> None:
        self.target_gap = None
        self.double_pending = False


class DistanceSpawnPolicy:
    """
    Spawn once the newest obstacle is a random margin left of the edge.

    The margin is re-rolled on every check, so spacing is loose and
    independent of speed.
    """

    def __init__(self, spawn: SpawnSettings, rng: random.Random) -> None:
        self.spawn = spawn
        self.rng = rng

    def should_spawn(self, obstacle_field: "ObstacleField") -> bool:
        newest = obstacle_field.newest
        if newest is None:
            return True
        margin = self.spawn.distance_base + self.rng.random() * self.spawn.distance_spread
        return newest.x < obstacle_field.width - margin

    def on_spawn(self, obstacle_field: "ObstacleField") -> None:
        pass

    def reset(self) -> None:
        pass


def make_spawn_policy(spawn: SpawnSettings, rng: random.Random) -> SpawnPolicy:
    if spawn.policy == "distance":
        return DistanceSpawnPolicy(spawn, rng)
    return GapSpawnPolicy(spawn, rng)


class ObstacleField:
    """
    Owns the active obstacles in spawn order.

    Each update advances every obstacle, tests it against the player,
    drops the retired ones once iteration is finished and finally asks
    the spawn policy whether a new obstacle enters at the right edge.
    """

    def __init__(
        self,
        spawn: SpawnSettings,
        width: float,
        ground_y: float,
        rng: Optional[random.Random] = None,
        policy: Optional[SpawnPolicy] = None,
    ) -> None:
        self.spawn = spawn
        self.width = width
        self.ground_y = ground_y
        self.rng = rng or random.Random()
        self.policy = policy or make_spawn_policy(spawn, self.rng)

        self.obstacles: List[Obstacle] = []
        self.speed = 0.0
        self.spawned = 0
        self.distance_since_spawn = 0.0

    def __len__(self) -> int:
        return len(self.obstacles)

    def __iter__(self):
        return iter(self.obstacles)

    @property
    def newest(self) -> Optional[Obstacle]:
        return self.obstacles[-1] if self.obstacles else None

    def clear(self) -> None:
        self.obstacles = []
        self.spawned = 0
        self.distance_since_spawn = 0.0
        self.policy.reset()

    def update(
        self,
        dt_factor: float,
        speed: float,
        hit_test: Optional[Callable[[Obstacle], bool]] = None,
    ) -> bool:
        """Advance, collide, compact and spawn. Returns True on any hit."""
        self.speed = speed
        dx = speed * dt_factor

        hit = False
        for obstacle in self.obstacles:
            obstacle.advance(dx)
            if hit_test is not None and not obstacle.retired and hit_test(obstacle):
                hit = True

        self.obstacles = [o for o in self.obstacles if not o.retired]
        self.distance_since_spawn += dx

        if self.policy.should_spawn(self):
            self._spawn()

        return hit

    def _spawn(self) -> Obstacle:
        size = self.spawn.obstacle_size
        kind = self.rng.choice((ObstacleKind.DOG, ObstacleKind.POODLE))
        obstacle = Obstacle(
            x=float(self.width),
            y=self.ground_y - size,
            width=size,
            height=size,
            kind=kind,
        )
        self.obstacles.append(obstacle)
        self.spawned += 1
        self.distance_since_spawn = 0.0
        self.policy.on_spawn(self)
        logger.debug(f"Spawned {kind.value} #{self.spawned} at speed {self.speed:.2f}")
        return obstacle
