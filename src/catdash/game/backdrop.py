"""Decorative clouds and trees. Never collide, never touch the score."""

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from catdash.settings import BackdropSettings

logger = logging.getLogger(__name__)


class AmbientKind(Enum):
    CLOUD = "cloud"
    PINE = "pine"
    OAK = "oak"


@dataclass
class AmbientEntity:
    """Scenery element drifting left."""

    x: float
    y: float
    size: float
    kind: AmbientKind
    speed: float = 0.0  # own speed; trees follow the session speed instead


class Backdrop:
    """Spawns, scrolls and retires ambient scenery."""

    def __init__(
        self,
        settings: BackdropSettings,
        width: float,
        height: float,
        ground_y: float,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.settings = settings
        self.width = width
        self.height = height
        self.ground_y = ground_y
        self.rng = rng or random.Random()

        self.clouds: List[AmbientEntity] = []
        self.trees: List[AmbientEntity] = []

    @property
    def entities(self) -> List[AmbientEntity]:
        return self.clouds + self.trees

    def clear(self) -> None:
        self.clouds = []
        self.trees = []

    def update(self, dt_factor: float, speed: float) -> None:
        s = self.settings

        # Per-tick chance, scaled so long frames spawn as often as short ones
        if self.rng.random() < min(1.0, s.cloud_chance * dt_factor):
            self.clouds.append(AmbientEntity(
                x=float(self.width),
                y=self.rng.random() * (self.height / 3),
                size=s.cloud_min_size + self.rng.random() * s.cloud_size_spread,
                kind=AmbientKind.CLOUD,
                speed=s.cloud_speed,
            ))

        if self.rng.random() < min(1.0, s.tree_chance * dt_factor):
            self.trees.append(AmbientEntity(
                x=float(self.width),
                y=self.ground_y - s.tree_ground_inset,
                size=s.tree_min_size + self.rng.random() * s.tree_size_spread,
                kind=AmbientKind.PINE if self.rng.random() < 0.5 else AmbientKind.OAK,
            ))

        for cloud in self.clouds:
            cloud.x -= cloud.speed * dt_factor
        for tree in self.trees:
            tree.x -= speed * dt_factor

        self.clouds = [c for c in self.clouds if c.x > s.retire_x]
        self.trees = [t for t in self.trees if t.x > s.retire_x]
