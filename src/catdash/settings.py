"""
Game settings using Pydantic.

Settings are loaded from environment variables with .env file support.
Every per-tick constant is expressed against a 60 FPS baseline.
"""

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DisplaySettings(BaseModel):
    """Play field dimensions and frame pacing."""

    width: int = Field(default=960, gt=0)
    height: int = Field(default=540, gt=0)

    # Ground line sits this far above the bottom edge
    ground_offset: int = Field(default=100, ge=0)

    fps: int = Field(default=60, gt=0)
    scale: int = Field(default=1, ge=1)

    @property
    def ground_y(self) -> float:
        return float(self.height - self.ground_offset)


class PhysicsSettings(BaseModel):
    """Player physics tuning."""

    jump_force: float = Field(default=22.0, gt=0)
    weight: float = Field(default=0.8, gt=0)  # gravity per tick
    fast_fall: float = Field(default=2.0, ge=0)  # extra pull while DOWN is held

    player_x: float = 80.0
    player_size: float = Field(default=40.0, gt=0)


class SpeedSettings(BaseModel):
    """Speed and score progression."""

    initial: float = Field(default=6.0, gt=0)
    increment: float = Field(default=0.001, ge=0)
    maximum: float = Field(default=15.0, gt=0)

    score_rate: float = Field(default=0.15, gt=0)
    milestone: int = Field(default=100, gt=0)


class SpawnSettings(BaseModel):
    """Obstacle spawning.

    "gap" samples a travel distance between consecutive obstacles,
    "distance" spawns once the newest obstacle has cleared a random
    margin from the right edge.
    """

    policy: Literal["gap", "distance"] = "gap"

    min_gap_base: float = 600.0
    min_gap_per_speed: float = 10.0
    max_gap_base: float = 1200.0
    max_gap_per_speed: float = 20.0

    double_chance: float = Field(default=0.1, ge=0.0, le=1.0)
    double_gap: float = Field(default=250.0, gt=0)

    distance_base: float = 300.0
    distance_spread: float = 500.0

    obstacle_size: float = Field(default=40.0, gt=0)


class BackdropSettings(BaseModel):
    """Decorative clouds and trees."""

    cloud_chance: float = Field(default=0.005, ge=0.0, le=1.0)
    cloud_speed: float = 0.2
    cloud_min_size: float = 30.0
    cloud_size_spread: float = 40.0

    tree_chance: float = Field(default=0.015, ge=0.0, le=1.0)
    tree_min_size: float = 20.0
    tree_size_spread: float = 10.0
    tree_ground_inset: float = 15.0

    retire_x: float = -100.0


class HitboxSettings(BaseModel):
    """Insets applied to sprite boxes before overlap tests."""

    player_left: float = 10.0
    player_top: float = 10.0
    player_right: float = 10.0
    player_bottom: float = 5.0

    obstacle_inset: float = 5.0


class AudioSettings(BaseModel):
    """Sound effect output."""

    enabled: bool = True
    sample_rate: int = Field(default=44100, gt=0)
    volume: float = Field(default=0.05, gt=0.0, le=1.0)
    channels: int = Field(default=8, gt=0)


class Settings(BaseSettings):
    """Main game settings."""

    model_config = SettingsConfigDict(
        env_prefix="CATDASH_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    debug: bool = False
    seed: int | None = None

    display: DisplaySettings = Field(default_factory=DisplaySettings)
    physics: PhysicsSettings = Field(default_factory=PhysicsSettings)
    speed: SpeedSettings = Field(default_factory=SpeedSettings)
    spawn: SpawnSettings = Field(default_factory=SpawnSettings)
    backdrop: BackdropSettings = Field(default_factory=BackdropSettings)
    hitbox: HitboxSettings = Field(default_factory=HitboxSettings)
    audio: AudioSettings = Field(default_factory=AudioSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
