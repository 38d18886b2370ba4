"""Gameplay: player physics, obstacles, scenery, collisions and the session loop."""

from catdash.game.input import InputProvider, InputState, Intent
from catdash.game.player import Player
from catdash.game.obstacles import Obstacle, ObstacleField, ObstacleKind
from catdash.game.backdrop import AmbientEntity, AmbientKind, Backdrop
from catdash.game.collision import Box, check_collision, overlaps
from catdash.game.session import Session, dt_factor, format_score

__all__ = [
    "AmbientEntity",
    "AmbientKind",
    "Backdrop",
    "Box",
    "InputProvider",
    "InputState",
    "Intent",
    "Obstacle",
    "ObstacleField",
    "ObstacleKind",
    "Player",
    "Session",
    "check_collision",
    "dt_factor",
    "format_score",
    "overlaps",
]
