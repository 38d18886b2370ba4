import random

import pytest

from catdash.game.collision import Box, check_collision, obstacle_hitbox, overlaps, player_hitbox
from catdash.game.obstacles import Obstacle
from catdash.game.player import Player


@pytest.fixture
def player(settings):
    return Player(settings.physics, settings.display.ground_y)


def ground_obstacle(x, settings):
    size = settings.spawn.obstacle_size
    return Obstacle(x=x, y=settings.display.ground_y - size, width=size, height=size)


def test_shrink():
    assert Box(10, 20, 40, 40).shrink(10, 10, 10, 5) == Box(20, 30, 20, 25)


def test_player_and_obstacle_hitboxes(player, settings):
    assert player_hitbox(player, settings.hitbox) == Box(90, 410, 20, 25)
    obstacle = ground_obstacle(500, settings)
    assert obstacle_hitbox(obstacle, settings.hitbox) == Box(505, 405, 30, 30)


def test_overlap_is_symmetric():
    rng = random.Random(7)
    for _ in range(500):
        a = Box(rng.uniform(-50, 50), rng.uniform(-50, 50), rng.uniform(1, 40), rng.uniform(1, 40))
        b = Box(rng.uniform(-50, 50), rng.uniform(-50, 50), rng.uniform(1, 40), rng.uniform(1, 40))
        assert overlaps(a, b) == overlaps(b, a)


def test_touching_edges_do_not_overlap():
    assert not overlaps(Box(0, 0, 10, 10), Box(10, 0, 10, 10))
    assert not overlaps(Box(0, 0, 10, 10), Box(0, 10, 10, 10))


@pytest.mark.parametrize("dx, dy", [(25, 0), (-25, 0), (0, 25), (0, -25), (30, 30)])
def test_separated_boxes_do_not_overlap(dx, dy):
    a = Box(0, 0, 20, 20)
    b = Box(dx, dy, 20, 20)
    assert not overlaps(a, b)
    assert not overlaps(b, a)


def test_collision_on_ground(player, settings):
    assert check_collision(player, ground_obstacle(player.x, settings), settings.hitbox)


def test_near_miss_is_forgiven(player, settings):
    # Sprites overlap by 15px but the shrunken boxes only touch
    assert not check_collision(player, ground_obstacle(105, settings), settings.hitbox)
    assert check_collision(player, ground_obstacle(104, settings), settings.hitbox)


def test_airborne_player_clears_obstacle(player, settings):
    player.y = player.floor_y - 100
    assert not check_collision(player, ground_obstacle(player.x, settings), settings.hitbox)
