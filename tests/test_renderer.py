import numpy as np

from catdash.game.obstacles import Obstacle, ObstacleKind
from catdash.graphics.primitives import draw_circle, draw_line, draw_rect, new_buffer
from catdash.graphics.renderer import Palette, Renderer


def test_buffer_shape(settings):
    renderer = Renderer(settings.display.width, settings.display.height)
    assert renderer.buffer.shape == (540, 960, 3)
    assert renderer.buffer.dtype == np.uint8


def test_render_scene(quiet_session):
    palette = Palette()
    renderer = Renderer(960, 540, palette)
    quiet_session.obstacles.obstacles.append(
        Obstacle(x=500, y=400, width=40, height=40, kind=ObstacleKind.DOG)
    )

    buffer = renderer.render(quiet_session)

    assert tuple(buffer[5, 5]) == palette.background
    assert tuple(buffer[440, 300]) == palette.ground
    assert tuple(buffer[441, 300]) == palette.ground
    # Cat body and dog body
    assert tuple(buffer[425, 95]) == palette.glyph
    assert tuple(buffer[420, 520]) == palette.glyph


def test_render_into_given_buffer(quiet_session):
    renderer = Renderer(960, 540)
    target = new_buffer(960, 540)
    assert renderer.render(quiet_session, target) is target
    assert not np.array_equal(renderer.buffer, target)


def test_rect_is_clipped():
    buffer = new_buffer(10, 10)
    draw_rect(buffer, -5, -5, 8, 8, (255, 0, 0))
    assert tuple(buffer[0, 0]) == (255, 0, 0)
    assert tuple(buffer[2, 2]) == (255, 0, 0)
    assert tuple(buffer[3, 3]) == (0, 0, 0)

    draw_rect(buffer, 20, 20, 5, 5, (255, 0, 0))
    draw_circle(buffer, -50, -50, 3, (0, 255, 0))
    assert buffer[:, :, 1].sum() == 0


def test_rect_outline():
    buffer = new_buffer(10, 10)
    draw_rect(buffer, 2, 2, 5, 5, (9, 9, 9), filled=False)
    assert tuple(buffer[2, 4]) == (9, 9, 9)
    assert tuple(buffer[4, 4]) == (0, 0, 0)
    assert tuple(buffer[6, 6]) == (9, 9, 9)


def test_line_endpoints_and_clipping():
    buffer = new_buffer(10, 10)
    draw_line(buffer, 0, 0, 9, 9, (1, 2, 3))
    assert tuple(buffer[0, 0]) == (1, 2, 3)
    assert tuple(buffer[5, 5]) == (1, 2, 3)
    assert tuple(buffer[9, 9]) == (1, 2, 3)
    assert tuple(buffer[0, 9]) == (0, 0, 0)

    draw_line(buffer, -20, 3, 30, 3, (7, 7, 7), thickness=3)
    assert (buffer[2:5, :, 0] == 7).all()
