"""Scene renderer: draws a session's state into an RGB buffer."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from catdash.game.backdrop import AmbientEntity, AmbientKind
from catdash.game.obstacles import Obstacle, ObstacleKind
from catdash.game.player import Player
from catdash.graphics.primitives import (
    Buffer, Color, draw_circle, draw_hline, draw_line, draw_rect, draw_triangle, fill, new_buffer
)

if TYPE_CHECKING:
    from catdash.game.session import Session


@dataclass(frozen=True)
class Palette:
    """Monochrome look: dark glyphs on a light field."""

    background: Color = (247, 247, 247)
    ground: Color = (83, 83, 83)
    cloud: Color = (230, 230, 230)
    tree: Color = (200, 200, 200)
    trunk: Color = (180, 180, 180)
    glyph: Color = (0, 0, 0)
    glyph_light: Color = (90, 90, 90)


class Renderer:
    """
    Clear-and-redraw of one frame: background, ground line, scenery,
    the player and every active obstacle. Reads state only.
    """

    def __init__(self, width: int, height: int, palette: Palette | None = None) -> None:
        self.width = width
        self.height = height
        self.palette = palette or Palette()
        self.buffer = new_buffer(width, height)

    def render(self, session: "Session", buffer: Buffer | None = None) -> Buffer:
        target = self.buffer if buffer is None else buffer
        p = self.palette

        fill(target, p.background)
        draw_hline(target, int(session.ground_y), p.ground, thickness=2)

        for cloud in session.backdrop.clouds:
            self._draw_cloud(target, cloud)
        for tree in session.backdrop.trees:
            self._draw_tree(target, tree, session.ground_y)

        self._draw_cat(target, session.player)
        for obstacle in session.obstacles:
            self._draw_dog(target, obstacle)

        return target

    def _draw_cloud(self, buffer: Buffer, cloud: AmbientEntity) -> None:
        r = int(cloud.size / 4)
        x, y = int(cloud.x), int(cloud.y + cloud.size / 2)
        draw_circle(buffer, x + r, y, r, self.palette.cloud)
        draw_circle(buffer, x + 2 * r, y - r // 2, int(r * 1.3), self.palette.cloud)
        draw_circle(buffer, x + 3 * r, y, r, self.palette.cloud)

    def _draw_tree(self, buffer: Buffer, tree: AmbientEntity, ground_y: float) -> None:
        size = int(tree.size)
        cx = int(tree.x + size / 2)
        base = int(ground_y)
        trunk_h = max(2, size // 4)
        draw_rect(buffer, cx - 2, base - trunk_h, 4, trunk_h, self.palette.trunk)

        if tree.kind == AmbientKind.PINE:
            draw_triangle(buffer, cx, base - trunk_h - size, size // 2, size, self.palette.tree)
        else:
            draw_circle(buffer, cx, base - trunk_h - size // 2, size // 2, self.palette.tree)

    def _draw_cat(self, buffer: Buffer, player: Player) -> None:
        x, y = int(player.x), int(player.y)
        w, h = int(player.width), int(player.height)
        c = self.palette.glyph

        # Body, head, ears, tail
        draw_rect(buffer, x + w // 8, y + h // 2, w * 5 // 8, h // 3, c)
        draw_circle(buffer, x + w * 3 // 4, y + h * 2 // 5, w // 5, c)
        draw_triangle(buffer, x + w * 5 // 8, y + h // 8, w // 12, h // 6, c)
        draw_triangle(buffer, x + w * 7 // 8, y + h // 8, w // 12, h // 6, c)
        draw_line(buffer, x + w // 8, y + h * 2 // 3, x, y + h // 4, c, thickness=3)

        # Legs
        leg_w = max(2, w // 10)
        for lx in (x + w // 6, x + w * 3 // 5):
            draw_rect(buffer, lx, y + h * 5 // 6, leg_w, h // 6, c)

    def _draw_dog(self, buffer: Buffer, obstacle: Obstacle) -> None:
        x, y = int(obstacle.x), int(obstacle.y)
        w, h = int(obstacle.width), int(obstacle.height)
        c = self.palette.glyph

        if obstacle.kind == ObstacleKind.POODLE:
            # Puffy body and head
            draw_circle(buffer, x + w // 2, y + h // 2, w // 4, c)
            draw_circle(buffer, x + w // 5, y + h // 4, w // 6, c)
            draw_circle(buffer, x + w * 4 // 5, y + h // 3, w // 10, self.palette.glyph_light)
        else:
            draw_rect(buffer, x + w // 4, y + h // 3, w * 5 // 8, h // 3, c)
            draw_rect(buffer, x, y + h // 6, w // 3, h // 4, c)
            draw_rect(buffer, x + w * 7 // 8, y + h // 4, w // 8, h // 6, c)

        leg_w = max(2, w // 10)
        for lx in (x + w // 4, x + w * 3 // 4):
            draw_rect(buffer, lx, y + h * 2 // 3, leg_w, h // 3, c)
