"""Graphics module for CATDASH rendering."""

from catdash.graphics.renderer import Palette, Renderer
from catdash.graphics.primitives import (
    draw_circle,
    draw_hline,
    draw_line,
    draw_rect,
    draw_triangle,
    fill,
    new_buffer,
)

__all__ = [
    "Palette",
    "Renderer",
    "draw_circle",
    "draw_hline",
    "draw_line",
    "draw_rect",
    "draw_triangle",
    "fill",
    "new_buffer",
]
