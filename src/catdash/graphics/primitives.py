"""Basic drawing primitives on numpy RGB buffers."""

from typing import Tuple
import numpy as np
from numpy.typing import NDArray

# Type aliases
Color = Tuple[int, int, int]
Buffer = NDArray[np.uint8]


def new_buffer(width: int, height: int) -> Buffer:
    """Allocate a black (height, width, 3) buffer."""
    return np.zeros((height, width, 3), dtype=np.uint8)


def fill(buffer: Buffer, color: Color) -> None:
    """Fill entire buffer with color."""
    buffer[:, :] = color


def _clip_box(buffer: Buffer, x: int, y: int, width: int, height: int) -> Tuple[int, int, int, int]:
    h, w = buffer.shape[:2]
    return (
        max(0, min(x, w)),
        max(0, min(y, h)),
        max(0, min(x + width, w)),
        max(0, min(y + height, h)),
    )


def draw_rect(
    buffer: Buffer,
    x: int,
    y: int,
    width: int,
    height: int,
    color: Color,
    filled: bool = True,
) -> None:
    """Draw a rectangle, clipped to the buffer.

    Args:
        buffer: Target numpy array (height, width, 3)
        x: Left edge x coordinate
        y: Top edge y coordinate
        width: Rectangle width
        height: Rectangle height
        color: RGB color tuple
        filled: If True, fill rectangle; if False, draw a 1px outline
    """
    x1, y1, x2, y2 = _clip_box(buffer, x, y, width, height)
    if x1 >= x2 or y1 >= y2:
        return

    if filled:
        buffer[y1:y2, x1:x2] = color
        return

    buffer[y1, x1:x2] = color
    buffer[y2 - 1, x1:x2] = color
    buffer[y1:y2, x1] = color
    buffer[y1:y2, x2 - 1] = color


def draw_hline(buffer: Buffer, y: int, color: Color, thickness: int = 1) -> None:
    """Full-width horizontal line."""
    h = buffer.shape[0]
    y1 = max(0, y)
    y2 = min(h, y + thickness)
    if y1 < y2:
        buffer[y1:y2, :] = color


def draw_line(
    buffer: Buffer,
    x1: int,
    y1: int,
    x2: int,
    y2: int,
    color: Color,
    thickness: int = 1,
) -> None:
    """Draw a straight line, one sample per pixel along the longer axis.

    Args:
        buffer: Target numpy array (height, width, 3)
        x1, y1: Start point
        x2, y2: End point
        color: RGB color tuple
        thickness: Line thickness in pixels
    """
    h, w = buffer.shape[:2]
    steps = max(abs(x2 - x1), abs(y2 - y1)) + 1
    xs = np.rint(np.linspace(x1, x2, steps)).astype(int)
    ys = np.rint(np.linspace(y1, y2, steps)).astype(int)

    for offset in range(-(thickness // 2), (thickness + 1) // 2):
        px = xs + offset if abs(x2 - x1) < abs(y2 - y1) else xs
        py = ys if abs(x2 - x1) < abs(y2 - y1) else ys + offset
        keep = (px >= 0) & (px < w) & (py >= 0) & (py < h)
        buffer[py[keep], px[keep]] = color


def draw_circle(buffer: Buffer, cx: int, cy: int, radius: int, color: Color) -> None:
    """Filled circle, evaluated only inside its bounding box."""
    x1, y1, x2, y2 = _clip_box(buffer, cx - radius, cy - radius, 2 * radius + 1, 2 * radius + 1)
    if x1 >= x2 or y1 >= y2:
        return

    ys, xs = np.ogrid[y1:y2, x1:x2]
    mask = (xs - cx) ** 2 + (ys - cy) ** 2 <= radius ** 2
    buffer[y1:y2, x1:x2][mask] = color


def draw_triangle(buffer: Buffer, cx: int, top: int, half_width: int, height: int, color: Color) -> None:
    """Filled isosceles triangle with its apex at (cx, top)."""
    if height <= 0:
        return
    x1, y1, x2, y2 = _clip_box(buffer, cx - half_width, top, 2 * half_width + 1, height)
    if x1 >= x2 or y1 >= y2:
        return

    ys, xs = np.ogrid[y1:y2, x1:x2]
    # Half width grows linearly from the apex to the base
    mask = np.abs(xs - cx) <= (ys - top) * half_width / height
    buffer[y1:y2, x1:x2][mask] = color
