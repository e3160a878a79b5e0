from __future__ import annotations


def in_canvas(width: float, height: float, x: float, y: float) -> bool:
    """True when (x, y) lies on the drawing surface: [0,width) x [0,height)."""
    return 0.0 <= x < width and 0.0 <= y < height
