from __future__ import annotations

"""
shader_math_v1 (shared math helpers)

Tiny scalar/colour helpers shared by the flow field, the parameter mapping
and the renderers.

This is NOT a simulation step. It's a shared primitive utility module.
"""

from typing import Tuple

RGB = Tuple[float, float, float]
RGBA = Tuple[int, int, int, int]

def clamp01(x: float) -> float:
    if x < 0.0: return 0.0
    if x > 1.0: return 1.0
    return x

def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t

def ease_in_out(x: float) -> float:
    """Smoothstep S-curve: x^2 * (3 - 2x).

    Slope is 0 at both ends and 1.5 at the midpoint, so a slider nudge near
    0 or 1 moves the output less than the same nudge near 0.5.
    """
    return x * x * (3.0 - 2.0 * x)

def lerp_rgb(a: RGB, b: RGB, t: float) -> RGB:
    # Channels stay float; renderers round.
    return (lerp(a[0], b[0], t), lerp(a[1], b[1], t), lerp(a[2], b[2], t))

def to_rgba(c: RGB, alpha: float = 255.0) -> RGBA:
    def _u8(v: float) -> int:
        v = int(round(v))
        if v < 0: return 0
        if v > 255: return 255
        return v
    return (_u8(c[0]), _u8(c[1]), _u8(c[2]), _u8(alpha))
