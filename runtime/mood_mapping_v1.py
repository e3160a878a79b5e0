from __future__ import annotations

"""
Mood mapping v1 (engine primitive)

Turns the three normalized mood parameters into the numeric constants the
flow field, integrator and renderer consume, and resolves the mood palette.

All curves pass the raw value through ease_in_out first.
"""

from dataclasses import dataclass

from .shader_math_v1 import RGB, clamp01, ease_in_out, lerp, lerp_rgb

COOL_A: RGB = (40.0, 140.0, 255.0)
COOL_B: RGB = (120.0, 80.0, 255.0)
COOL_MIX = 0.55
WARM_A: RGB = (255.0, 140.0, 90.0)
WARM_B: RGB = (255.0, 210.0, 120.0)
WARM_MIX = 0.4

COOL_ANCHOR: RGB = lerp_rgb(COOL_A, COOL_B, COOL_MIX)
WARM_ANCHOR: RGB = lerp_rgb(WARM_A, WARM_B, WARM_MIX)


@dataclass(frozen=True)
class MoodParams:
    energy: float = 0.28
    tension: float = 0.2
    warmth: float = 0.45

    def clamped(self) -> "MoodParams":
        return MoodParams(clamp01(self.energy), clamp01(self.tension), clamp01(self.warmth))


@dataclass(frozen=True)
class MotionConstants:
    speed: float
    noise_scale: float
    time_scale: float
    swirl: float
    stroke_weight: float
    particle_alpha: float  # 0..255


def derive_motion(params: MoodParams) -> MotionConstants:
    e = ease_in_out(params.energy)
    t = ease_in_out(params.tension)
    return MotionConstants(
        speed=lerp(0.5, 3.0, e),
        noise_scale=lerp(0.002, 0.011, t),
        time_scale=lerp(0.0001, 0.0006, e),
        swirl=lerp(0.0, 0.35, t),
        stroke_weight=lerp(1.1, 1.9, t),
        particle_alpha=lerp(20.0, 55.0, e),
    )


def mood_color(warmth: float, tint: float = 0.0) -> RGB:
    """Cool-to-warm palette colour for warmth offset by a per-mark tint."""
    t = clamp01(warmth + tint)
    return lerp_rgb(COOL_ANCHOR, WARM_ANCHOR, ease_in_out(t))
