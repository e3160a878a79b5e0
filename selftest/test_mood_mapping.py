from __future__ import annotations

import math


def _close(a, b, tol=1e-9):
    return all(abs(x - y) <= tol for x, y in zip(a, b))


def test_calm_cold_start_constants():
    from runtime.mood_mapping_v1 import MoodParams, derive_motion

    m = derive_motion(MoodParams(energy=0.0, tension=0.0, warmth=0.45))
    assert m.speed == 0.5
    assert m.noise_scale == 0.002
    assert m.time_scale == 0.0001
    assert m.swirl == 0.0
    assert m.stroke_weight == 1.1
    assert m.particle_alpha == 20.0


def test_full_energy_and_tension_constants():
    from runtime.mood_mapping_v1 import MoodParams, derive_motion

    m = derive_motion(MoodParams(energy=1.0, tension=1.0, warmth=0.0))
    assert math.isclose(m.speed, 3.0)
    assert math.isclose(m.noise_scale, 0.011)
    assert math.isclose(m.time_scale, 0.0006)
    assert math.isclose(m.swirl, 0.35)
    assert math.isclose(m.stroke_weight, 1.9)
    assert math.isclose(m.particle_alpha, 55.0)


def test_midpoint_maps_to_middle_of_range():
    from runtime.mood_mapping_v1 import MoodParams, derive_motion

    m = derive_motion(MoodParams(energy=0.5, tension=0.5))
    assert math.isclose(m.speed, 1.75)
    assert math.isclose(m.swirl, 0.175)
    assert math.isclose(m.particle_alpha, 37.5)


def test_mood_color_anchors():
    from runtime.mood_mapping_v1 import COOL_ANCHOR, WARM_ANCHOR, mood_color
    from runtime.shader_math_v1 import lerp_rgb

    assert mood_color(0.0, 0.0) == lerp_rgb((40, 140, 255), (120, 80, 255), 0.55)
    assert mood_color(0.0, 0.0) == COOL_ANCHOR
    assert _close(mood_color(1.0, 0.0), lerp_rgb((255, 140, 90), (255, 210, 120), 0.4))
    assert _close(WARM_ANCHOR, (255.0, 168.0, 102.0))
    assert _close(COOL_ANCHOR, (84.0, 107.0, 255.0))


def test_mood_color_clamps_tint():
    from runtime.mood_mapping_v1 import mood_color

    assert mood_color(0.05, -0.12) == mood_color(0.0, 0.0)
    assert mood_color(0.95, 0.12) == mood_color(1.0, 0.0)


def test_mood_color_midpoint_is_even_blend():
    from runtime.mood_mapping_v1 import COOL_ANCHOR, WARM_ANCHOR, mood_color

    mid = mood_color(0.5, 0.0)
    for c, a, b in zip(mid, COOL_ANCHOR, WARM_ANCHOR):
        assert abs(c - (a + b) / 2.0) < 1e-9


def test_params_clamped():
    from runtime.mood_mapping_v1 import MoodParams

    p = MoodParams(energy=1.4, tension=-0.2, warmth=0.3).clamped()
    assert (p.energy, p.tension, p.warmth) == (1.0, 0.0, 0.3)
