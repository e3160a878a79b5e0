from __future__ import annotations


def test_ease_endpoints_and_midpoint():
    from runtime.shader_math_v1 import ease_in_out

    assert ease_in_out(0.0) == 0.0
    assert ease_in_out(1.0) == 1.0
    assert ease_in_out(0.5) == 0.5


def test_ease_symmetric_monotonic_bounded():
    from runtime.shader_math_v1 import ease_in_out

    prev = -1.0
    for i in range(101):
        x = i / 100.0
        y = ease_in_out(x)
        assert 0.0 <= y <= 1.0
        assert abs(y - (1.0 - ease_in_out(1.0 - x))) < 1e-12
        assert y >= prev
        prev = y


def test_ease_is_gentle_at_the_ends():
    from runtime.shader_math_v1 import ease_in_out

    step = 0.05
    near_zero = ease_in_out(step) - ease_in_out(0.0)
    near_mid = ease_in_out(0.5 + step / 2) - ease_in_out(0.5 - step / 2)
    near_one = ease_in_out(1.0) - ease_in_out(1.0 - step)
    assert near_zero < near_mid
    assert near_one < near_mid


def test_lerp_rgb_and_to_rgba():
    from runtime.shader_math_v1 import lerp_rgb, to_rgba

    assert lerp_rgb((0.0, 100.0, 200.0), (100.0, 100.0, 0.0), 0.25) == (25.0, 100.0, 150.0)
    assert to_rgba((84.4, 107.6, 300.0), 19.6) == (84, 108, 255, 20)
    assert to_rgba((-3.0, 0.0, 0.0)) == (0, 0, 0, 255)
