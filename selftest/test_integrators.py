from __future__ import annotations


def test_wrap_once_each_edge():
    from runtime.integrators_v1 import wrap_once

    assert wrap_once(-1.0, 900.0) == 899.0
    assert wrap_once(900.0, 900.0) == 0.0
    assert wrap_once(900.5, 900.0) == 0.5
    assert wrap_once(450.0, 900.0) == 450.0
    assert wrap_once(0.0, 900.0) == 0.0


def test_wrap_once_tiny_negative_stays_in_range():
    from runtime.integrators_v1 import wrap_once

    v = wrap_once(-1e-17, 560.0)
    assert 0.0 <= v < 560.0


def test_step_entities_moves_wraps_and_reports_trails():
    from runtime.integrators_v1 import step_entities
    from runtime.particles_v1 import Particle

    ps = [Particle(1.0, 1.0), Particle(99.0, 49.5), Particle(50.0, 25.0)]
    segs = step_entities(ps, lambda p: (-2.0, 1.0), 100.0, 50.0)
    assert segs[0] == (1.0, 1.0, 99.0, 2.0)
    assert segs[1] == (99.0, 49.5, 97.0, 0.5)
    assert segs[2] == (50.0, 25.0, 48.0, 26.0)
    for p in ps:
        assert 0.0 <= p.x < 100.0
        assert 0.0 <= p.y < 50.0


def test_wrap_once_handles_moves_wider_than_extent():
    from runtime.integrators_v1 import wrap_once

    assert wrap_once(-250.0, 100.0) == 50.0
    assert wrap_once(345.0, 100.0) == 45.0
    assert wrap_once(-100.0, 100.0) == 0.0
    for v in (-1e9, -301.5, 200.0, 999.999, 1e9):
        w = wrap_once(v, 100.0)
        assert 0.0 <= w < 100.0
