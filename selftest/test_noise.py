from __future__ import annotations


def test_noise_is_deterministic_per_seed():
    from runtime.noise_v2 import PerlinNoise, PerlinNoiseConfig

    a = PerlinNoise(PerlinNoiseConfig(seed=42))
    b = PerlinNoise(PerlinNoiseConfig(seed=42))
    for x, y, z in [(0.1, 0.2, 0.3), (3.7, 1.25, 0.0), (12.5, 40.0, 2.2)]:
        assert a.noise(x, y, z) == b.noise(x, y, z)


def test_noise_range():
    from runtime.noise_v2 import PerlinNoise, PerlinNoiseConfig

    n = PerlinNoise(PerlinNoiseConfig(seed=7))
    for i in range(200):
        v = n.noise(i * 0.173, i * 0.091, i * 0.013)
        assert 0.0 <= v < 1.0


def test_noise_reseed_changes_field():
    from runtime.noise_v2 import PerlinNoise, PerlinNoiseConfig

    n = PerlinNoise(PerlinNoiseConfig(seed=1))
    before = [n.noise(i * 0.37, 0.5, 0.25) for i in range(20)]
    n.reseed(2)
    after = [n.noise(i * 0.37, 0.5, 0.25) for i in range(20)]
    assert n.seed == 2
    assert before != after
    n.reseed(1)
    assert [n.noise(i * 0.37, 0.5, 0.25) for i in range(20)] == before


def test_noise_is_coherent_and_mirrored():
    from runtime.noise_v2 import PerlinNoise, PerlinNoiseConfig

    n = PerlinNoise(PerlinNoiseConfig(seed=99))
    assert abs(n.noise(2.5, 1.5, 0.5) - n.noise(2.5001, 1.5, 0.5)) < 0.01
    assert n.noise(-2.5, 1.5) == n.noise(2.5, 1.5)
    assert n.noise(4.2) == n.noise(4.2, 0.0, 0.0)


def test_unseeded_noise_still_in_range():
    from runtime.noise_v2 import PerlinNoise

    n = PerlinNoise()
    assert n.seed is None
    assert 0.0 <= n.noise(1.5, 2.5, 3.5) < 1.0
