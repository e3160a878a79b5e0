"""Deterministic noise helpers v2 (engine primitive).

v2 is a single, stable coherent-noise API used by the flow field.
- No external dependencies
- Deterministic given the same seed and inputs
- 1D/2D/3D inputs, output in [0,1)

Lattice layout: a 4096-entry random table indexed by x + 16*y + 256*z, cosine
interpolated, summed over octaves with amplitude falloff. Negative inputs are
mirrored (abs) so the field is symmetric around 0.

This is *not* an effect: it is a reusable math primitive.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

_TABLE_MASK = 4095
_YWRAP = 1 << 4
_ZWRAP = 1 << 8

# Numerical Recipes LCG used to fill the table from an integer seed.
_LCG_M = 4294967296
_LCG_A = 1664525
_LCG_C = 1013904223


def _scaled_cosine(i: float) -> float:
    return 0.5 * (1.0 - math.cos(i * math.pi))


def _lcg_table(seed: int) -> list[float]:
    z = int(seed) & 0xFFFFFFFF
    out = []
    for _ in range(_TABLE_MASK + 1):
        z = (_LCG_A * z + _LCG_C) % _LCG_M
        out.append(z / _LCG_M)
    return out


@dataclass(frozen=True)
class PerlinNoiseConfig:
    seed: int | None = None  # None => unseeded table (fresh randomness)
    octaves: int = 4
    falloff: float = 0.5


class PerlinNoise:
    """Seeded coherent noise in [0,1) over up to three inputs."""

    def __init__(self, cfg: PerlinNoiseConfig | None = None):
        self.cfg = cfg or PerlinNoiseConfig()
        self.seed: int | None = None
        self._table: list[float] = []
        self.reseed(self.cfg.seed)

    def reseed(self, seed: int | None) -> None:
        if seed is None:
            self.seed = None
            rng = random.Random()
            self._table = [rng.random() for _ in range(_TABLE_MASK + 1)]
        else:
            self.seed = int(seed) & 0xFFFFFFFF
            self._table = _lcg_table(self.seed)

    def noise(self, x: float, y: float = 0.0, z: float = 0.0) -> float:
        p = self._table
        x, y, z = abs(x), abs(y), abs(z)
        xi, yi, zi = int(math.floor(x)), int(math.floor(y)), int(math.floor(z))
        xf, yf, zf = x - xi, y - yi, z - zi

        r = 0.0
        ampl = 0.5
        for _ in range(max(1, int(self.cfg.octaves))):
            of = xi + (yi << 4) + (zi << 8)
            rxf = _scaled_cosine(xf)
            ryf = _scaled_cosine(yf)

            n1 = p[of & _TABLE_MASK]
            n1 += rxf * (p[(of + 1) & _TABLE_MASK] - n1)
            n2 = p[(of + _YWRAP) & _TABLE_MASK]
            n2 += rxf * (p[(of + _YWRAP + 1) & _TABLE_MASK] - n2)
            n1 += ryf * (n2 - n1)

            of += _ZWRAP
            n2 = p[of & _TABLE_MASK]
            n2 += rxf * (p[(of + 1) & _TABLE_MASK] - n2)
            n3 = p[(of + _YWRAP) & _TABLE_MASK]
            n3 += rxf * (p[(of + _YWRAP + 1) & _TABLE_MASK] - n3)
            n2 += ryf * (n3 - n2)

            n1 += _scaled_cosine(zf) * (n2 - n1)

            r += n1 * ampl
            ampl *= self.cfg.falloff

            xi <<= 1; xf *= 2.0
            yi <<= 1; yf *= 2.0
            zi <<= 1; zf *= 2.0
            if xf >= 1.0:
                xi += 1; xf -= 1.0
            if yf >= 1.0:
                yi += 1; yf -= 1.0
            if zf >= 1.0:
                zi += 1; zf -= 1.0
        return r

    __call__ = noise
