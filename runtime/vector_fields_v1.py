"""Vector Fields v1 (engine primitive).

A VectorField is a reusable simulation building-block. It is *not* an "effect".
Two fields drive the mood particles:

- FlowNoiseField: direction from coherent noise, plus a per-particle jitter.
- RippleField: sum of tangential (vortex) forces from persistent ripples.

Fields are deterministic given their config + the noise seed.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Iterable, List, Protocol, Tuple

from .noise_v2 import PerlinNoise

Vec2 = Tuple[float, float]

# Offsets below this (squared) have no defined tangent; they contribute nothing.
ZERO_OFFSET_EPS2 = 1e-9
# Added to d when normalising the tangent.
TANGENT_EPS = 1e-6

JITTER_TIME_SCALE = 0.0005


class VectorField:
    """Base field interface."""

    def sample(self, x: float, y: float, t: float = 0.0) -> Vec2:
        raise NotImplementedError


@dataclass
class FlowNoiseFieldConfig:
    speed: float = 0.5
    noise_scale: float = 0.002
    time_scale: float = 0.0001
    swirl: float = 0.0
    turns: float = 2.0  # angle spans `turns` full circles


class FlowNoiseField(VectorField):
    """Noise-steered flow. `t` is in milliseconds."""

    def __init__(self, noise: PerlinNoise, cfg: FlowNoiseFieldConfig | None = None):
        self.noise = noise
        self.cfg = cfg or FlowNoiseFieldConfig()

    def angle(self, x: float, y: float, t: float, seed: float = 0.0) -> float:
        c = self.cfg
        a = self.noise.noise(x * c.noise_scale, y * c.noise_scale, t * c.time_scale) * math.tau * c.turns
        if c.swirl != 0.0:
            # keyed on the particle, not the position
            a += (self.noise.noise(seed, t * JITTER_TIME_SCALE) - 0.5) * c.swirl
        return a

    def velocity(self, x: float, y: float, t: float, seed: float = 0.0) -> Vec2:
        a = self.angle(x, y, t, seed)
        return math.cos(a) * self.cfg.speed, math.sin(a) * self.cfg.speed

    def sample(self, x: float, y: float, t: float = 0.0) -> Vec2:
        return self.velocity(x, y, t, 0.0)


@dataclass(frozen=True)
class Ripple:
    x: float
    y: float
    radius: float = 80.0
    strength: float = 0.6


def ripple_falloff(d2: float, ripple: Ripple) -> float:
    """Cubic falloff for an epsilon-adjusted squared distance; 0 outside the radius."""
    r = ripple.radius
    if d2 >= r * r:
        return 0.0
    t = 1.0 - math.sqrt(d2) / r
    return ripple.strength * t * t * t


class RippleIndex(Protocol):
    def candidates(self, x: float, y: float) -> Iterable[Ripple]: ...


class LinearRippleIndex:
    """Full scan over a live ripple collection (no copy)."""

    def __init__(self, ripples: Iterable[Ripple]):
        self.ripples = ripples

    def candidates(self, x: float, y: float) -> Iterable[Ripple]:
        return self.ripples


class GridRippleIndex:
    """Uniform bucket grid, rebuilt from a snapshot.

    Cell size is the largest radius, so every ripple covering a point sits in
    the point's cell or one of its 8 neighbours. Same results as the linear
    scan, in the same insertion order.
    """

    def __init__(self, ripples: Iterable[Ripple]):
        self._all: List[Ripple] = list(ripples)
        self.cell = max([r.radius for r in self._all] or [1.0])
        self._grid: Dict[Tuple[int, int], List[int]] = {}
        for i, r in enumerate(self._all):
            key = (int(math.floor(r.x / self.cell)), int(math.floor(r.y / self.cell)))
            self._grid.setdefault(key, []).append(i)

    def candidates(self, x: float, y: float) -> Iterable[Ripple]:
        cx = int(math.floor(x / self.cell))
        cy = int(math.floor(y / self.cell))
        hits: List[int] = []
        for nx in (cx - 1, cx, cx + 1):
            for ny in (cy - 1, cy, cy + 1):
                lst = self._grid.get((nx, ny))
                if lst:
                    hits.extend(lst)
        hits.sort()
        return [self._all[i] for i in hits]


class RippleField(VectorField):
    def __init__(self, index: RippleIndex):
        self.index = index

    def sample(self, x: float, y: float, t: float = 0.0) -> Vec2:
        fx = 0.0
        fy = 0.0
        for r in self.index.candidates(x, y):
            dx = x - r.x
            dy = y - r.y
            raw2 = dx * dx + dy * dy
            d2 = raw2 + 1.0
            if d2 >= r.radius * r.radius or raw2 < ZERO_OFFSET_EPS2:
                continue
            d = math.sqrt(d2)
            s = ripple_falloff(d2, r)
            inv = 1.0 / (d + TANGENT_EPS)
            fx += -dy * inv * s
            fy += dx * inv * s
        return fx, fy
