from __future__ import annotations

"""
Particle System v1 (engine primitive)

This is NOT an "effect". It is the particle pool the mood simulation drives.

Design goals:
- Deterministic when given a seeded RNG
- Fixed population: particles are born in bulk at reset and never die mid-run
- Layout-agnostic: operates in canvas space (x,y floats). Renderers decide mapping.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple
import random

from .integrators_v1 import Segment, step_entities


class DeterministicRNG:
    """Deterministic RNG for stateful sims (preview)."""
    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(None if seed is None else int(seed) & 0xFFFFFFFF)

    def rand(self) -> float:
        return self._rng.random()

    def uniform(self, a: float, b: float) -> float:
        return self._rng.uniform(a, b)


@dataclass
class Particle:
    x: float
    y: float
    seed: float = 0.0   # decorrelates per-particle jitter
    tint: float = 0.0   # small fixed palette offset


class ParticleSystemV1:
    def __init__(self, width: float, height: float, rng: DeterministicRNG,
                 seed_range: float = 1000.0, tint_jitter: float = 0.12):
        self.width = float(width)
        self.height = float(height)
        self.rng = rng
        self.seed_range = float(seed_range)
        self.tint_jitter = float(tint_jitter)
        self.particles: List[Particle] = []

    def __len__(self) -> int:
        return len(self.particles)

    def respawn(self, count: int) -> None:
        """Drop every particle and create `count` fresh ones."""
        rng = self.rng
        self.particles = [
            Particle(
                x=rng.uniform(0.0, self.width),
                y=rng.uniform(0.0, self.height),
                seed=rng.uniform(0.0, self.seed_range),
                tint=rng.uniform(-self.tint_jitter, self.tint_jitter),
            )
            for _ in range(max(0, int(count)))
        ]
        # uniform(a, b) may return b
        for p in self.particles:
            if p.x >= self.width:
                p.x = 0.0
            if p.y >= self.height:
                p.y = 0.0

    def step(self, velocity: Callable[[Particle], Tuple[float, float]]) -> List[Segment]:
        return step_entities(self.particles, velocity, self.width, self.height)
