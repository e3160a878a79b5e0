from __future__ import annotations
"""Mood simulation engine.

One Simulation owns all mutable state: the particle pool, the ripple and
line-mark logs, the noise source and the RNG. Hosts drive it with:

- tick(dt_ms, params, surface) once per display refresh
- handle_pointer_move / handle_pointer_down between ticks
- reset(reseed) on the reset command

Everything runs on the caller's thread; event callbacks complete before the
next tick reads their effects.
"""

from dataclasses import dataclass
import math
from typing import Any, Dict, Optional, Tuple

from app.log_buffer import log
from params.registry import SimConfig
from preview.hit_test import in_canvas
from runtime.bounded_log_v1 import BoundedLogV1
from runtime.draw_list_v1 import DrawList, Stroke, Surface
from runtime.mood_mapping_v1 import MoodParams, MotionConstants, derive_motion, mood_color
from runtime.noise_v2 import PerlinNoise, PerlinNoiseConfig
from runtime.particles_v1 import DeterministicRNG, Particle, ParticleSystemV1
from runtime.shader_math_v1 import RGB, to_rgba
from runtime.vector_fields_v1 import (
    FlowNoiseField,
    FlowNoiseFieldConfig,
    GridRippleIndex,
    LinearRippleIndex,
    Ripple,
    RippleField,
)

BG_CLEAR = (10, 14, 20, 255)
BG_FADE = (10, 14, 20, 18)
RIPPLE_STROKE = Stroke((255, 255, 255, 35), 1.0)
RIPPLE_DRAW_SCALE = 0.9
LINE_WEIGHT = 2.2
FRAME_STROKE = Stroke((230, 220, 255, 18), 10.0)
FRAME_INSET = 8.0
FRAME_RADIUS = 18.0

NOISE_SEED_RANGE = 1e9

RIPPLE_INDEXES = ("linear", "grid")


@dataclass(frozen=True)
class LineMark:
    x1: float
    y1: float
    x2: float
    y2: float
    color: RGB


class Simulation:
    def __init__(self, config: Optional[SimConfig] = None, seed: Optional[int] = None,
                 ripple_index: str = "linear"):
        if ripple_index not in RIPPLE_INDEXES:
            raise ValueError(f"ripple_index must be one of {RIPPLE_INDEXES}, got {ripple_index!r}")
        self.config = config or SimConfig()
        self.ripple_index = ripple_index
        self.rng = DeterministicRNG(seed)
        self.noise = PerlinNoise(PerlinNoiseConfig(seed=None))
        self.flow = FlowNoiseField(self.noise)
        c = self.config
        self.particles = ParticleSystemV1(
            c.width, c.height, self.rng,
            seed_range=c.particle_seed_range,
            tint_jitter=c.particle_tint_jitter,
        )
        self.ripples: BoundedLogV1[Ripple] = BoundedLogV1(c.max_ripples)
        self.lines: BoundedLogV1[LineMark] = BoundedLogV1(c.max_lines)
        self.time_ms = 0.0
        self.frame = 0
        self.motion: Optional[MotionConstants] = None
        self._clear_pending = False
        self.reset(reseed=True)

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    # ---- commands

    def reset(self, reseed: bool = True) -> None:
        """Clear all marks and respawn the base population."""
        self.ripples.clear()
        self.lines.clear()
        self.particles.respawn(self.config.base_particles)
        if reseed:
            self.set_noise_seed(int(math.floor(self.rng.rand() * NOISE_SEED_RANGE)))
        self._clear_pending = True
        log(f"reset: particles={len(self.particles)} noise_seed={self.noise.seed}", echo=False)

    def set_noise_seed(self, seed: int) -> None:
        self.noise.reseed(seed)

    def handle_pointer_move(self, x: float, y: float) -> bool:
        if not in_canvas(self.width, self.height, x, y):
            return False
        c = self.config
        self.ripples.push(Ripple(float(x), float(y), c.ripple_radius, c.ripple_strength))
        return True

    def handle_pointer_down(self, x: float, y: float, warmth: float) -> bool:
        if not in_canvas(self.width, self.height, x, y):
            return False
        c = self.config
        length = self.rng.uniform(c.line_len_min, c.line_len_max)
        angle = self.rng.uniform(0.0, math.tau)
        hx = math.cos(angle) * length * 0.5
        hy = math.sin(angle) * length * 0.5
        tint = self.rng.uniform(-c.line_tint_jitter, c.line_tint_jitter)
        self.lines.push(LineMark(x - hx, y - hy, x + hx, y + hy, mood_color(warmth, tint)))
        return True

    # ---- frame

    def _ripple_field(self) -> RippleField:
        if self.ripple_index == "grid":
            return RippleField(GridRippleIndex(self.ripples))
        return RippleField(LinearRippleIndex(self.ripples))

    def particle_velocity(self, p: Particle, forces: Optional[RippleField] = None) -> Tuple[float, float]:
        """Flow term plus ripple forces at the particle, at the current time."""
        vx, vy = self.flow.velocity(p.x, p.y, self.time_ms, p.seed)
        fx, fy = (forces or self._ripple_field()).sample(p.x, p.y)
        return vx + fx, vy + fy

    def tick(self, dt_ms: float, params: MoodParams, surface: Optional[Surface] = None) -> Surface:
        if surface is None:
            surface = DrawList(self.width, self.height)
        self.time_ms += max(0.0, float(dt_ms))
        self.frame += 1

        m = derive_motion(params)
        self.motion = m
        self.flow.cfg = FlowNoiseFieldConfig(
            speed=m.speed,
            noise_scale=m.noise_scale,
            time_scale=m.time_scale,
            swirl=m.swirl,
        )

        if self._clear_pending:
            surface.background(BG_CLEAR)
            self._clear_pending = False
        surface.background(BG_FADE)

        forces = self._ripple_field()
        segs = self.particles.step(lambda p: self.particle_velocity(p, forces))
        for p, (x0, y0, x1, y1) in zip(self.particles.particles, segs):
            col = to_rgba(mood_color(params.warmth, p.tint), m.particle_alpha)
            surface.line(x0, y0, x1, y1, Stroke(col, m.stroke_weight))

        for r in self.ripples:
            surface.circle(r.x, r.y, r.radius * RIPPLE_DRAW_SCALE, RIPPLE_STROKE)

        for ln in self.lines:
            surface.line(ln.x1, ln.y1, ln.x2, ln.y2, Stroke(to_rgba(ln.color), LINE_WEIGHT))

        surface.rect(FRAME_INSET, FRAME_INSET,
                     self.width - 2 * FRAME_INSET, self.height - 2 * FRAME_INSET,
                     FRAME_STROKE, FRAME_RADIUS)
        return surface

    def stats(self) -> Dict[str, Any]:
        return {
            "frame": self.frame,
            "time_ms": self.time_ms,
            "particles": len(self.particles),
            "ripples": len(self.ripples),
            "lines": len(self.lines),
            "noise_seed": self.noise.seed,
            "ripple_index": self.ripple_index,
        }
