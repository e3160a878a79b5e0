from __future__ import annotations

from .shader_math_v1 import clamp01, lerp, ease_in_out, lerp_rgb, to_rgba
from .noise_v2 import PerlinNoise, PerlinNoiseConfig
from .vector_fields_v1 import (
    VectorField,
    FlowNoiseField,
    FlowNoiseFieldConfig,
    Ripple,
    RippleField,
    LinearRippleIndex,
    GridRippleIndex,
    ripple_falloff,
)
from .integrators_v1 import wrap_once, step_entities
from .particles_v1 import Particle, ParticleSystemV1, DeterministicRNG
from .bounded_log_v1 import BoundedLogV1
from .mood_mapping_v1 import MoodParams, MotionConstants, derive_motion, mood_color
from .draw_list_v1 import DrawList, Stroke, Surface
