# Parameter registry (single source of truth)
# - The three mood knobs the UI exposes (read-only to the simulation).
# - Simulation constants (canvas, population, capacities, mark shapes).
#
# Types supported by the Qt slider panel + ensure_params():
#   float

from __future__ import annotations

from dataclasses import dataclass, fields

PARAMS: dict[str, dict] = {
    "energy":  {"type": "float", "label": "Energy",       "readout": "Energy",  "default": 0.28, "min": 0.0, "max": 1.0, "step": 0.001},
    "tension": {"type": "float", "label": "Calm ↔ Tense", "readout": "Tension", "default": 0.2,  "min": 0.0, "max": 1.0, "step": 0.001},
    "warmth":  {"type": "float", "label": "Warm ↔ Cool",  "readout": "Warmth",  "default": 0.45, "min": 0.0, "max": 1.0, "step": 0.001},
}

MOOD_KEYS = ["energy", "tension", "warmth"]

@dataclass(frozen=True)
class SimConfig:
    width: int = 900
    height: int = 560
    base_particles: int = 650
    max_ripples: int = 600
    max_lines: int = 200
    ripple_radius: float = 80.0
    ripple_strength: float = 0.6
    line_len_min: float = 90.0
    line_len_max: float = 220.0
    line_tint_jitter: float = 0.05
    particle_tint_jitter: float = 0.12
    particle_seed_range: float = 1000.0
    frame_ms: float = 1000.0 / 60.0

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError("SimConfig: width/height must be > 0")
        if self.base_particles < 0:
            raise ValueError("SimConfig: base_particles must be >= 0")
        if self.max_ripples < 1 or self.max_lines < 1:
            raise ValueError("SimConfig: max_ripples/max_lines must be >= 1")
        if self.ripple_radius <= 0 or self.ripple_strength <= 0:
            raise ValueError("SimConfig: ripple_radius/ripple_strength must be > 0")
        if self.line_len_min > self.line_len_max:
            raise ValueError("SimConfig: line_len_min must be <= line_len_max")
        if self.frame_ms <= 0:
            raise ValueError("SimConfig: frame_ms must be > 0")


SIM_KEYS = [f.name for f in fields(SimConfig)]
SIM_DEFAULTS: dict[str, object] = {f.name: f.default for f in fields(SimConfig)}
