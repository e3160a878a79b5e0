"""Headless core bridge for Qt.

Owns the Simulation plus the live slider values and exposes the minimal API
expected by qt/qt_app.py. No Qt imports here, so it is testable headless.
"""

from __future__ import annotations

from pathlib import Path
import time
from typing import Any, Dict, Optional

from app.log_buffer import log
from params.ensure import ensure_params, sim_config_from
from params.registry import MOOD_KEYS, PARAMS
from preview.preview_engine import Simulation
from preview.sim_clock import SimClock
from runtime.draw_list_v1 import Surface
from runtime.mood_mapping_v1 import MoodParams

EXPORT_STEM = "mood_expression"


def next_export_path(out_dir: Path, stem: str = EXPORT_STEM, ext: str = "png") -> Path:
    """`stem.ext`, or `stem_N.ext` with the first free N when taken."""
    out_dir = Path(out_dir)
    p = out_dir / f"{stem}.{ext}"
    n = 1
    while p.exists():
        p = out_dir / f"{stem}_{n}.{ext}"
        n += 1
    return p


def readout_text(key: str, value: float) -> str:
    label = PARAMS[key].get("readout", key.title())
    return f"{label}: {value * 100.0:.0f}%"


class CoreBridge:
    def __init__(self, seed: Optional[int] = None, config: Optional[Dict[str, Any]] = None,
                 out_dir: Optional[Path] = None, fixed_dt_ms: Optional[float] = None):
        self.config = sim_config_from(config)
        self.sim = Simulation(self.config, seed=seed)
        self.clock = SimClock(fixed_dt_ms=fixed_dt_ms)
        self.out_dir = Path(out_dir) if out_dir is not None else Path.cwd()
        self._params: Dict[str, float] = ensure_params(None)

    # ---- parameters (UI-owned; the simulation only reads them)
    @property
    def params(self) -> MoodParams:
        p = self._params
        return MoodParams(energy=p["energy"], tension=p["tension"], warmth=p["warmth"])

    def get_param(self, key: str) -> float:
        return float(self._params[key])

    def set_param(self, key: str, value: float) -> None:
        if key not in MOOD_KEYS:
            raise KeyError(f"unknown mood parameter: {key}")
        self._params = ensure_params({**self._params, key: value})

    def readouts(self) -> Dict[str, str]:
        return {k: readout_text(k, self._params[k]) for k in MOOD_KEYS}

    # ---- frame / events
    def tick(self, surface: Surface, wall_t: Optional[float] = None) -> Surface:
        dt_ms = self.clock.step_to(time.monotonic() if wall_t is None else wall_t)
        return self.sim.tick(dt_ms, self.params, surface)

    def pointer_move(self, x: float, y: float) -> bool:
        return self.sim.handle_pointer_move(x, y)

    def pointer_down(self, x: float, y: float) -> bool:
        return self.sim.handle_pointer_down(x, y, self._params["warmth"])

    def reset(self, reseed: bool = True) -> None:
        self.sim.reset(reseed=reseed)
        log(f"system reset (noise_seed={self.sim.noise.seed})")

    def export_target(self) -> Path:
        self.out_dir.mkdir(parents=True, exist_ok=True)
        return next_export_path(self.out_dir)
