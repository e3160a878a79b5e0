from __future__ import annotations
"""Headless runner for regression tests.

Runs the simulation without any Qt, producing a stable hash of the draw
commands for a given seed + parameter set + scripted pointer input.

This is the foundation for 'I don't have to manually test every step'.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple
import argparse
import hashlib
import json

from params.ensure import ensure_params, sim_config_from
from preview.preview_engine import Simulation
from preview.sim_clock import SimClock
from runtime.draw_list_v1 import DrawList
from runtime.mood_mapping_v1 import MoodParams

# (frame, kind, x, y) with kind "move" or "down"
PointerEvent = Tuple[int, str, float, float]


def run_headless(
    seed: int = 1,
    frames: int = 60,
    params: Optional[Dict[str, float]] = None,
    events: Iterable[PointerEvent] = (),
    config: Optional[Dict[str, object]] = None,
    ripple_index: str = "linear",
) -> str:
    cfg = sim_config_from(config)
    p = ensure_params(params)
    mood = MoodParams(energy=p["energy"], tension=p["tension"], warmth=p["warmth"])
    sim = Simulation(cfg, seed=seed, ripple_index=ripple_index)
    clock = SimClock(fixed_dt_ms=cfg.frame_ms)

    by_frame: Dict[int, List[PointerEvent]] = {}
    for ev in events:
        by_frame.setdefault(int(ev[0]), []).append(ev)

    h = hashlib.sha256()
    for i in range(int(frames)):
        for _, kind, x, y in by_frame.get(i, []):
            if kind == "move":
                sim.handle_pointer_move(x, y)
            elif kind == "down":
                sim.handle_pointer_down(x, y, mood.warmth)
            else:
                raise ValueError(f"unknown pointer event kind: {kind!r}")
        dl = DrawList(cfg.width, cfg.height)
        sim.tick(clock.step_to(0.0), mood, dl)
        h.update(dl.digest().encode("ascii"))
    return h.hexdigest()


@dataclass
class HeadlessResult:
    sha256: str
    seed: int
    frames: int


def run_and_write(out_json: Path, seed: int = 1, frames: int = 60, **kw) -> HeadlessResult:
    sha = run_headless(seed=seed, frames=frames, **kw)
    res = HeadlessResult(sha256=sha, seed=int(seed), frames=int(frames))
    Path(out_json).write_text(json.dumps(res.__dict__, indent=2), encoding="utf-8")
    return res


def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(description="Run the mood simulation headless and print a draw-list hash.")
    ap.add_argument("--seed", type=int, default=1)
    ap.add_argument("--frames", type=int, default=60)
    ap.add_argument("--energy", type=float, default=None)
    ap.add_argument("--tension", type=float, default=None)
    ap.add_argument("--warmth", type=float, default=None)
    ap.add_argument("--out", type=Path, default=None, help="write result JSON here")
    a = ap.parse_args(argv)
    params = {k: v for k, v in (("energy", a.energy), ("tension", a.tension), ("warmth", a.warmth)) if v is not None}
    if a.out is not None:
        res = run_and_write(a.out, seed=a.seed, frames=a.frames, params=params)
        print(res.sha256)
    else:
        print(run_headless(seed=a.seed, frames=a.frames, params=params))


if __name__ == "__main__":
    main()
