from __future__ import annotations
import sys, platform, json
from pathlib import Path
from typing import Any, Dict, Optional

ROOT = Path(__file__).resolve().parents[1]

_sim_stats = None  # callable returning a dict, registered by the host

def register_sim(stats_fn) -> None:
    global _sim_stats
    _sim_stats = stats_fn

def gather() -> dict:
    sim: Optional[Dict[str, Any]] = None
    if _sim_stats is not None:
        sim = dict(_sim_stats())
    return {
        "python": sys.version.split()[0],
        "platform": platform.platform(),
        "project_root": str(ROOT),
        "simulation": sim,
    }

def as_text() -> str:
    return json.dumps(gather(), indent=2, default=str)
