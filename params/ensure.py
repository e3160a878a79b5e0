from __future__ import annotations
from typing import Dict, Any, List, Optional

from .registry import PARAMS, MOOD_KEYS, SIM_DEFAULTS, SIM_KEYS, SimConfig


def defaults_for(keys: Optional[List[str]] = None) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for k in (keys if keys is not None else MOOD_KEYS):
        if k in PARAMS:
            out[k] = PARAMS[k].get("default")
    return out

def _clamp_param(k: str, v: Any) -> Any:
    spec = PARAMS[k]
    try:
        v = float(v)
    except (TypeError, ValueError):
        return spec.get("default")
    lo = spec.get("min")
    hi = spec.get("max")
    if lo is not None and v < lo:
        v = lo
    if hi is not None and v > hi:
        v = hi
    return v

def ensure_params(params: Dict[str, Any] | None, keys: Optional[List[str]] = None) -> Dict[str, Any]:
    """Return a params dict with defaults for missing keys and every known value in range."""
    params = dict(params or {})
    for k in (keys if keys is not None else MOOD_KEYS):
        if k not in PARAMS:
            continue
        if k not in params:
            params[k] = PARAMS[k].get("default")
        else:
            params[k] = _clamp_param(k, params[k])
    return params

def sim_config_from(overrides: Dict[str, Any] | None = None) -> SimConfig:
    """Build a validated SimConfig; unknown keys raise ValueError."""
    overrides = dict(overrides or {})
    unknown = sorted(set(overrides) - set(SIM_KEYS))
    if unknown:
        raise ValueError(f"unknown sim config keys: {', '.join(unknown)}")
    merged = dict(SIM_DEFAULTS)
    merged.update(overrides)
    return SimConfig(**merged)
