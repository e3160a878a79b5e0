from __future__ import annotations
"""Frame clock.

Turns incoming wall timestamps (seconds) into per-tick deltas in milliseconds.
In fixed mode every tick advances exactly `fixed_dt_ms`, which makes headless
runs reproducible; in realtime mode the delta follows the wall clock.
"""

from typing import Optional

MAX_JUMP_MS = 500.0


class SimClock:
    def __init__(self, fixed_dt_ms: Optional[float] = None):
        self.fixed_dt_ms = None if fixed_dt_ms is None else float(fixed_dt_ms)
        self.sim_ms = 0.0
        self._last_t = None

    def reset(self):
        self.sim_ms = 0.0
        self._last_t = None

    def step_to(self, t: float) -> float:
        """Advance toward wall timestamp t. Returns the delta (ms) for this tick."""
        if self.fixed_dt_ms is not None:
            self.sim_ms += self.fixed_dt_ms
            return self.fixed_dt_ms
        t = float(t)
        if self._last_t is None or t < self._last_t:
            # first tick, or time went backwards
            self._last_t = t
            return 0.0
        dt_ms = (t - self._last_t) * 1000.0
        self._last_t = t
        if dt_ms > MAX_JUMP_MS:
            # clamp huge jumps (window drag, breakpoint) to avoid a flow-field lurch
            dt_ms = MAX_JUMP_MS
        self.sim_ms += dt_ms
        return dt_ms
