from __future__ import annotations

"""
Integrators v1 (engine primitive)

Per-frame position integration for anything with x,y.

Design goals:
- Deterministic given deterministic velocities + initial state
- Minimal allocations
- Toroidal bounds: [0,width) x [0,height)
"""

from typing import Callable, Iterable, List, Protocol, Tuple

Segment = Tuple[float, float, float, float]


class HasPosition(Protocol):
    x: float
    y: float


def wrap_once(v: float, extent: float) -> float:
    """Toroidal correction into [0, extent).

    One step covers normal frames; moves wider than the canvas (stacked
    ripples on a small canvas) fall through to a modulo.
    """
    if v < 0.0:
        v += extent
    if v >= extent:
        v -= extent
    if v < 0.0 or v >= extent:
        v %= extent
        if v >= extent:
            # float modulo of a tiny negative rounds up to extent
            v = 0.0
    return v


def step_entities(
    entities: Iterable[HasPosition],
    velocity: Callable[[HasPosition], Tuple[float, float]],
    width: float,
    height: float,
) -> List[Segment]:
    """In-place step: position += velocity(e), then wrap.

    Returns one (x0, y0, x1, y1) trail segment per entity, pre- to post-wrap.
    """
    segs: List[Segment] = []
    for e in entities:
        x0 = e.x
        y0 = e.y
        vx, vy = velocity(e)
        e.x = wrap_once(x0 + vx, width)
        e.y = wrap_once(y0 + vy, height)
        segs.append((x0, y0, e.x, e.y))
    return segs
