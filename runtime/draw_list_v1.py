from __future__ import annotations

"""Draw list v1 (rendering surface contract)

The simulation never owns pixels: it issues stroke commands to a Surface.
DrawList is the recording Surface used by the headless runner and tests;
the Qt host paints the same commands with QPainter.
"""

from dataclasses import dataclass
from typing import List, Protocol, Tuple
import hashlib
import struct

RGBA = Tuple[int, int, int, int]


@dataclass(frozen=True)
class Stroke:
    rgba: RGBA
    weight: float = 1.0


class Surface(Protocol):
    width: int
    height: int

    def background(self, rgba: RGBA) -> None: ...
    def line(self, x1: float, y1: float, x2: float, y2: float, stroke: Stroke) -> None: ...
    def circle(self, cx: float, cy: float, diameter: float, stroke: Stroke) -> None: ...
    def rect(self, x: float, y: float, w: float, h: float, stroke: Stroke, radius: float = 0.0) -> None: ...


class DrawList:
    """Records commands as ("kind", *floats, rgba, weight) tuples."""

    def __init__(self, width: int, height: int):
        self.width = int(width)
        self.height = int(height)
        self.commands: List[tuple] = []

    def background(self, rgba: RGBA) -> None:
        self.commands.append(("background", tuple(rgba)))

    def line(self, x1: float, y1: float, x2: float, y2: float, stroke: Stroke) -> None:
        self.commands.append(("line", x1, y1, x2, y2, stroke.rgba, stroke.weight))

    def circle(self, cx: float, cy: float, diameter: float, stroke: Stroke) -> None:
        self.commands.append(("circle", cx, cy, diameter, stroke.rgba, stroke.weight))

    def rect(self, x: float, y: float, w: float, h: float, stroke: Stroke, radius: float = 0.0) -> None:
        self.commands.append(("rect", x, y, w, h, stroke.rgba, stroke.weight, radius))

    def count(self, kind: str) -> int:
        return sum(1 for c in self.commands if c[0] == kind)

    def digest(self) -> str:
        h = hashlib.sha256()
        for c in self.commands:
            h.update(c[0].encode("ascii"))
            for v in c[1:]:
                if isinstance(v, tuple):
                    h.update(bytes(int(x) & 0xFF for x in v))
                else:
                    h.update(struct.pack("<d", float(v)))
        return h.hexdigest()
