"""Line segments between two points."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from rigsmith.vec3 import Vec3


@dataclass(frozen=True)
class Line:
    """A segment from start to end."""

    start: Vec3 = field(default_factory=Vec3)
    end: Vec3 = field(default_factory=Vec3)

    def length(self) -> float:
        return (self.end - self.start).length()

    def distance_to_point(self, point: Vec3) -> float:
        """Distance from the point to the line through start and end.

        A degenerate segment gives NaN.
        """
        a = (self.end - self.start).length()
        b = (point - self.end).length()
        c = (self.start - point).length()
        p = (a + b + c) / 2.0
        area_squared = p * (p - a) * (p - b) * (p - c)
        if a == 0.0 or area_squared < 0.0:
            return math.nan
        return 2.0 * math.sqrt(area_squared) / a