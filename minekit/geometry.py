"""Two-dimensional points and the distance measures used by the clustering tools."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A point in the plane."""

    x: float
    y: float

    def distance(self, other: Point) -> float:
        """Euclidean distance to ``other``."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def manhattan_distance(self, other: Point) -> float:
        """Sum of the absolute coordinate differences to ``other``."""
        return abs(self.x - other.x) + abs(self.y - other.y)

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def scale(self, factor: float) -> Point:
        """Return this point with both coordinates multiplied by ``factor``."""
        return Point(self.x * factor, self.y * factor)


SAMPLE_POINTS: tuple[Point, ...] = (
    Point(1.0, 1.0),
    Point(1.0, 8.0),
    Point(2.0, 2.0),
    Point(2.0, 5.0),
    Point(3.0, 1.0),
    Point(4.0, 3.0),
    Point(5.0, 2.0),
    Point(6.0, 1.0),
    Point(6.0, 8.0),
    Point(8.0, 6.0),
)