"""Plane geometry: points, vectors and circles."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Vector:
    """A displacement from ``start`` to ``end`` with its components, angle and norm."""

    start: Point = Point()
    end: Point = Point()
    x: float = 0.0
    y: float = 0.0
    angle: float = 0.0
    norm: float = 0.0

    @classmethod
    def from_points(cls, p1: Point, p2: Point) -> Vector:
        x = p2.x - p1.x
        y = p2.y - p1.y
        return cls(p1, p2, x, y, math.atan2(y, x), math.sqrt(x * x + y * y))

    @classmethod
    def polar(cls, origin: Point, norm: float, angle: float) -> Vector:
        """Build a vector of length ``norm`` pointing at ``angle`` from ``origin``."""
        if norm < 0:
            raise ValueError(f"negative vector norm: {norm}")
        x = norm * math.cos(angle)
        y = norm * math.sin(angle)
        stored = math.fmod(angle, math.pi) if not -math.pi <= angle <= math.pi else angle
        return cls(origin, Point(origin.x + x, origin.y + y), x, y, stored, norm)

    def reflect(self, point: Point) -> Vector:
        """Mirror this vector on the tangent of a circle centred at the origin at ``point``."""
        nx, ny = point.x, point.y
        dot = self.x * nx + self.y * ny
        norm2 = nx * nx + ny * ny
        rx = self.x - 2 * dot / norm2 * nx
        ry = self.y - 2 * dot / norm2 * ny
        return Vector.from_points(point, Point(point.x + rx, point.y + ry))


@dataclass(frozen=True)
class Circle:
    center: Point
    radius: float

    def _distance(self, other: Circle) -> float:
        return math.hypot(self.center.x - other.center.x, self.center.y - other.center.y)

    def includes(self, other: Circle, tolerance: float = 0.0) -> bool:
        """True if ``other`` lies strictly inside this circle, less a margin."""
        return self._distance(other) < self.radius - other.radius - tolerance

    def intrudes(self, other: Circle, tolerance: float = 0.0) -> bool:
        """True if the two circles overlap, with an added margin."""
        return self._distance(other) < self.radius + other.radius + tolerance