"""Axis-aligned rectangles and small vector helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass

Vector = tuple[float, float]


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def center(self) -> Vector:
        return (self.left + self.width / 2, self.top + self.height / 2)

    def intersects(self, other: Rect) -> bool:
        """Return True if the rectangles overlap; touching edges do not count."""
        left = max(self.left, other.left)
        top = max(self.top, other.top)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        return left < right and top < bottom

    def union(self, other: Rect) -> Rect:
        """Return the smallest rectangle holding both rectangles."""
        left = min(self.left, other.left)
        top = min(self.top, other.top)
        right = max(self.right, other.right)
        bottom = max(self.bottom, other.bottom)
        return Rect(left, top, right - left, bottom - top)

    def outside(self, width: float, height: float) -> bool:
        """Return True if the rectangle lies wholly outside a width x height area."""
        return self.right < 0 or self.left > width or self.bottom < 0 or self.top > height


def normalized(vector: Vector) -> Vector:
    """Return the unit vector along ``vector``, or the zero vector for zero input."""
    x, y = vector
    length = math.hypot(x, y)
    if length == 0:
        return (0.0, 0.0)
    return (x / length, y / length)


def rotated_rect_bounds(
    center: Vector, width: float, height: float, angle_degrees: float
) -> Rect:
    """Bounding box of a width x height rectangle rotated about its center."""
    cx, cy = center
    angle = math.radians(angle_degrees)
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    half_w, half_h = width / 2, height / 2
    xs = []
    ys = []
    for dx, dy in ((-half_w, -half_h), (half_w, -half_h), (half_w, half_h), (-half_w, half_h)):
        xs.append(cx + dx * cos_a - dy * sin_a)
        ys.append(cy + dx * sin_a + dy * cos_a)
    return Rect(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))