"""Projectiles fired by the player."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

import pygame

from arenashooter.geometry import Rect, Vector, normalized, rotated_rect_bounds

RED = (255, 0, 0)
YELLOW = (255, 255, 0)


class Projectile(ABC):
    """A moving shot with a damage value and a bounding box."""

    damage: int = 0
    speed: float = 800.0

    @abstractmethod
    def update(self, delta_time: float) -> None:
        """Advance the projectile by ``delta_time`` seconds."""

    @abstractmethod
    def draw(self, surface: pygame.Surface) -> None:
        """Draw the projectile on ``surface``."""

    @property
    @abstractmethod
    def bounds(self) -> Rect:
        """Axis-aligned bounding box of the projectile."""

    def is_off_screen(self, width: float, height: float) -> bool:
        """Return True once the projectile has left a width x height screen."""
        return self.bounds.outside(width, height)


class CirBullet(Projectile):
    """A small round bullet."""

    damage = 20
    speed = 800.0
    radius = 8.0
    color = RED

    def __init__(self, start_pos: Vector, direction: Vector) -> None:
        self.position: Vector = (float(start_pos[0]), float(start_pos[1]))
        self.velocity: Vector = normalized(direction)

    def update(self, delta_time: float) -> None:
        step = self.speed * delta_time
        self.position = (
            self.position[0] + self.velocity[0] * step,
            self.position[1] + self.velocity[1] * step,
        )

    def draw(self, surface: pygame.Surface) -> None:
        pygame.draw.circle(surface, self.color, self.position, self.radius)

    @property
    def bounds(self) -> Rect:
        x, y = self.position
        r = self.radius
        return Rect(x - r, y - r, 2 * r, 2 * r)


class CapBullet(Projectile):
    """A capsule-shaped bullet: a rotated bar with a round head in front."""

    damage = 30
    speed = 800.0
    length = 30.0
    width = 10.0
    color = YELLOW

    def __init__(self, start_pos: Vector, direction: Vector) -> None:
        self.velocity: Vector = normalized(direction)
        self.position: Vector = (float(start_pos[0]), float(start_pos[1]))
        self.angle = math.atan2(direction[1], direction[0]) * 180.0 / 3.14159
        half = self.length / 2
        self.head_position: Vector = (
            self.position[0] + self.velocity[0] * half,
            self.position[1] + self.velocity[1] * half,
        )

    @property
    def head_radius(self) -> float:
        return self.width / 2

    def update(self, delta_time: float) -> None:
        dx = self.velocity[0] * self.speed * delta_time
        dy = self.velocity[1] * self.speed * delta_time
        self.position = (self.position[0] + dx, self.position[1] + dy)
        self.head_position = (self.head_position[0] + dx, self.head_position[1] + dy)

    def _body_corners(self) -> list[Vector]:
        cx, cy = self.position
        angle = math.radians(self.angle)
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        half_l, half_w = self.length / 2, self.width / 2
        return [
            (cx + dx * cos_a - dy * sin_a, cy + dx * sin_a + dy * cos_a)
            for dx, dy in ((-half_l, -half_w), (half_l, -half_w), (half_l, half_w), (-half_l, half_w))
        ]

    def draw(self, surface: pygame.Surface) -> None:
        pygame.draw.polygon(surface, self.color, self._body_corners())
        pygame.draw.circle(surface, self.color, self.head_position, self.head_radius)

    @property
    def bounds(self) -> Rect:
        body = rotated_rect_bounds(self.position, self.length, self.width, self.angle)
        hx, hy = self.head_position
        r = self.head_radius
        return body.union(Rect(hx - r, hy - r, 2 * r, 2 * r))