"""The enemy square that chases the player."""

from __future__ import annotations

import math

import pygame

from arenashooter.geometry import Rect, Vector

RED = (255, 0, 0)


class NPC:
    """A square enemy that walks straight toward the player until killed."""

    size = 50.0
    color = RED

    def __init__(self, position: Vector) -> None:
        self.position: Vector = (float(position[0]), float(position[1]))
        self.alive = True

    def update(self, delta_time: float, player_pos: Vector, speed: float) -> None:
        """Step toward ``player_pos`` at ``speed`` units per second."""
        if not self.alive:
            return
        dx = player_pos[0] - self.position[0]
        dy = player_pos[1] - self.position[1]
        length = math.hypot(dx, dy)
        if length == 0:
            return
        step = speed * delta_time / length
        self.position = (self.position[0] + dx * step, self.position[1] + dy * step)

    @property
    def bounds(self) -> Rect:
        half = self.size / 2
        return Rect(self.position[0] - half, self.position[1] - half, self.size, self.size)

    def draw(self, surface: pygame.Surface) -> None:
        if self.alive:
            b = self.bounds
            pygame.draw.rect(surface, self.color, pygame.Rect(b.left, b.top, b.width, b.height))

    def kill(self) -> None:
        self.alive = False