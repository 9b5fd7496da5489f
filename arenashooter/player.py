"""The player-controlled circle."""

from __future__ import annotations

import pygame

from arenashooter import config
from arenashooter.geometry import Rect, Vector

BLUE = (0, 0, 255)


class Player:
    """A circle that the player moves around the screen."""

    radius = config.PLAYER_RADIUS

    def __init__(self, color: tuple[int, int, int] = BLUE, position: Vector | None = None) -> None:
        self.color = color
        self.position: Vector = position if position is not None else self.middle_of_the_screen()

    @staticmethod
    def middle_of_the_screen() -> Vector:
        """Center point of the configured screen."""
        return (config.SCREEN_WIDTH / 2.0, config.SCREEN_HEIGHT / 2.0)

    def move(self, offset: Vector) -> None:
        """Shift the player by ``offset``."""
        self.position = (self.position[0] + offset[0], self.position[1] + offset[1])

    def border_collision(self, width: float, height: float) -> None:
        """Keep the whole circle inside a width x height screen."""
        r = self.radius
        x = min(max(self.position[0], r), float(width) - r)
        y = min(max(self.position[1], r), float(height) - r)
        self.position = (x, y)

    @property
    def bounds(self) -> Rect:
        x, y = self.position
        r = self.radius
        return Rect(x - r, y - r, 2 * r, 2 * r)

    def draw(self, surface: pygame.Surface) -> None:
        pygame.draw.circle(surface, self.color, self.position, self.radius)