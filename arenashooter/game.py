"""Game state, per-frame logic and the main loop."""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

import pygame

from arenashooter import config
from arenashooter.geometry import Vector, normalized
from arenashooter.npc import NPC
from arenashooter.player import Player
from arenashooter.projectiles import CapBullet, CirBullet, Projectile

BLACK = (0, 0, 0)
GREEN = (0, 255, 0)
SHOT_COOLDOWN_MS = 150
NPC_SPEED_FACTOR = 0.6
FONT_SIZE = 18
FPS_TEXT_POSITION = (10, 5)
WINDOW_TITLE = "Arena Shooter"


class Game:
    """One round: a player, a chasing enemy and the shots in flight."""

    def __init__(
        self,
        width: int = config.SCREEN_WIDTH,
        height: int = config.SCREEN_HEIGHT,
    ) -> None:
        self.width = width
        self.height = height
        self.player = Player()
        self.player_alive = True
        self.npc = NPC((0.0, 0.0))
        self.projectiles: list[Projectile] = []
        self.fps_text = "FPS: "
        self._last_shot_ms = 0.0
        self._next_is_circle = False

    def move_player(self, direction: Vector, delta_time: float) -> None:
        """Move the player along ``direction`` at the configured speed."""
        if direction[0] == 0 and direction[1] == 0:
            return
        dx, dy = normalized(direction)
        step = config.PLAYER_SPEED * delta_time
        self.player.move((dx * step, dy * step))

    def fire(self, target: Vector, now_ms: float) -> Projectile | None:
        """Shoot toward ``target`` if the cooldown has passed.

        Shots alternate between capsule and round bullets. Returns the new
        projectile, or None if nothing was fired.
        """
        if now_ms - self._last_shot_ms <= SHOT_COOLDOWN_MS:
            return None
        px, py = self.player.position
        direction = (target[0] - px, target[1] - py)
        shot: Projectile | None = None
        if self.player_alive:
            shot_type = CirBullet if self._next_is_circle else CapBullet
            shot = shot_type(self.player.position, direction)
            self.projectiles.append(shot)
        self._next_is_circle = not self._next_is_circle
        self._last_shot_ms = now_ms
        return shot

    def update(self, delta_time: float) -> None:
        """Advance the world by ``delta_time`` seconds."""
        if delta_time > 0:
            self.fps_text = f"FPS: {int(1.0 / delta_time)}"

        if not self.player_alive:
            return

        self.player.border_collision(self.width, self.height)

        for projectile in self.projectiles:
            projectile.update(delta_time)

        self.npc.update(
            delta_time, self.player.position, config.PLAYER_SPEED * NPC_SPEED_FACTOR
        )

        remaining: list[Projectile] = []
        for projectile in self.projectiles:
            if self.npc.alive and self.npc.bounds.intersects(projectile.bounds):
                self.npc.kill()
            elif projectile.is_off_screen(self.width, self.height):
                pass
            else:
                remaining.append(projectile)
        self.projectiles = remaining

        if self.npc.alive and self.npc.bounds.intersects(self.player.bounds):
            self.player_alive = False
            self.projectiles.clear()

    def render(self, surface: pygame.Surface, font: pygame.font.Font | None) -> None:
        """Draw the current frame onto ``surface``."""
        surface.fill(BLACK)
        if self.player_alive:
            self.player.draw(surface)
        for projectile in self.projectiles:
            projectile.draw(surface)
        self.npc.draw(surface)
        if font is not None:
            surface.blit(font.render(self.fps_text, True, GREEN), FPS_TEXT_POSITION)

    def run(self) -> None:
        """Open a window and play until it is closed."""
        pygame.init()
        try:
            screen = self._open_window()
            font = self._load_font()
            clock = pygame.time.Clock()
            start = time.perf_counter()
            last = start
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                if not running:
                    break

                now = time.perf_counter()
                delta_time = min(now - last, config.MAX_DELTA_TIME)
                last = now

                self._handle_input(delta_time, (now - start) * 1000.0)
                self.update(delta_time)
                self.render(screen, font)
                pygame.display.flip()

                if config.FRAMERATE_LIMIT_ENABLED:
                    clock.tick(config.MAX_FPS)
        finally:
            pygame.quit()

    def _open_window(self) -> pygame.Surface:
        pygame.display.set_caption(WINDOW_TITLE)
        size = (self.width, self.height)
        if config.VSYNC_ENABLED:
            try:
                return pygame.display.set_mode(size, pygame.SCALED, vsync=1)
            except pygame.error:
                pass
        return pygame.display.set_mode(size)

    @staticmethod
    def _load_font() -> pygame.font.Font | None:
        font_path = Path.cwd().parent / "text" / "OpenSans-Regular.ttf"
        try:
            return pygame.font.Font(str(font_path), FONT_SIZE)
        except (OSError, FileNotFoundError, pygame.error):
            print(f"Failed to load font from: {font_path}", file=sys.stderr)
            return None

    def _handle_input(self, delta_time: float, now_ms: float) -> None:
        keys = pygame.key.get_pressed()
        dx = float(keys[pygame.K_d]) - float(keys[pygame.K_a])
        dy = float(keys[pygame.K_s]) - float(keys[pygame.K_w])
        self.move_player((dx, dy), delta_time)

        if pygame.mouse.get_pressed()[0]:
            mx, my = pygame.mouse.get_pos()
            self.fire((float(mx), float(my)), now_ms)


def main(argv: list[str] | None = None) -> int:
    """Start the game."""
    parser = argparse.ArgumentParser(
        prog="arenashooter", description="Dodge the chaser and shoot it down."
    )
    parser.parse_args(argv)
    Game().run()
    return 0


if __name__ == "__main__":
    sys.exit(main())