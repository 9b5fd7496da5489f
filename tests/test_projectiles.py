import math

import pygame
import pytest

from arenashooter.projectiles import CapBullet, CirBullet, Projectile


def _distance(a, b):
    return math.hypot(a[0] - b[0], a[1] - b[1])


def test_projectile_is_abstract():
    with pytest.raises(TypeError):
        Projectile()


def test_cir_bullet_velocity_is_unit():
    bullet = CirBullet((0.0, 0.0), (3.0, -9.0))
    assert math.hypot(*bullet.velocity) == pytest.approx(1.0)


def test_cir_bullet_travels_speed_times_time():
    bullet = CirBullet((100.0, 100.0), (1.0, 1.0))
    bullet.update(0.1)
    assert _distance(bullet.position, (100.0, 100.0)) == pytest.approx(bullet.speed * 0.1)


def test_cir_bullet_updates_are_additive():
    a = CirBullet((10.0, 20.0), (2.0, 5.0))
    b = CirBullet((10.0, 20.0), (2.0, 5.0))
    a.update(0.5)
    b.update(0.25)
    b.update(0.25)
    assert a.position == pytest.approx(b.position)


def test_cir_bullet_zero_direction_stays_put():
    bullet = CirBullet((50.0, 60.0), (0.0, 0.0))
    bullet.update(1.0)
    assert bullet.position == (50.0, 60.0)


def test_cir_bullet_bounds_centered_on_position():
    bullet = CirBullet((30.0, 40.0), (1.0, 0.0))
    b = bullet.bounds
    assert b.center == pytest.approx((30.0, 40.0))
    assert b.width == pytest.approx(2 * bullet.radius)


def test_cir_bullet_off_screen():
    assert CirBullet((-100.0, -100.0), (1.0, 0.0)).is_off_screen(1280, 720) is True
    assert CirBullet((640.0, 360.0), (1.0, 0.0)).is_off_screen(1280, 720) is False


def test_cir_bullet_leaves_screen_after_flight():
    bullet = CirBullet((640.0, 360.0), (1.0, 0.0))
    bullet.update(2.0)
    assert bullet.is_off_screen(1280, 720) is True


def test_cir_bullet_draw_paints_red():
    surface = pygame.Surface((100, 100))
    CirBullet((50.0, 50.0), (1.0, 0.0)).draw(surface)
    assert surface.get_at((50, 50)) == (255, 0, 0, 255)


def test_cap_bullet_head_ahead_of_body():
    bullet = CapBullet((200.0, 200.0), (0.0, 4.0))
    assert _distance(bullet.head_position, bullet.position) == pytest.approx(bullet.length / 2)
    assert bullet.head_position[1] > bullet.position[1]


def test_cap_bullet_moves_head_and_body_together():
    bullet = CapBullet((200.0, 200.0), (1.0, 2.0))
    gap_before = _distance(bullet.head_position, bullet.position)
    bullet.update(0.3)
    assert _distance(bullet.position, (200.0, 200.0)) == pytest.approx(bullet.speed * 0.3)
    assert _distance(bullet.head_position, bullet.position) == pytest.approx(gap_before)


def test_cap_bullet_bounds_horizontal():
    bullet = CapBullet((0.0, 0.0), (1.0, 0.0))
    b = bullet.bounds
    assert b.width == pytest.approx(35.0, abs=1e-3)
    assert b.height == pytest.approx(bullet.width, abs=1e-3)


def test_cap_bullet_bounds_contain_head():
    bullet = CapBullet((300.0, 300.0), (-1.0, 3.0))
    b = bullet.bounds
    hx, hy = bullet.head_position
    assert b.left <= hx - bullet.head_radius + 1e-9
    assert b.right >= hx + bullet.head_radius - 1e-9
    assert b.top <= hy - bullet.head_radius + 1e-9
    assert b.bottom >= hy + bullet.head_radius - 1e-9


def test_cap_bullet_off_screen():
    assert CapBullet((-200.0, 360.0), (-1.0, 0.0)).is_off_screen(1280, 720) is True
    assert CapBullet((640.0, 360.0), (1.0, 0.0)).is_off_screen(1280, 720) is False


def test_cap_bullet_draw_paints_yellow():
    surface = pygame.Surface((100, 100))
    CapBullet((50.0, 50.0), (1.0, 0.0)).draw(surface)
    assert surface.get_at((50, 50)) == (255, 255, 0, 255)


def test_cap_bullet_hits_harder_than_cir_bullet():
    cap = CapBullet((0.0, 0.0), (1.0, 0.0))
    cir = CirBullet((0.0, 0.0), (1.0, 0.0))
    assert cap.damage > cir.damage