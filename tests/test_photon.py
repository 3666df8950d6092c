import math

import pytest

import config
from vaporsnakes.photon import Photon
from vaporsnakes.portal import Portal


def still_photon(x, y, category="normal"):
    photon = Photon(x, y, hue=300, category=category)
    photon.vx = 0.0
    photon.vy = 0.0
    return photon


@pytest.mark.parametrize("category, speed", [("normal", 4.0), ("special", 6.0)])
def test_initial_speed_depends_on_category(category, speed):
    photon = Photon(0, 0, hue=300, category=category)
    assert math.hypot(photon.vx, photon.vy) == pytest.approx(speed)


@pytest.mark.parametrize("category, size", [("normal", 3), ("special", 5)])
def test_size_depends_on_category(category, size):
    assert Photon(0, 0, hue=300, category=category).size == size


def test_update_integrates_position_then_gravity(world):
    photon = still_photon(100, 100)
    photon.vx, photon.vy = 1.0, 2.0

    assert photon.update(world) is True
    assert (photon.x, photon.y) == (101.0, 102.0)
    assert photon.vy == pytest.approx(2.0 + config.GRAVITY)
    assert photon.life == 1


def test_photon_expires_once_life_exceeds_cap(world):
    photon = still_photon(400, 100)
    photon.life = photon.max_life - 1

    assert photon.update(world) is True
    assert photon.life == photon.max_life
    assert photon.update(world) is False


def test_life_never_decreases(world):
    photon = still_photon(400, 100)
    lives = []
    for _ in range(20):
        photon.update(world)
        lives.append(photon.life)
    assert lives == sorted(lives)


@pytest.mark.parametrize("x, y, vx, vy", [
    (799.5, 300, 1.0, 0.0),
    (0.5, 300, -1.0, 0.0),
    (400, 0.5, 0.0, -1.0),
    (400, 599.5, 0.0, 1.0),
])
def test_photon_expires_when_leaving_canvas(world, x, y, vx, vy):
    photon = still_photon(x, y)
    photon.vx, photon.vy = vx, vy
    assert photon.update(world) is False


def test_photon_is_teleported_to_partner_portal(world):
    world.add_portal(Portal(500, 400))
    world.add_portal(Portal(700, 50))
    world.add_portal(Portal(100, 100))
    world.link_portals()
    photon = still_photon(105, 100)

    photon.update(world)

    half_jitter = config.PORTAL_JITTER / 2
    assert abs(photon.x - 500) <= half_jitter
    assert abs(photon.y - 400) <= half_jitter


def test_draw_is_repeatable():
    photon = still_photon(10, 10)
    [command] = photon.draw()
    assert command.center == (10, 10)
    assert command.radius == 3
    assert photon.draw() == [command]
