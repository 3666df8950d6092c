# vaporsnakes/photon.py
import math
import random

import config
from blueprints import ATOM_BLUEPRINTS
from vaporsnakes.render import GlowCircle, hsl_color


class Photon:
    def __init__(self, x, y, hue, category):
        blueprint = ATOM_BLUEPRINTS[category]
        self.x = x
        self.y = y
        angle = random.random() * 2 * math.pi
        speed = config.PHOTON_SPEED * blueprint["photon_speed_factor"]
        self.vx = math.cos(angle) * speed
        self.vy = math.sin(angle) * speed
        self.hue = hue
        self.life = 0
        self.max_life = config.PHOTON_MAX_LIFE
        self.size = blueprint["photon_size"]
        self.category = category

    def update(self, world):
        """
        Moves the photon one frame. Returns False once it has outlived
        max_life or left the canvas, meaning it should be removed.
        """
        # Portals are checked before moving
        for portal in world.portals:
            if math.hypot(self.x - portal.x, self.y - portal.y) < portal.radius:
                partner = world.partner_of(portal)
                self.x = partner.x + (random.random() - 0.5) * config.PORTAL_JITTER
                self.y = partner.y + (random.random() - 0.5) * config.PORTAL_JITTER

        self.x += self.vx
        self.y += self.vy
        self.vy += config.GRAVITY
        self.life += 1
        return self.life <= self.max_life and world.in_bounds(self.x, self.y)

    def draw(self):
        return [GlowCircle((self.x, self.y), self.size, hsl_color(self.hue), 1.0, config.PHOTON_GLOW)]
