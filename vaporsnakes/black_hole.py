# vaporsnakes/black_hole.py
import math

import config
from vaporsnakes.render import RadialGradient


class BlackHole:
    def __init__(self, x, y):
        self.x = x
        self.y = y
        self.radius = 0.0
        self.max_radius = config.BLACK_HOLE_MAX_RADIUS
        self.growth_rate = config.BLACK_HOLE_GROWTH_RATE

    def update(self, world):
        """Grows toward max_radius and pulls on every photon inside the current radius."""
        if self.radius < self.max_radius:
            self.radius = min(self.max_radius, self.radius + self.growth_rate)

        # Constant pull, no falloff with distance
        for photon in world.photons:
            dx = self.x - photon.x
            dy = self.y - photon.y
            if math.hypot(dx, dy) < self.radius:
                angle = math.atan2(dy, dx)
                photon.vx += math.cos(angle) * config.BLACK_HOLE_PULL
                photon.vy += math.sin(angle) * config.BLACK_HOLE_PULL

    def draw(self):
        return [RadialGradient((self.x, self.y), self.radius, (0, 0, 0, 255), (0, 0, 0, 0))]
