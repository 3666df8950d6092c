# vaporsnakes/portal.py
import config
from vaporsnakes.render import GlowRing, hsl_color


class Portal:
    """A static teleport ring. `partner` is the index of the exit portal in world.portals."""

    def __init__(self, x, y, partner=None):
        self.x = x
        self.y = y
        self.radius = config.PORTAL_RADIUS
        self.partner = partner

    def draw(self):
        return [GlowRing((self.x, self.y), self.radius, config.PORTAL_LINE_WIDTH,
                         hsl_color(config.PORTAL_HUE), config.PORTAL_GLOW)]
