# vaporsnakes/atom.py
import logging
import random
from enum import Enum

import config
from blueprints import ATOM_BLUEPRINTS
from vaporsnakes.black_hole import BlackHole
from vaporsnakes.photon import Photon
from vaporsnakes.render import GlowCircle, hsl_color

logger = logging.getLogger(__name__)


class AtomState(Enum):
    ALIVE = 0
    DISINTEGRATING = 1
    GONE = 2


class Atom:
    def __init__(self, atom_id, x, y, category=None, hue=None):
        self.id = atom_id
        self.x = x
        self.y = y
        self.state = AtomState.ALIVE
        self.start_time = 0
        self.hue = hue if hue is not None else config.ATOM_HUE_MIN + random.random() * config.ATOM_HUE_RANGE
        self.radius = config.ATOM_RADIUS
        if category is None:
            category = "special" if random.random() < config.SPECIAL_ATOM_CHANCE else "normal"
        self.category = category

    def is_alive(self):
        return self.state is AtomState.ALIVE

    def disintegrate(self, world, now):
        """Starts the fade-out and releases this atom's photons (and black hole) into the world."""
        blueprint = ATOM_BLUEPRINTS[self.category]
        self.start_time = now
        self.state = AtomState.DISINTEGRATING
        for _ in range(blueprint["photon_count"]):
            world.add_photon(Photon(self.x, self.y, self.hue, self.category))
        if blueprint["spawns_black_hole"]:
            world.add_black_hole(BlackHole(self.x, self.y))
            logger.debug("Atom %d spawned a black hole at (%.0f, %.0f)", self.id, self.x, self.y)
        logger.debug("Atom %d (%s) disintegrated", self.id, self.category)

    def draw(self, now):
        """Returns the render commands for this atom at time `now` (ms)."""
        if self.state is AtomState.ALIVE:
            return [GlowCircle((self.x, self.y), self.radius, hsl_color(self.hue), 1.0, config.ATOM_GLOW)]
        if self.state is AtomState.DISINTEGRATING:
            progress = (now - self.start_time) / config.DISAPPEAR_TIME
            if progress > 1:
                self.state = AtomState.GONE
                return []
            fade = 1 - progress
            return [GlowCircle((self.x, self.y), self.radius * fade, hsl_color(self.hue), fade,
                               config.ATOM_GLOW * fade)]
        return []
