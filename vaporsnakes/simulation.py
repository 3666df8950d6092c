# vaporsnakes/simulation.py
import logging
import random

import config
from vaporsnakes.atom import Atom
from vaporsnakes.creatures.snake import Snake
from vaporsnakes.portal import Portal
from vaporsnakes.render import Fill, Grid
from vaporsnakes.world import World

logger = logging.getLogger(__name__)


class Simulation:
    """
    Owns the world and advances it one frame per tick.

    Knows nothing about windows or event queues: the caller supplies a
    timestamp and gets back the render commands for that frame.
    """

    def __init__(self, width, height, populate=True):
        self.world = World(width, height)
        self.tick_counter = 0
        if populate:
            self.populate()

    def populate(self):
        width, height = self.world.width, self.world.height
        self.spawn_atoms(config.NUM_ATOMS)
        for _ in range(config.NUM_SNAKES):
            self.world.add_snake(Snake(random.random() * width, random.random() * height))
        for _ in range(config.NUM_PORTALS):
            self.world.add_portal(Portal(random.random() * width, random.random() * height))
        self.world.link_portals()
        logger.info("World populated: %d atoms, %d snakes, %d portals on a %dx%d canvas",
                    len(self.world.atoms), len(self.world.snakes), len(self.world.portals), width, height)

    def spawn_atoms(self, amount=1):
        for _ in range(amount):
            x, y = random.random() * self.world.width, random.random() * self.world.height
            self.world.add_atom(Atom(self.world.next_id(), x, y))

    def spawn_snake_at(self, x, y):
        snake = Snake(x, y)
        self.world.add_snake(snake)
        logger.info("Snake spawned at (%d, %d), %d snakes alive", x, y, len(self.world.snakes))
        return snake

    def resize(self, width, height):
        self.world.resize(width, height)
        logger.info("Canvas resized to %dx%d", self.world.width, self.world.height)

    def tick(self, now):
        """Advances the world one frame at time `now` (ms) and returns its render commands."""
        world = self.world
        commands = [Fill(config.COLOR_BG), Grid(config.GRID_SPACING, config.GRID_COLOR, config.GRID_LINE_WIDTH)]

        for hole in world.black_holes:
            hole.update(world)
            commands.extend(hole.draw())

        for atom in world.atoms:
            commands.extend(atom.draw(now))

        for snake in world.snakes:
            snake.update(world, now)
            commands.extend(snake.draw())

        expired = set()
        for photon in world.photons:
            if photon.update(world):
                commands.extend(photon.draw())
            else:
                expired.add(photon)
        world.remove_photons(expired)

        for portal in world.portals:
            commands.extend(portal.draw())

        world.prune_atoms()
        self.tick_counter += 1
        return commands
