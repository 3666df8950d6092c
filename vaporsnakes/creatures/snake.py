# vaporsnakes/creatures/snake.py
import math
import random

import config
from blueprints import ATOM_BLUEPRINTS
from vaporsnakes.render import GlowStroke, hsl_color


class Snake:
    def __init__(self, x, y, length=None, angle=None, hue=None):
        self.hue = hue if hue is not None else config.SNAKE_HUE_MIN + random.random() * config.SNAKE_HUE_RANGE
        self.color = hsl_color(self.hue)
        self.snake_length = length if length is not None else config.SNAKE_LENGTH
        # Head first. Every segment starts collapsed onto the spawn point.
        self.positions = [(x, y)] * self.snake_length
        self.angle = angle if angle is not None else random.random() * 2 * math.pi
        self.target_id = None

    @property
    def head(self):
        return self.positions[0]

    def _normalize_angle(self, angle):
        return math.atan2(math.sin(angle), math.cos(angle))

    def _seek(self, world):
        """Returns the alive atom closest to the head, or None. First found wins a tie."""
        head_x, head_y = self.head
        nearest, min_dist = None, float('inf')
        for atom in world.alive_atoms():
            dist = math.hypot(head_x - atom.x, head_y - atom.y)
            if dist < min_dist:
                min_dist, nearest = dist, atom
        return nearest

    def steer(self, world):
        target = world.find_atom(self.target_id)
        if target is None or not target.is_alive():
            target = self._seek(world)
            self.target_id = target.id if target else None

        if target is not None:
            head_x, head_y = self.head
            angle_to_target = math.atan2(target.y - head_y, target.x - head_x)
            self.angle += self._normalize_angle(angle_to_target - self.angle) * config.TURN_RATE
        else:
            self.angle += (random.random() - 0.5) * config.WANDER_JITTER

    def update(self, world, now):
        self.steer(world)

        head_x, head_y = self.head
        new_x = (head_x + math.cos(self.angle) * config.SPEED) % world.width
        new_y = (head_y + math.sin(self.angle) * config.SPEED) % world.height
        half_size = config.SNAKE_SIZE / 2

        for atom in world.atoms:
            if atom.is_alive() and math.hypot(new_x - atom.x, new_y - atom.y) < atom.radius + half_size:
                atom.disintegrate(world, now)
                self.grow(atom.category)
                self.target_id = None

        for hole in world.black_holes:
            if math.hypot(new_x - hole.x, new_y - hole.y) < hole.radius + half_size:
                self.shrink()

        for portal in world.portals:
            if math.hypot(new_x - portal.x, new_y - portal.y) < portal.radius + half_size:
                partner = world.partner_of(portal)
                new_x = partner.x + (random.random() - 0.5) * config.PORTAL_JITTER
                new_y = partner.y + (random.random() - 0.5) * config.PORTAL_JITTER

        self.positions.insert(0, (new_x, new_y))
        del self.positions[self.snake_length:]

    def grow(self, category):
        length_to_add = ATOM_BLUEPRINTS[category]["snake_growth"]
        self.positions.extend([self.positions[-1]] * length_to_add)
        self.snake_length += length_to_add

    def shrink(self):
        """Drops up to SNAKE_SHRINK_AMOUNT tail segments without going under SNAKE_MIN_LENGTH."""
        self.snake_length = max(config.SNAKE_MIN_LENGTH, self.snake_length - config.SNAKE_SHRINK_AMOUNT)
        drop = min(config.SNAKE_SHRINK_AMOUNT, len(self.positions) - config.SNAKE_MIN_LENGTH)
        if drop > 0:
            del self.positions[-drop:]

    def draw(self):
        return [GlowStroke(tuple(self.positions), config.SNAKE_SIZE, self.color, config.SNAKE_GLOW)]
