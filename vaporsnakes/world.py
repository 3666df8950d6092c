# vaporsnakes/world.py
import itertools
import logging

from vaporsnakes.atom import AtomState

logger = logging.getLogger(__name__)


class World:
    """Holds every live entity of the simulation in named collections."""

    def __init__(self, width, height):
        self.width = width
        self.height = height
        self.atoms = []
        self.snakes = []
        self.photons = []
        self.black_holes = []
        self.portals = []
        self._ids = itertools.count(1)

    def next_id(self):
        return next(self._ids)

    def add_atom(self, atom):
        self.atoms.append(atom)

    def add_snake(self, snake):
        self.snakes.append(snake)

    def add_photon(self, photon):
        self.photons.append(photon)

    def add_black_hole(self, black_hole):
        self.black_holes.append(black_hole)

    def add_portal(self, portal):
        self.portals.append(portal)

    def link_portals(self):
        """Closes the portals into a ring: portal i leads to portal i + 1."""
        count = len(self.portals)
        for i, portal in enumerate(self.portals):
            portal.partner = (i + 1) % count

    def partner_of(self, portal):
        return self.portals[portal.partner]

    def find_atom(self, atom_id):
        if atom_id is None:
            return None
        for atom in self.atoms:
            if atom.id == atom_id:
                return atom
        return None

    def alive_atoms(self):
        return [atom for atom in self.atoms if atom.state is AtomState.ALIVE]

    def in_bounds(self, x, y):
        return 0 <= x <= self.width and 0 <= y <= self.height

    def resize(self, width, height):
        """Changes the canvas size, never below 1x1. Entities keep their coordinates."""
        self.width = max(1, width)
        self.height = max(1, height)

    def remove_photons(self, expired):
        """Drops every photon in `expired` in one pass, keeping the order of the rest."""
        if expired:
            self.photons = [p for p in self.photons if p not in expired]

    def prune_atoms(self):
        before = len(self.atoms)
        self.atoms = [a for a in self.atoms if a.state is not AtomState.GONE]
        removed = before - len(self.atoms)
        if removed:
            logger.debug("Pruned %d faded atoms", removed)
        return removed
