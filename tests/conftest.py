import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import random

import pytest

from vaporsnakes.atom import Atom
from vaporsnakes.world import World


@pytest.fixture(autouse=True)
def seeded_random():
    random.seed(1234)


@pytest.fixture
def world():
    return World(800, 600)


@pytest.fixture
def make_atom(world):
    def _make(x, y, category="normal"):
        atom = Atom(world.next_id(), x, y, category=category)
        world.add_atom(atom)
        return atom
    return _make
