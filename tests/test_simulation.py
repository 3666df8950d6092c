import config
from vaporsnakes.atom import Atom, AtomState
from vaporsnakes.black_hole import BlackHole
from vaporsnakes.photon import Photon
from vaporsnakes.render import Fill, GlowCircle, GlowRing, GlowStroke, Grid, RadialGradient
from vaporsnakes.simulation import Simulation


def test_populate_uses_configured_counts():
    sim = Simulation(800, 600)
    world = sim.world
    assert len(world.atoms) == config.NUM_ATOMS
    assert len(world.snakes) == config.NUM_SNAKES
    assert len(world.portals) == config.NUM_PORTALS
    assert world.photons == [] and world.black_holes == []
    assert [p.partner for p in world.portals] == [1, 2, 0]
    for atom in world.atoms:
        assert 0 <= atom.x <= 800 and 0 <= atom.y <= 600


def test_spawn_snake_at_click_point():
    sim = Simulation(800, 600)
    snake = sim.spawn_snake_at(120, 80)
    assert sim.world.snakes[-1] is snake
    assert len(sim.world.snakes) == config.NUM_SNAKES + 1
    assert set(snake.positions) == {(120, 80)}
    assert len(snake.positions) == config.SNAKE_LENGTH


def test_tick_emits_commands_in_frame_order():
    sim = Simulation(800, 600)
    world = sim.world
    world.add_black_hole(BlackHole(50, 50))
    world.add_photon(Photon(400, 300, hue=300, category="normal"))

    commands = sim.tick(now=0)

    assert commands[0] == Fill(config.COLOR_BG)
    assert isinstance(commands[1], Grid)
    kinds = [type(c) for c in commands[2:]]
    assert kinds[0] is RadialGradient
    first_stroke = kinds.index(GlowStroke)
    assert all(k is GlowCircle for k in kinds[1:first_stroke])
    assert kinds[-config.NUM_PORTALS:] == [GlowRing] * config.NUM_PORTALS
    assert kinds.count(GlowStroke) == config.NUM_SNAKES


def test_tick_compacts_expired_photons():
    sim = Simulation(800, 600, populate=False)
    world = sim.world
    doomed = Photon(400, 300, hue=0, category="normal")
    doomed.life = doomed.max_life
    survivor = Photon(400, 300, hue=0, category="normal")
    another = Photon(410, 300, hue=0, category="normal")
    for photon in (doomed, survivor, another):
        photon.vx = photon.vy = 0.0
        world.add_photon(photon)

    commands = sim.tick(now=0)

    assert world.photons == [survivor, another]
    assert survivor.life == 1 and another.life == 1
    assert sum(isinstance(c, GlowCircle) for c in commands) == 2


def test_tick_prunes_faded_atoms():
    sim = Simulation(800, 600, populate=False)
    sim.spawn_atoms(2)
    faded, kept = sim.world.atoms
    faded.disintegrate(sim.world, now=0)

    sim.tick(now=config.DISAPPEAR_TIME + 1)

    assert sim.world.atoms == [kept]


def test_resize_changes_wrap_bounds():
    sim = Simulation(800, 600, populate=False)
    sim.resize(200, 100)
    snake = sim.spawn_snake_at(150, 50)
    for frame in range(200):
        sim.tick(now=frame * 16)
        x, y = snake.head
        assert 0 <= x < 200 and 0 <= y < 100


def test_eaten_atoms_fade_then_disappear():
    sim = Simulation(800, 600, populate=False)
    atom = Atom(sim.world.next_id(), 400, 300, category="normal")
    sim.world.add_atom(atom)
    sim.spawn_snake_at(400, 300)

    sim.tick(now=0)
    assert atom.state is AtomState.DISINTEGRATING
    sim.tick(now=config.DISAPPEAR_TIME + 1)
    assert atom.state is AtomState.GONE
    assert atom not in sim.world.atoms


def test_tick_survives_a_zero_size_window():
    sim = Simulation(800, 600)
    sim.resize(0, 0)

    commands = sim.tick(now=0)

    assert commands[0] == Fill(config.COLOR_BG)
    for snake in sim.world.snakes:
        assert len(snake.positions) >= config.SNAKE_MIN_LENGTH
