# blueprints.py
# This file contains the per-category tables for the atoms in the simulation.
# Everything an atom hands down to its photons and to the snake that ate it
# is looked up here by the atom's category.

ATOM_BLUEPRINTS = {
    "normal": {
        "category": "normal",
        "photon_count": 5,
        "photon_speed_factor": 1.0,
        "photon_size": 3,
        "snake_growth": 5,
        "spawns_black_hole": False,
    },
    "special": {
        "category": "special",
        "photon_count": 15,
        "photon_speed_factor": 1.5, # Special photons fly off faster
        "photon_size": 5,
        "snake_growth": 15,
        "spawns_black_hole": True,
    },
}
