# config.py

# --- Global Display Settings ---
WINDOW_SIZE = (0, 0) # (0, 0) opens the window at desktop resolution
WINDOW_CAPTION = "Vaporwave Atom Snakes"
FPS = 60
COLOR_BG = (0, 0, 0)

# --- Background Grid ---
GRID_SPACING = 50
GRID_COLOR = (255, 0, 255, 51) # Neon purple at 20%
GRID_LINE_WIDTH = 1

# --- Population ---
NUM_ATOMS = 75
NUM_SNAKES = 5
NUM_PORTALS = 3

# --- Atoms ---
ATOM_RADIUS = 10
ATOM_HUE_MIN = 270  # Purple to pink
ATOM_HUE_RANGE = 60
SPECIAL_ATOM_CHANCE = 0.5
DISAPPEAR_TIME = 1000  # ms
ATOM_GLOW = 20

# --- Photons ---
PHOTON_SPEED = 4
PHOTON_MAX_LIFE = 100
PHOTON_GLOW = 15
GRAVITY = 0.05

# --- Snakes ---
SNAKE_LENGTH = 40
SNAKE_MIN_LENGTH = 10
SNAKE_SHRINK_AMOUNT = 10
SNAKE_SIZE = 6
SNAKE_HUE_MIN = 180  # Blues and cyans
SNAKE_HUE_RANGE = 60
SNAKE_GLOW = 15
SPEED = 2
TURN_RATE = 0.05
WANDER_JITTER = 0.2

# --- Black Holes ---
BLACK_HOLE_MAX_RADIUS = 50
BLACK_HOLE_GROWTH_RATE = 0.5
BLACK_HOLE_PULL = 0.5

# --- Portals ---
PORTAL_RADIUS = 20
PORTAL_HUE = 300
PORTAL_LINE_WIDTH = 5
PORTAL_GLOW = 15
PORTAL_JITTER = 10  # Exit offset so nothing re-enters the portal it just left.

# --- HUD ---
HUD_UPDATE_RATE = 15
HUD_TEXT_COLOR = (200, 200, 200)
HUD_FONT = "Arial"
HUD_FONT_SIZE = 18

# --- Logging ---
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
