# --- Display ---
WIDTH = 375
HEIGHT = 375
FPS = 60

# --- World / Physics ---
# Speeds are milliseconds of elapsed time per unit of motion
PLATFORM_HEIGHT = 100
STRETCH_SPEED = 4.0         # stick length
TURN_SPEED = 4.0            # stick rotation (deg)
WALK_SPEED = 4.0            # hero x
TRANSITION_SPEED = 2.0      # camera offset
FALL_SPEED = 2.0            # hero y
TRANSITION_THRESHOLD = 100  # camera stops once the landed edge is this close to the left border
FALL_MARGIN = 100           # run is over once the hero dropped PLATFORM_HEIGHT + this

# --- Hero ---
HERO_W = 20
HERO_H = 30
HERO_EDGE_OFFSET = 30       # hero stands this far left of a platform's right edge

# --- Stick ---
STICK_WIDTH = 6
STICK_MAX_ROTATION = 180.0

# --- Level generation ---
FIRST_PLATFORM_X = 50.0
FIRST_PLATFORM_W = 50.0
START_PLATFORMS = 5         # first platform + 4 generated
GAP_MIN_W = 40
GAP_MAX_W = 200
PLATFORM_MIN_W = 20
PLATFORM_MAX_W = 100
SEED_DEFAULT = 12345

# --- Colors (RGB) ---
COLOR_BG = (244, 236, 222)
COLOR_FG = (30, 30, 30)
COLOR_PLAT = (0, 0, 0)
COLOR_PLAT_EDGE = (34, 34, 34)
COLOR_HERO = (231, 76, 60)
COLOR_HERO_HEAD = (192, 57, 43)
COLOR_STICK = (0, 0, 0)
COLOR_BUTTON = (40, 60, 90)
COLOR_BUTTON_EDGE = (90, 130, 180)
