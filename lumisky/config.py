"""
Central configuration for the firework simulation, rendering, auto-fire and recipes.

Keep ALL constants here so tuning doesn't require hunting through code.
"""
from pathlib import Path

# Window
WIDTH, HEIGHT = 1280, 720
FPS = 60
TITLE = "LumiSky"

# Rocket physics
# Shared by the launcher's arc math and the engine's per-frame integration.
ROCKET_GRAVITY = 0.15
ROCKET_STROKE_WIDTH = 3

# Apex trigger: explode once the target height is reached while vy is above this.
TRIGGER_VY_TOLERANCE = -2.0

# Targeted launches start within +/- this share of the width around the target x
LAUNCH_SPREAD = 0.25
LAUNCH_MIN_X = 0.10
LAUNCH_MAX_X = 0.90

# Ambient launches
AMBIENT_TARGET_MIN = 0.15
AMBIENT_TARGET_MAX = 0.35
AMBIENT_VY_MIN = -15.0
AMBIENT_VY_MAX = -12.0
AMBIENT_DRIFT = 1.0

# Default burst physics
DEFAULT_FRICTION = 0.95
DEFAULT_GRAVITY = 0.04
DEFAULT_INITIAL_VELOCITY = 6.0
DEFAULT_DECAY = 0.015
DEFAULT_PARTICLE_COUNT = 100
DEFAULT_COLORS = ("#FF0000", "#FFA500", "#FFFF00")

# Steady (non-flicker) particles feel this share of the burst's drag (1 - friction)
STEADY_DRAG_SCALE = 0.8

# Burst size bounds
MIN_PARTICLE_COUNT = 1
MAX_PARTICLE_COUNT = 500

# Rocket trail sparkles
SPARKLE_PROBABILITY = 0.7
SPARKLE_ALPHA = 0.8
SPARKLE_DECAY_MIN = 0.03
SPARKLE_DECAY_MAX = 0.06

# Capacity: oldest particles are evicted beyond this
MAX_LIVE_PARTICLES = 8000

# Rendering
TRAIL_FADE_OPACITY = 0.1
SKY_TOP = (2, 6, 23)
SKY_BOTTOM = (15, 23, 42)
STAR_COUNT = 140
STAR_SIZES = (1, 2)
SHOW_SKY = True
SHOW_HUD = True

# Auto-fire
AUTOFIRE_MIN_MS = 600
AUTOFIRE_MAX_MS = 1400

# AI recipes
RECIPE_MODEL = "gpt-4o-mini"
RECIPE_TEMPERATURE = 0.9

# Logging
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
RUNS_DIR = Path("runs")

# Metrics
REPORTS_DIR = Path("reports")
EXPORT_CSV = True
EXPORT_JSON = True
HEADLESS_FRAMES = 3600
