"""
constants.py: Baseline tuning numbers for the simulation and the window.
"""

# -------- Frame Driver Config --------
TICK_RATE = 60                  # Nominal ticks per second (one per rendered frame)
DEFAULT_SCREEN_WIDTH = 800
DEFAULT_SCREEN_HEIGHT = 600
MIN_VIEWPORT_SIZE = 160.0       # Smaller surfaces are clamped to this (pixels)

# -------- Scroll & Spawn Config (per tick) --------
BASE_SPEED = 3.0                # Horizontal obstacle speed (pixels/tick)
MAX_SPEED = 7.0
SPEED_INCREMENT = 0.4
BASE_SPAWN_INTERVAL = 90        # Spawn every 90 ticks (1.5 seconds)
MIN_SPAWN_INTERVAL = 45
SPAWN_INTERVAL_DECREMENT = 2
SCORE_STEP = 3                  # Tighten difficulty every N points

# -------- Obstacle Config (fractions of the viewport) --------
SPACING_RATIO = 0.25            # Gap height as a share of viewport height
MIN_SPACING = 120.0
MARGIN_RATIO = 0.1              # Gap kept this far from top and bottom
VARIATION_SPACING_RATIO = 0.4   # Random walk step, bounded by spacing...
VARIATION_HEIGHT_RATIO = 0.15   # ...and by viewport height
OBSTACLE_WIDTH_RATIO = 0.06
OBSTACLE_WIDTH_MAX_RATIO = 0.12
OBSTACLE_WIDTH_CAP = 80.0

# -------- Actor Config --------
ACTOR_X_RATIO = 0.25            # Fixed horizontal offset
ACTOR_SIZE_RATIO = 0.04         # Of the smaller viewport dimension
ACTOR_MIN_SIZE = 25.0

# -------- Physics Config (pixels / tick) --------
GRAVITY_RATIO = 0.0008          # Vertical acceleration per tick, times height
GRAVITY_MIN = 0.3
JUMP_RATIO = 0.012              # Upward impulse, times height
JUMP_MIN = 6.0
TERMINAL_VELOCITY_RATIO = 0.01  # Fall speed cap, times height

# -------- Cosmetic Timers --------
SCORE_PULSE_TICKS = 30
DISPLAY_SCORE_STEP = 0.1
