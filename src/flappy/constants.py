"""
constants.py: Centralized configuration for the play field, physics and rendering.
"""

# -------- Play Field Config --------
FIELD_WIDTH = 600
FIELD_HEIGHT = 600
BIRD_SIZE = 40                  # Bird is a BIRD_SIZE x BIRD_SIZE box
BIRD_START_Y = 250              # Top edge of the bird after a reset
BIRD_RENDER_X = 50              # Fixed bird X position on screen

# -------- Pipe Config --------
PIPE_WIDTH = 50
PIPE_GAP = 200
PIPE_SPACING = 300              # Horizontal distance between freshly generated pipes
PIPE_COUNT = 3                  # Pipes kept alive during play

# -------- Physics Config (pixels / tick) --------
# Fixed per-tick increments, tuned for a 60 Hz frame driver
GRAVITY = 2.5
JUMP_STRENGTH = 75
SCROLL_SPEED = 5

# -------- Time & Render Config --------
TICK_RATE = 60                  # Simulation ticks per second
TICK_TIME = 1.0 / TICK_RATE     # Fixed time step
RENDER_FPS = 60
MAX_TICKS_PER_FRAME = 5         # Catch-up cap after a stalled frame

SKY_COLOR = (135, 206, 235)
BIRD_COLOR = (255, 255, 0)
PIPE_COLOR = (0, 128, 0)
TEXT_COLOR = (0, 0, 0)
GAME_OVER_COLOR = (255, 0, 0)
