"""
constants.py: Centralized configuration for the game world, physics and rendering.
"""

# -------- Time Config --------
TICK_RATE = 60                  # Simulation ticks per second
TICK_TIME = 1.0 / TICK_RATE     # Fixed time step (seconds)
RENDER_FPS = 60                 # Display refresh cap
MAX_STEPS_PER_FRAME = 5         # Ticks caught up per frame before dropping time

# -------- Game World Config --------
SCREEN_WIDTH = 400
SCREEN_HEIGHT = 600
GROUND_HEIGHT = 50
BIRD_X = 150                    # Fixed bird X position
BIRD_START_Y = 300
BIRD_RADIUS = 20                # For collision detection

# -------- Pipe Config --------
PIPE_WIDTH = 80
PIPE_GAP = 200
PIPE_MIN_HEIGHT = 50            # Smallest visible top/bottom segment
PIPE_SPEED = 3.0                # Horizontal speed (pixels/tick)
PIPE_SPAWN_INTERVAL_MS = 1500   # Wall-clock spawn cadence

# -------- Physics Config (Pixels / Tick) --------
GRAVITY = 0.5                   # Added to velocity every tick
JUMP_VELOCITY = -10.0           # Instantaneous velocity set by a flap

# -------- Render Config --------
SKY_TOP_COLOR = (0x87, 0xCE, 0xEB)
SKY_BOTTOM_COLOR = (0x98, 0xD8, 0xE8)
GROUND_COLOR = (0x8B, 0x45, 0x13)
GRASS_COLOR = (0x2E, 0x8B, 0x57)
GRASS_HEIGHT = 10
PIPE_COLOR = (0x22, 0x8B, 0x22)
PIPE_CAP_COLOR = (0x32, 0xCD, 0x32)
PIPE_CAP_HEIGHT = 20
PIPE_CAP_OVERHANG = 5
BIRD_BODY_COLOR = (0xFF, 0xD7, 0x00)
BIRD_BEAK_COLOR = (0xFF, 0x8C, 0x00)
BIRD_WING_COLOR = (0xFF, 0xA5, 0x00)
BIRD_EYE_COLOR = (0, 0, 0)
MAX_BIRD_TILT = 0.5             # Radians
BIRD_TILT_PER_VELOCITY = 0.1

# -------- Audio Config --------
AUDIO_SAMPLE_RATE = 44100
