"""
constants.py: Centralized configuration for the game board, physics and presentation.
"""

# -------- Board Config --------
BOARD_WIDTH = 360
BOARD_HEIGHT = 640

# -------- Bird Config --------
BIRD_WIDTH = 34
BIRD_HEIGHT = 24
BIRD_X = (BOARD_WIDTH - BIRD_WIDTH) / 8     # Fixed bird X position
BIRD_Y = (BOARD_HEIGHT - BIRD_HEIGHT) / 2   # Start / respawn Y position

# -------- Pipe Config --------
PIPE_WIDTH = 64
PIPE_HEIGHT = 512
PIPE_X = BOARD_WIDTH            # Pipes enter at the right edge
PIPE_Y = 0                      # Reference Y for the top pipe
OPENING_SPACE = 85              # Vertical gap between a top and bottom pipe
PIPE_VELOCITY_X = -2.0          # Horizontal speed (pixels/frame)

# -------- Physics Config (Pixels / Frame / Frame) --------
GRAVITY = 0.4                   # Added to vertical velocity every frame
JUMP_VELOCITY = -6.0            # Velocity set by a jump
MAX_FALL_VELOCITY = None        # No terminal velocity unless configured

# -------- Timing Config --------
FPS = 60
PIPE_SPAWN_INTERVAL_MS = 1500   # Wall-clock, independent of frame rate

# -------- Presentation Config --------
WINDOW_TITLE = "Flappy Bird"
BACKGROUND_COLOR = (112, 197, 206)
SCORE_COLOR = (255, 255, 255)
SCORE_FONT_SIZE = 45
SCORE_POS = (5, 45)
GAME_OVER_TEXT = "GAME OVER"
GAME_OVER_POS = (6, 90)

# Sprite file names inside an asset directory
BIRD_IMAGE = "flappybird.gif"
TOP_PIPE_IMAGE = "toppipe.png"
BOTTOM_PIPE_IMAGE = "bottompipe.png"

# Placeholder colours when no asset directory is configured
BIRD_COLOR = (255, 215, 0)
PIPE_COLOR = (0, 150, 0)

# -------- Environment Overrides --------
ENV_LOG_LEVEL = "FLAPPY_LOG_LEVEL"
ENV_SEED = "FLAPPY_SEED"
ENV_ASSETS = "FLAPPY_ASSETS"
