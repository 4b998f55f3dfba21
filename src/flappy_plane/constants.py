"""
constants.py: Centralized configuration for game, rendering and storage settings.
"""

# -------- Display & Timing Config --------
SCREEN_WIDTH = 400
SCREEN_HEIGHT = 600
GROUND_HEIGHT = 30
RENDER_FPS = 60                 # One simulation step per rendered frame

# -------- Plane Config --------
PLANE_X = 50                    # Fixed plane X position
PLANE_WIDTH = 40
PLANE_HEIGHT = 30

# -------- Pipe Config --------
PIPE_WIDTH = 50
PIPE_GAP = 140                  # Vertical gap size
PIPE_SPEED = 3.0                # Horizontal speed (pixels/frame)
PIPE_SPAWN_INTERVAL = 90        # Frames between pipe spawns
PIPE_MIN_TOP = 50               # Margin above the gap and above the ground

# -------- Physics Config (Pixels / Frame / Frame) --------
GRAVITY = 0.3
JUMP_VELOCITY = -6.0            # Instantaneous velocity set by a jump
TILT_GAIN = 4.0                 # Degrees of tilt per unit of velocity
MIN_TILT = -20.0
MAX_TILT = 45.0

# -------- Storage Config --------
DB_FILE = "flappy_plane.db"
DB_ENV_VAR = "FLAPPY_PLANE_DB"
BEST_SCORE_KEY = "bestscore"
PLAYER_NAME_KEY = "playerName"
DEFAULT_PLAYER_NAME = "Player"
