"""Display, timing and player settings shared by the game."""

SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720
MAX_FPS = 60
VSYNC_ENABLED = True
FRAMERATE_LIMIT_ENABLED = False

MAX_DELTA_TIME = 0.25

PLAYER_SPEED = 500.0
PLAYER_RADIUS = 50.0