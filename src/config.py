WIDTH = 800
HEIGHT = 800
# Window is kept square: min(display w, h) minus this margin
WINDOW_MARGIN = 40
FPS = 61
# Field of view in degrees; converted to radians when the session starts
FOV_HORIZONTAL = 90
FOV_VERTICAL = 90
# Cube geometry in camera-space units
CUBE_WIDTH = 25.0
CUBE_HEIGHT = 25.0
CUBE_LENGTH = 25.0
# Near-face z at construction; also the reference depth for motion bounds
CUBE_DEPTH = 100.0
MOTION_VECTOR = (1.0, -4.0)
# Milliseconds between automatic bounce steps
TICK_INTERVAL_MS = 5
# Manual nudge distance per key press while paused
NUDGE_STEP = 5.0
# Trailing-edge throttle for resize-driven restarts
RESTART_THROTTLE_MS = 1500
BACKGROUND = (255, 255, 255)
STROKE_COLOR = (0, 0, 0)
TEXT_COLOR = (20, 20, 20)
FONT_SIZE = 20
FACE_COLORS = {
    "front": (255, 0, 0),
    "left": (0, 0, 255),
    "right": (0, 128, 0),
    "top": (128, 0, 128),
    "bottom": (255, 255, 0),
}
