# config.py
from dataclasses import dataclass
from typing import Optional

# ----- Window & grid -----
WIDTH, HEIGHT = 600, 400
CELL_SIZE = 20

# ----- Colors -----
BG    = (211, 211, 211)   # lightgray
BLACK = (0, 0, 0)
HEAD  = (40, 40, 40)
GREEN = (0, 128, 0)
TEXT  = (20, 20, 24)
SHADE = (0, 0, 0, 140)    # game-over dimming, RGBA
FAINT = (230, 230, 240)

# ----- Directions (dx, dy) in cells per step -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

# ----- Tunables (what you'd tweak for difficulty) -----
@dataclass(frozen=True)
class Config:
    seed: Optional[int] = None
    initial_length: int = 5
    base_speed: float = 80.0        # px/s, one 20px cell every 250 ms
    speed_increment: float = 10.0   # px/s per food
    growth_increment: int = 5       # cells per food
    max_frame_seconds: Optional[float] = 1.0
    fps: int = 60
    debug: bool = False

CFG = Config()
