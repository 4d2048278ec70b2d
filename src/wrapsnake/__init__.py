"""Snake on a wrap-around grid: simulation engine plus pygame and headless hosts."""

from .grid import Grid, Point
from .engine import Phase, SnakeEngine, spawn_food
from .host import FrameDriver, ManualClock

__all__ = ["Grid", "Point", "Phase", "SnakeEngine", "spawn_food", "FrameDriver", "ManualClock"]
