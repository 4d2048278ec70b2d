# host.py
"""
Glue between the engine and whatever shows it: an injected clock and an
injected render sink.
"""
from typing import Callable, Optional, Sequence

from .engine import SnakeEngine
from .grid import Point

Clock = Callable[[], float]
RenderSink = Callable[[Sequence[Point], Optional[Point], int], None]


class ManualClock:
    """Clock for headless runs: time only moves when told to."""

    def __init__(self, start: float = 0.0):
        self.t = start

    def __call__(self) -> float:
        return self.t

    def tick(self, seconds: float) -> float:
        self.t += seconds
        return self.t


class FrameDriver:
    """
    One tick() per host frame: advance the engine to now(), then draw.
    Stops reporting running once the engine is over.
    """

    def __init__(self, engine: SnakeEngine, now: Clock, draw: Optional[RenderSink] = None):
        self.engine = engine
        self.now = now
        self.draw = draw
        self.frames = 0

    def start(self) -> None:
        """Reset the engine and prime its clock with the current time."""
        self.engine.reset()
        self.frames = 0
        self.engine.advance(self.now())

    def tick(self) -> bool:
        running = self.engine.advance(self.now())
        self.frames += 1
        if self.draw is not None:
            self.draw(self.engine.snake, self.engine.food, self.engine.score)
        return running
