# engine.py
"""
Simulation engine: snake state, step function, food spawner and the
fixed-timestep pacing controller.

The engine never touches pygame or a wall clock. Hosts feed it timestamps
through advance() and read the accessors to draw.
"""
from __future__ import annotations

from collections import deque
from enum import Enum, auto
from itertools import islice
from typing import Deque, List, Optional, Tuple

import numpy as np  # type: ignore

from .config import CFG, Config, DIRECTIONS, RIGHT
from .grid import Grid, Point

Direction = Tuple[int, int]

# Slack (seconds) when comparing accumulated time to one cell's cost
STEP_EPSILON = 1e-9


class Phase(Enum):
    """Lifecycle of one engine instance."""
    IDLE = auto()
    RUNNING = auto()
    GAME_OVER = auto()


# ---------- Helpers ----------
def spawn_food(grid: Grid, rng: np.random.Generator) -> Point:
    """
    Pick a uniformly random cell for the next food item.
    The snake's body is NOT avoided: food can land under a segment.
    """
    return grid.to_point(*grid.random_cell(rng))


# ---------- Engine ----------
class SnakeEngine:
    """
    Owns all mutable game state: segments (head first), direction, food,
    score, growth, speed, accumulator and the game-over flag.
    """

    def __init__(self, config: Config = CFG, rng: Optional[np.random.Generator] = None):
        self.config = config
        self.rng = rng if rng is not None else np.random.default_rng(config.seed)
        self.grid: Optional[Grid] = None
        self.phase = Phase.IDLE

        self.direction: Direction = RIGHT
        self.food: Optional[Point] = None
        self.score = 0
        self.growth = 0
        self.current_speed = config.base_speed
        self.game_over = False
        self.accumulator = 0.0
        self.last_time: Optional[float] = None
        self.steps = 0
        self._snake: Deque[Point] = deque()

    # ----- Lifecycle -----
    def initialize(self, canvas_width: int, canvas_height: int, cell_size: int) -> None:
        """Derive grid dimensions from the canvas. Not allowed mid-game."""
        if self.phase is Phase.RUNNING:
            raise RuntimeError("Cannot resize the grid while a game is running.")
        self.grid = Grid(canvas_width, canvas_height, cell_size)
        self._snake.clear()
        self.food = None
        self.accumulator = 0.0
        self.last_time = None
        self.phase = Phase.IDLE

    def reset(self) -> None:
        """Start a new game on the current grid."""
        grid = self._require_grid()
        if self.config.initial_length < 1:
            raise ValueError(f"initial_length must be >= 1, got {self.config.initial_length}")

        self.score = 0
        self.growth = 0
        self.current_speed = self.config.base_speed
        self.direction = RIGHT
        self.game_over = False
        self.accumulator = 0.0
        self.last_time = None
        self.steps = 0

        # Centered, trailing away from the initial direction
        hc, hr = grid.center()
        dx, dy = self.direction
        self._snake = deque(
            grid.to_point(*grid.wrap(hc - i * dx, hr - i * dy))
            for i in range(self.config.initial_length)
        )
        self.food = spawn_food(grid, self.rng)
        self.phase = Phase.RUNNING

    # ----- Input -----
    def set_direction(self, candidate: Direction) -> None:
        """
        Overwrite the stored direction; it is read at the next step.
        Reversing straight into the neck is allowed and ends the game there.
        """
        cand = tuple(candidate)
        if cand not in DIRECTIONS:
            raise ValueError(f"Invalid direction {candidate!r}")
        self.direction = cand  # type: ignore[assignment]

    # ----- Step -----
    def step(self) -> bool:
        """
        Advance the snake exactly one cell.
        Returns True if alive, False if game over.
        """
        if self.game_over:
            return False
        grid = self._require_grid()
        if not self._snake:
            raise RuntimeError("Call reset() first.")

        col, row = grid.to_cell(self._snake[0])
        dx, dy = self.direction
        new_head = grid.to_point(*grid.wrap(col + dx, row + dy))

        self._snake.appendleft(new_head)
        while len(self._snake) > self.max_length:
            self._snake.pop()
        self.steps += 1

        # Self collision
        if any(seg == new_head for seg in islice(self._snake, 1, None)):
            self.game_over = True
            self.phase = Phase.GAME_OVER
            if self.config.debug:
                print(f"[engine] step={self.steps} collision at {grid.to_cell(new_head)}")
            return False

        # Eat / grow / speed up
        if new_head == self.food:
            self.score += 1
            self.growth += self.config.growth_increment
            self.current_speed += self.config.speed_increment
            self.food = spawn_food(grid, self.rng)

        if self.config.debug:
            print(
                f"[engine] step={self.steps} head={grid.to_cell(new_head)} "
                f"len={len(self._snake)} score={self.score}"
            )
        return True

    # ----- Pacing -----
    def advance(self, timestamp: float) -> bool:
        """
        Feed one frame timestamp (seconds). Runs as many steps as the
        accumulated time pays for, possibly zero or several.
        A frame delta longer than config.max_frame_seconds is cut to that
        length; the time beyond it is dropped, not carried over.
        Returns True while the game is still running.
        """
        self._require_grid()
        if self.phase is Phase.IDLE:
            raise RuntimeError("Call reset() before advance().")
        if self.game_over:
            return False

        # First frame after reset only syncs the clock
        if self.last_time is None:
            self.last_time = timestamp
            return True

        dt = max(0.0, timestamp - self.last_time)
        self.last_time = timestamp
        if self.config.max_frame_seconds is not None:
            dt = min(dt, self.config.max_frame_seconds)
        self.accumulator += dt

        # time_per_cell shrinks when food is eaten mid-loop.
        # Float drift must not decide a step that lands on a cell boundary.
        while self.accumulator + STEP_EPSILON >= self.time_per_cell:
            tpc = self.time_per_cell
            self.step()
            self.accumulator = max(0.0, self.accumulator - tpc)

        return not self.game_over

    # ----- Accessors -----
    @property
    def snake(self) -> Tuple[Point, ...]:
        return tuple(self._snake)

    @property
    def head(self) -> Point:
        if not self._snake:
            raise RuntimeError("Call reset() first.")
        return self._snake[0]

    @property
    def max_length(self) -> int:
        return self.config.initial_length + self.growth

    @property
    def time_per_cell(self) -> float:
        return self._require_grid().cell_size / self.current_speed

    def segment_runs(self) -> List[List[Point]]:
        """
        Split the body into runs of adjacent segments. A new run starts
        wherever the snake crosses a grid edge.
        """
        return self._require_grid().split_runs(self._snake)

    def _require_grid(self) -> Grid:
        if self.grid is None:
            raise RuntimeError("Call initialize() before using the engine.")
        return self.grid
