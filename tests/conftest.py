"""
Pytest fixtures for wrapsnake tests.
"""
from collections import deque

import pytest

from wrapsnake.config import Config
from wrapsnake.engine import SnakeEngine

# 600x400 canvas, 20px cells -> 30 cols x 20 rows
WIDTH, HEIGHT, CELL = 600, 400, 20


@pytest.fixture
def engine() -> SnakeEngine:
    """A reset engine on a 30x20 grid with a fixed seed."""
    eng = SnakeEngine(Config(seed=1234))
    eng.initialize(WIDTH, HEIGHT, CELL)
    eng.reset()
    return eng


@pytest.fixture
def place():
    """Overwrite an engine's snake with the given (col, row) cells, head first."""
    def _place(eng: SnakeEngine, cells, food=None):
        eng._snake = deque(eng.grid.to_point(c, r) for c, r in cells)
        if food is not None:
            eng.food = eng.grid.to_point(*food)
    return _place
