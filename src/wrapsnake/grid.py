# grid.py
"""
Grid model: maps pixel coordinates to cells and back.
NO PYGAME DEPENDENCIES.
"""
from dataclasses import dataclass
from typing import Iterable, List, Tuple

import numpy as np  # type: ignore


@dataclass(frozen=True)
class Point:
    """Pixel coordinates of a cell center."""
    x: float
    y: float


class Grid:
    """
    Movement grid derived from the canvas size.

    Coordinate system:
    - (0, 0) is top-left
    - col increases to the right
    - row increases downward
    """

    def __init__(self, width: int, height: int, cell_size: int):
        if cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {cell_size}")
        self.width = width
        self.height = height
        self.cell_size = cell_size
        self.cols = width // cell_size
        self.rows = height // cell_size
        if self.cols < 1 or self.rows < 1:
            raise ValueError(
                f"canvas {width}x{height} is smaller than one {cell_size}px cell"
            )

    def to_cell(self, point: Point) -> Tuple[int, int]:
        half = self.cell_size / 2
        col = int((point.x - half) // self.cell_size)
        row = int((point.y - half) // self.cell_size)
        return col, row

    def to_point(self, col: int, row: int) -> Point:
        half = self.cell_size / 2
        return Point(col * self.cell_size + half, row * self.cell_size + half)

    def wrap(self, col: int, row: int) -> Tuple[int, int]:
        """Fold a cell that left the grid back in from the opposite edge."""
        return col % self.cols, row % self.rows

    def center(self) -> Tuple[int, int]:
        return self.cols // 2, self.rows // 2

    def is_adjacent(self, a: Point, b: Point) -> bool:
        """
        True if a and b are exactly one cell apart along one axis.
        A False result between consecutive snake segments marks a wrap.

        On an axis with only 1 or 2 cells a wrapped step also lands on a
        neighbor (col 1 -> col 0 with cols=2), so positions alone cannot
        tell it apart from an ordinary step; such wraps are not marked.
        """
        ac, ar = self.to_cell(a)
        bc, br = self.to_cell(b)
        return abs(ac - bc) + abs(ar - br) == 1

    def split_runs(self, points: Iterable[Point]) -> List[List[Point]]:
        """Group consecutive points into runs, breaking at every wrap."""
        runs: List[List[Point]] = []
        for p in points:
            if runs and self.is_adjacent(runs[-1][-1], p):
                runs[-1].append(p)
            else:
                runs.append([p])
        return runs

    def random_cell(self, rng: np.random.Generator) -> Tuple[int, int]:
        col = int(rng.integers(self.cols))
        row = int(rng.integers(self.rows))
        return col, row
