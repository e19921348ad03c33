# Grid coordinates, bounds checks and collision-free random placement.
from __future__ import annotations

from collections.abc import Iterable
import random
from typing import NamedTuple


class PlacementError(RuntimeError):
    """Raised when no free cell can be found for food or an obstacle."""


class Cell(NamedTuple):
    x: int
    y: int


class Grid:
    """Square board of `size` x `size` cells."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("Grid size must be > 0.")
        self.size = size

    @property
    def area(self) -> int:
        return self.size * self.size

    def in_bounds(self, cell: tuple[int, int]) -> bool:
        x, y = cell
        return 0 <= x < self.size and 0 <= y < self.size

    def __repr__(self) -> str:
        return f"Grid(size={self.size})"


class RandomPlacer:
    """
    Rejection sampler for free cells.

    Draws a uniform cell and redraws while it lands on a forbidden one.
    Callers keep the forbidden set small relative to the board; the loop
    is capped so a crowded board fails with PlacementError instead of hanging.
    """

    def __init__(self, grid: Grid, rng: random.Random | None = None, max_attempts: int = 10_000) -> None:
        if max_attempts <= 0:
            raise ValueError("max_attempts must be > 0")
        self.grid = grid
        self.rng = rng if rng is not None else random.Random()
        self.max_attempts = max_attempts

    def place(self, forbidden: Iterable[tuple[int, int]]) -> Cell:
        blocked = {Cell(*cell) for cell in forbidden}
        in_grid = sum(1 for cell in blocked if self.grid.in_bounds(cell))
        if in_grid >= self.grid.area:
            raise PlacementError(f"No free cell left on a {self.grid.size}x{self.grid.size} grid.")

        size = self.grid.size
        for _ in range(self.max_attempts):
            candidate = Cell(self.rng.randrange(size), self.rng.randrange(size))
            if candidate not in blocked:
                return candidate
        raise PlacementError(
            f"Gave up after {self.max_attempts} attempts ({len(blocked)} of {self.grid.area} cells forbidden)."
        )
