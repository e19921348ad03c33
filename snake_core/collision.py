# Classify a candidate head move against walls, the body and obstacles.
from __future__ import annotations

from collections.abc import Collection

from .board import Grid
from .body import SnakeBody

NONE = None
WALL = "wall"
SELF = "self"
OBSTACLE = "obstacle"


def classify(
    candidate_head: tuple[int, int],
    snake: SnakeBody,
    obstacles: Collection[tuple[int, int]],
    grid: Grid,
) -> str | None:
    """
    Return the collision kind for moving the head to `candidate_head`, or None.

    The body check uses the body before the move, so the tail cell that
    would be vacated this tick still counts as occupied.
    """
    if not grid.in_bounds(candidate_head):
        return WALL
    if candidate_head in snake:
        return SELF
    if candidate_head in obstacles:
        return OBSTACLE
    return NONE
