# Grid snake simulation core: rules and state machine, no rendering or input handling.
from __future__ import annotations

from .board import Cell, Grid, PlacementError, RandomPlacer
from .body import SnakeBody
from .collision import NONE, OBSTACLE, SELF, WALL, classify
from .difficulty import next_speed
from .game_logic import (
    DIRECTIONS,
    DOWN,
    LEFT,
    OVER,
    PAUSED,
    RIGHT,
    RUNNING,
    UP,
    GameConfig,
    GameSnapshot,
    GameState,
)

__all__ = [
    "Cell",
    "Grid",
    "PlacementError",
    "RandomPlacer",
    "SnakeBody",
    "NONE",
    "WALL",
    "SELF",
    "OBSTACLE",
    "classify",
    "next_speed",
    "UP",
    "DOWN",
    "LEFT",
    "RIGHT",
    "DIRECTIONS",
    "RUNNING",
    "PAUSED",
    "OVER",
    "GameConfig",
    "GameSnapshot",
    "GameState",
]
