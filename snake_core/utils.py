# Headless helpers: numpy board encoding, a greedy autopilot and a round runner.
from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .board import Cell
from .collision import classify
from .game_logic import (
    DIRECTION_DELTAS,
    DIRECTIONS,
    GAME_OVER,
    OVER,
    REVERSE_DIRECTION,
    GameSnapshot,
    GameState,
)

EMPTY = 0
FOOD = 1
OBSTACLE = 2
BODY = 3
HEAD = 4


@dataclass
class RoundResult:
    score: int
    ticks: int
    lives_left: int
    final_speed: int
    finished: bool


def encode_board(snapshot: GameSnapshot, grid_size: int) -> np.ndarray:
    """
    Board as an int8 array indexed [y, x]:
    - 0: empty
    - 1: food
    - 2: obstacle
    - 3: snake body
    - 4: snake head
    """
    board = np.zeros((grid_size, grid_size), dtype=np.int8)

    for x, y in snapshot.obstacles:
        board[y, x] = OBSTACLE

    fx, fy = snapshot.food
    board[fy, fx] = FOOD

    for idx, (x, y) in enumerate(snapshot.snake):
        board[y, x] = HEAD if idx == 0 else BODY

    return board


def _safe_directions(state: GameState) -> list[str]:
    head = state.snake.peek_head()
    safe = []
    for direction in DIRECTIONS:
        if direction == REVERSE_DIRECTION[state.direction]:
            continue
        dx, dy = DIRECTION_DELTAS[direction]
        candidate = Cell(head.x + dx, head.y + dy)
        if classify(candidate, state.snake, state.obstacles, state.grid) is None:
            safe.append(direction)
    return safe


def autopilot_direction(state: GameState) -> str:
    """Greedy move: a safe step that shortens the Manhattan distance to food, else any safe step."""
    safe = _safe_directions(state)
    if not safe:
        return state.direction

    head = state.snake.peek_head()
    food = state.food

    def distance_after(direction: str) -> int:
        dx, dy = DIRECTION_DELTAS[direction]
        return abs(food.x - (head.x + dx)) + abs(food.y - (head.y + dy))

    # Ties prefer the current heading.
    safe.sort(key=lambda d: (distance_after(d), d != state.direction))
    return safe[0]


def run_round(state: GameState, max_ticks: int = 5000) -> RoundResult:
    """Play one round with the autopilot until game over or `max_ticks` steps."""
    if max_ticks <= 0:
        raise ValueError("max_ticks must be > 0")

    steps = 0
    while steps < max_ticks and state.status != OVER:
        state.set_direction(autopilot_direction(state))
        if state.tick() == GAME_OVER:
            break
        steps += 1

    return RoundResult(
        score=state.score,
        ticks=state.ticks,
        lives_left=state.lives,
        final_speed=state.speed,
        finished=state.status == OVER,
    )
