# Core Snake game state and rules, independent from any rendering or input shell.
from __future__ import annotations

from dataclasses import dataclass
import logging
import random

from .board import Cell, Grid, RandomPlacer
from .body import SnakeBody
from .collision import classify
from .difficulty import next_speed

logger = logging.getLogger(__name__)


# Bounds used when validating a GameConfig.
MIN_GRID_SIZE = 5
MAX_GRID_SIZE = 60
MIN_SPEED_MS = 10
MAX_SPEED_MS = 1000
MIN_INITIAL_LENGTH = 1

UP = "up"
DOWN = "down"
LEFT = "left"
RIGHT = "right"
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)
REVERSE_DIRECTION = {UP: DOWN, DOWN: UP, LEFT: RIGHT, RIGHT: LEFT}
DIRECTION_DELTAS = {UP: (0, -1), DOWN: (0, 1), LEFT: (-1, 0), RIGHT: (1, 0)}

RUNNING = "running"
PAUSED = "paused"
OVER = "over"

# tick() outcomes
IDLE = "idle"
MOVED = "moved"
ATE = "ate"
LIFE_LOST = "life_lost"
GAME_OVER = "game_over"


@dataclass(frozen=True)
class GameConfig:
    """Immutable rules and tuning for one simulation."""
    grid_size: int = 20
    initial_length: int = 3
    initial_direction: str = RIGHT
    initial_speed: int = 150
    speed_step: int = 5
    min_speed: int = 50
    score_per_food: int = 10
    lives: int = 3
    obstacle_count: int = 5
    max_placement_attempts: int = 10_000

    def __post_init__(self) -> None:
        if not (MIN_GRID_SIZE <= self.grid_size <= MAX_GRID_SIZE):
            raise ValueError(f"grid_size must be between {MIN_GRID_SIZE} and {MAX_GRID_SIZE}.")
        if not (MIN_INITIAL_LENGTH <= self.initial_length <= self.grid_size):
            raise ValueError(f"initial_length must be between {MIN_INITIAL_LENGTH} and grid_size.")
        if self.initial_direction not in REVERSE_DIRECTION:
            raise ValueError(f"Unknown initial_direction: {self.initial_direction!r}")
        if not (MIN_SPEED_MS <= self.min_speed <= self.initial_speed <= MAX_SPEED_MS):
            raise ValueError(f"Require {MIN_SPEED_MS} <= min_speed <= initial_speed <= {MAX_SPEED_MS}.")
        if self.speed_step < 0:
            raise ValueError("speed_step must be >= 0.")
        if self.score_per_food <= 0:
            raise ValueError("score_per_food must be > 0.")
        if self.lives < 1:
            raise ValueError("lives must be >= 1.")
        if self.obstacle_count < 0:
            raise ValueError("obstacle_count must be >= 0.")
        # Leave at least half the board free so rejection sampling stays cheap.
        if self.initial_length + self.obstacle_count + 1 > (self.grid_size * self.grid_size) // 2:
            raise ValueError("Too many obstacles for this grid size.")
        if self.max_placement_attempts <= 0:
            raise ValueError("max_placement_attempts must be > 0.")

    def initial_body(self) -> list[Cell]:
        """Body with the head at the board center, trailing away from the initial direction."""
        size = self.grid_size
        center = size // 2
        dx, dy = DIRECTION_DELTAS[self.initial_direction]
        cells = [Cell(center - dx * i, center - dy * i) for i in range(self.initial_length)]

        # Slide a body that pokes past an edge back inside the board.
        xs = [c.x for c in cells]
        ys = [c.y for c in cells]
        shift_x = max(0, -min(xs)) - max(0, max(xs) - (size - 1))
        shift_y = max(0, -min(ys)) - max(0, max(ys) - (size - 1))
        return [Cell(c.x + shift_x, c.y + shift_y) for c in cells]


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view handed to the renderer after each tick."""
    snake: tuple[Cell, ...]
    food: Cell
    obstacles: tuple[Cell, ...]
    direction: str
    score: int
    high_score: int
    lives: int
    speed: int
    status: str
    ticks: int = 0
    last_collision: str | None = None


class GameState:
    """
    Single-round snake state machine: RUNNING <-> PAUSED, then OVER until reset().

    Not thread-safe. The shell serializes every call (one tick per timer
    firing, input events between ticks) and owns the timer, whose period
    must follow `speed`.
    """

    def __init__(self, config: GameConfig | None = None, rng: random.Random | None = None) -> None:
        self.config = config if config is not None else GameConfig()
        self.grid = Grid(self.config.grid_size)
        self.placer = RandomPlacer(self.grid, rng, self.config.max_placement_attempts)
        self.high_score = 0  # survives reset()
        self.reset()

    def reset(self) -> None:
        """Start a fresh round. High score is kept."""
        cfg = self.config
        self.snake = SnakeBody(cfg.initial_body())
        self.direction = cfg.initial_direction          # heading of the last committed move
        self.pending_direction = cfg.initial_direction  # latest accepted input, used by tick()

        # Each obstacle avoids the body and the obstacles placed before it.
        self.obstacles: set[Cell] = set()
        for _ in range(cfg.obstacle_count):
            self.obstacles.add(self.placer.place(self.snake.occupied | self.obstacles))
        self.food = self.placer.place(self.snake.occupied | self.obstacles)

        self.score = 0
        self.speed = cfg.initial_speed
        self.lives = cfg.lives
        self.status = RUNNING
        self.ticks = 0
        self.last_collision: str | None = None
        logger.debug("Round reset: food=%s obstacles=%s", self.food, sorted(self.obstacles))

    def restart(self) -> bool:
        """Reset only once the round is over. Returns True if a reset happened."""
        if self.status != OVER:
            return False
        self.reset()
        return True

    @property
    def is_over(self) -> bool:
        return self.status == OVER

    @property
    def is_paused(self) -> bool:
        return self.status == PAUSED

    def set_direction(self, new_direction: object) -> bool:
        """Queue a direction for the next tick. Unknown tokens and 180-degree turns are ignored."""
        if not isinstance(new_direction, str):
            return False
        token = new_direction.strip().lower()
        if token not in REVERSE_DIRECTION or self.status == OVER:
            return False
        if token == REVERSE_DIRECTION[self.direction]:
            return False
        self.pending_direction = token
        return True

    def toggle_pause(self) -> str:
        if self.status == RUNNING:
            self.status = PAUSED
        elif self.status == PAUSED:
            self.status = RUNNING
        return self.status

    def _soft_reset(self) -> None:
        """Life loss: restore body and heading, keep food, obstacles, score and speed."""
        cfg = self.config
        self.snake = SnakeBody(cfg.initial_body())
        self.direction = cfg.initial_direction
        self.pending_direction = cfg.initial_direction
        if self.food in self.snake:
            self.food = self.placer.place(self.snake.occupied | self.obstacles)

    def tick(self) -> str:
        """Advance one step and return the outcome (IDLE, MOVED, ATE, LIFE_LOST or GAME_OVER)."""
        if self.status != RUNNING:
            return IDLE

        direction = self.pending_direction
        dx, dy = DIRECTION_DELTAS[direction]
        head = self.snake.peek_head()
        candidate = Cell(head.x + dx, head.y + dy)

        collision = classify(candidate, self.snake, self.obstacles, self.grid)
        if collision is not None:
            self.last_collision = collision
            if self.lives > 1:
                self.lives -= 1
                self._soft_reset()
                logger.debug("Life lost (%s) at %s, %d left", collision, candidate, self.lives)
                return LIFE_LOST
            self.status = OVER
            if self.score > self.high_score:
                self.high_score = self.score
            logger.debug("Game over (%s) at %s, score=%d high=%d", collision, candidate, self.score, self.high_score)
            return GAME_OVER

        grow = candidate == self.food
        new_food = None
        if grow:
            # Nothing is mutated yet, so a PlacementError leaves the state as it was.
            new_food = self.placer.place(self.snake.occupied | self.obstacles | {candidate})

        self.last_collision = None
        self.direction = direction
        self.snake.advance(candidate, grow)
        self.ticks += 1
        if new_food is None:
            return MOVED

        self.score += self.config.score_per_food
        self.speed = next_speed(self.speed, self.config.speed_step, self.config.min_speed)
        self.food = new_food
        return ATE

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            snake=tuple(self.snake),
            food=self.food,
            obstacles=tuple(sorted(self.obstacles)),
            direction=self.direction,
            score=self.score,
            high_score=self.high_score,
            lives=self.lives,
            speed=self.speed,
            status=self.status,
            ticks=self.ticks,
            last_collision=self.last_collision,
        )
