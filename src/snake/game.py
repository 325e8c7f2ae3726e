# game.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple
import logging
import random

import numpy as np  # type: ignore

from .config import GRID_SIZE, RIGHT, CFG
from .errors import BoardFull, PersistenceUnavailable
from .storage import HighScoreStore

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]


class RunStatus(Enum):
    RUNNING = "running"
    PAUSED = "paused"
    OVER = "over"


# ---------- Helpers ----------
def initial_snake(grid_size: int = GRID_SIZE) -> List[Cell]:
    """Three segments heading right, centred vertically: (6,12),(5,12),(4,12) on 24x24."""
    mid = grid_size // 2
    return [(6, mid), (5, mid), (4, mid)]

def is_opposite(a: Cell, b: Cell) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]

def wrap(x: int, y: int, grid_size: int) -> Cell:
    """Toroidal board: leaving one edge re-enters at the opposite one."""
    return (x % grid_size, y % grid_size)

def spawn_food(
    snake: List[Cell],
    grid_size: int = GRID_SIZE,
    rng: Optional[random.Random] = None,
    attempts: int = CFG.food_attempts,
) -> Cell:
    """
    Pick a uniformly random free cell.

    Rejection-samples up to `attempts` times, then scans the occupancy grid
    for free cells so a nearly full board still terminates.
    Raises BoardFull if the snake covers every cell.
    """
    rng = rng or random
    body = set(snake)
    for _ in range(attempts):
        cell = (rng.randrange(grid_size), rng.randrange(grid_size))
        if cell not in body:
            return cell

    occupied = np.zeros((grid_size, grid_size), dtype=bool)
    if body:
        xs, ys = zip(*body)
        occupied[list(xs), list(ys)] = True
    free = np.argwhere(~occupied)   # rows of (x, y)
    if len(free) == 0:
        raise BoardFull(f"snake fills the {grid_size}x{grid_size} board")
    fx, fy = free[rng.randrange(len(free))]
    return (int(fx), int(fy))


# ---------- Snapshot ----------
@dataclass(frozen=True)
class Snapshot:
    """Read-only view handed to the presentation layer once per frame."""
    snake: Tuple[Cell, ...]     # head at index 0
    food: Cell
    score: int
    high_score: int
    status: RunStatus
    grid_size: int

    @property
    def head(self) -> Cell:
        return self.snake[0]


# ---------- State ----------
@dataclass
class GameState:
    snake: List[Cell]           # head at index 0
    direction: Cell             # applied on the last tick
    pending: Cell               # buffered intent for the next tick
    food: Cell
    score: int
    high_score: int
    status: RunStatus = RunStatus.RUNNING
    grid_size: int = GRID_SIZE
    rng: random.Random = field(default_factory=random.Random, repr=False)
    store: Optional[HighScoreStore] = field(default=None, repr=False)
    food_attempts: int = CFG.food_attempts

    # ----- input -----
    def set_direction(self, dx: int, dy: int) -> None:
        """Buffer a turn for the next tick. A 180° reversal is ignored."""
        if is_opposite((dx, dy), self.direction):
            return
        self.pending = (dx, dy)

    def toggle_pause(self) -> None:
        if self.status is RunStatus.RUNNING:
            self.status = RunStatus.PAUSED
        elif self.status is RunStatus.PAUSED:
            self.status = RunStatus.RUNNING

    def restart(self) -> None:
        snake = initial_snake(self.grid_size)
        food = spawn_food(snake, self.grid_size, self.rng, self.food_attempts)
        # assign together; presentation never sees a half-reset state
        self.snake, self.food = snake, food
        self.direction = self.pending = RIGHT
        self.score = 0
        self.status = RunStatus.RUNNING
        logger.info("Game restarted (high score %d)", self.high_score)

    # ----- update -----
    def tick(self) -> bool:
        """
        Advance the game by one step. Does nothing unless RUNNING.
        Returns True if alive, False if game over.
        """
        if self.status is not RunStatus.RUNNING:
            return self.status is not RunStatus.OVER

        # Commit direction once per tick
        self.direction = self.pending

        hx, hy = self.snake[0]
        dx, dy = self.direction
        new_head = wrap(hx + dx, hy + dy, self.grid_size)

        # Self collision, checked before the tail moves: stepping onto the
        # current tail cell ends the game even though it would be vacated.
        if new_head in self.snake:
            self.status = RunStatus.OVER
            logger.info("Game over: hit self at %s, score %d", new_head, self.score)
            return False

        self.snake.insert(0, new_head)
        if new_head != self.food:
            self.snake.pop()
            return True

        # Eat & grow
        self.score += 1
        if self.score > self.high_score:
            self.high_score = self.score
            self._save_high_score()
        try:
            self.food = spawn_food(self.snake, self.grid_size, self.rng, self.food_attempts)
        except BoardFull:
            self.status = RunStatus.OVER
            logger.info("Game over: board full, score %d", self.score)
            return False
        return True

    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake=tuple(self.snake),
            food=self.food,
            score=self.score,
            high_score=self.high_score,
            status=self.status,
            grid_size=self.grid_size,
        )

    def _save_high_score(self) -> None:
        if self.store is None:
            return
        try:
            self.store.save_high_score(self.high_score)
        except PersistenceUnavailable as exc:
            logger.warning("Could not save high score %d: %s", self.high_score, exc)


def load_high_score(store: Optional[HighScoreStore]) -> int:
    """Read the persisted best score; any storage failure reads as 0."""
    if store is None:
        return 0
    try:
        return store.load_high_score()
    except PersistenceUnavailable as exc:
        logger.warning("High score unavailable, starting from 0: %s", exc)
        return 0

def new_game_state(
    store: Optional[HighScoreStore] = None,
    grid_size: int = GRID_SIZE,
    seed: Optional[int] = None,
    food_attempts: int = CFG.food_attempts,
) -> GameState:
    rng = random.Random(seed)
    snake = initial_snake(grid_size)
    food = spawn_food(snake, grid_size, rng, food_attempts)
    return GameState(
        snake=snake,
        direction=RIGHT,
        pending=RIGHT,
        food=food,
        score=0,
        high_score=load_high_score(store),
        status=RunStatus.RUNNING,
        grid_size=grid_size,
        rng=rng,
        store=store,
        food_attempts=food_attempts,
    )
