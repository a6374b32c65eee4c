# game.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple, Union

import numpy as np  # type: ignore

from .config import VECTORS, Direction

logger = logging.getLogger(__name__)

Position = Tuple[int, int]   # (row, col)


class RoundState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    OVER = "over"


class Outcome(str, Enum):
    WALL = "wall"
    SELF = "self"
    CLEARED = "cleared"   # snake fills the grid, nowhere left for food


# ---------- Events ----------
@dataclass(frozen=True)
class RoundStarted:
    direction: Direction

@dataclass(frozen=True)
class Moved:
    snake: Tuple[Position, ...]
    food: Optional[Position]
    grew: bool

@dataclass(frozen=True)
class FoodEaten:
    position: Position
    score: int
    new_best: bool

@dataclass(frozen=True)
class WallCollision:
    head: Position
    attempted: Position

@dataclass(frozen=True)
class SelfCollision:
    head: Position

@dataclass(frozen=True)
class BoardCleared:
    score: int

GameEvent = Union[RoundStarted, Moved, FoodEaten, WallCollision, SelfCollision, BoardCleared]


# ---------- State ----------
@dataclass
class GameState:
    rows: int
    cols: int
    snake: List[Position]             # head at index 0
    food: Optional[Position]
    direction: Optional[Direction]    # heading committed on the last tick
    pending: Optional[Direction]      # latest accepted request, applied next tick
    score: int
    best_score: int
    round_state: RoundState
    outcome: Optional[Outcome]
    rng: np.random.Generator

    def in_bounds(self, pos: Position) -> bool:
        r, c = pos
        return 0 <= r < self.rows and 0 <= c < self.cols


# ---------- Helpers ----------
def start_snake(rows: int, cols: int) -> List[Position]:
    """Fixed 3-segment snake centred on the grid, facing right."""
    r, c = rows // 2, cols // 2
    return [(r, c), (r, c - 1), (r, c - 2)]

def occupancy(snake: List[Position], rows: int, cols: int) -> np.ndarray:
    """rows x cols mask: 1 where a snake segment sits, 0 elsewhere."""
    grid = np.zeros((rows, cols), dtype=np.int8)
    if snake:
        rr, cc = zip(*snake)
        grid[list(rr), list(cc)] = 1
    return grid

def spawn_food(snake: List[Position], rows: int, cols: int,
               rng: np.random.Generator) -> Optional[Position]:
    """
    Uniform random empty cell, or None when the snake covers the grid.
    Rejection-samples first; a crowded board falls back to an exact draw
    over the free cells so the loop always ends.
    """
    occupied = set(snake)
    if len(occupied) >= rows * cols:
        return None
    for _ in range(rows * cols):
        cell = (int(rng.integers(rows)), int(rng.integers(cols)))
        if cell not in occupied:
            return cell
    free = np.flatnonzero(occupancy(snake, rows, cols) == 0)
    r, c = divmod(int(rng.choice(free)), cols)
    return (r, c)

def current_heading(state: GameState) -> Optional[Direction]:
    """Committed direction, or the one implied by head and neck before the first move."""
    if state.direction is not None:
        return state.direction
    if len(state.snake) < 2:
        return None
    (hr, hc), (nr, nc) = state.snake[0], state.snake[1]
    for d, vec in VECTORS.items():
        if vec == (hr - nr, hc - nc):
            return d
    return None

def _end_round(state: GameState, outcome: Outcome) -> None:
    state.round_state = RoundState.OVER
    state.outcome = outcome
    logger.info("Round over: %s (score=%d, length=%d)",
                outcome.value, state.score, len(state.snake))


def new_game_state(rows: int, cols: int, seed: Optional[int] = None,
                   rng: Optional[np.random.Generator] = None,
                   best_score: int = 0) -> GameState:
    if rows < 1 or cols < 4:
        raise ValueError(f"Grid {rows}x{cols} cannot hold the starting snake")
    rng = rng if rng is not None else np.random.default_rng(seed)
    snake = start_snake(rows, cols)
    return GameState(
        rows=rows,
        cols=cols,
        snake=snake,
        food=spawn_food(snake, rows, cols, rng),
        direction=None,
        pending=None,
        score=0,
        best_score=best_score,
        round_state=RoundState.IDLE,
        outcome=None,
        rng=rng,
    )

def restart_game(state: GameState, rows: Optional[int] = None,
                 cols: Optional[int] = None) -> None:
    """Back to idle in place; keeps the RNG and best score. Optionally resizes the grid."""
    rows = state.rows if rows is None else rows
    cols = state.cols if cols is None else cols
    fresh = new_game_state(rows, cols, rng=state.rng, best_score=state.best_score)
    state.__dict__.update(fresh.__dict__)


# ---------- Input / Update ----------
def set_direction(state: GameState, requested: Union[Direction, str]) -> List[GameEvent]:
    """
    Queue a direction for the next tick (last write wins).
    Reversals of the current heading are ignored, as is anything after game over.
    The first accepted request starts the round.
    """
    if state.round_state is RoundState.OVER:
        return []
    try:
        cand = Direction.parse(requested)
    except ValueError:
        logger.debug("Ignoring unknown direction %r", requested)
        return []

    heading = current_heading(state)
    if heading is not None and cand is heading.opposite:
        return []

    state.pending = cand
    if state.round_state is RoundState.IDLE:
        state.round_state = RoundState.RUNNING
        logger.info("Round started heading %s on a %dx%d grid",
                    cand.value, state.rows, state.cols)
        return [RoundStarted(direction=cand)]
    return []

def step_game(state: GameState) -> List[GameEvent]:
    """
    Advance the snake by one cell.
    Returns the events of this tick in order; empty if the round isn't running.
    """
    if state.round_state is not RoundState.RUNNING or state.pending is None:
        return []

    # Commit direction once per tick
    state.direction = state.pending

    hr, hc = state.snake[0]
    dr, dc = state.direction.vector
    new_head = (hr + dr, hc + dc)

    # Wall collision: snake stays as it was
    if not state.in_bounds(new_head):
        _end_round(state, Outcome.WALL)
        return [WallCollision(head=state.snake[0], attempted=new_head)]

    # Self collision against the body before this move, old tail included
    bitten = new_head in state.snake
    state.snake.insert(0, new_head)
    if bitten:
        _end_round(state, Outcome.SELF)
        return [SelfCollision(head=new_head)]

    events: List[GameEvent] = []
    grew = new_head == state.food
    if grew:
        state.score += 1
        new_best = state.score > state.best_score
        if new_best:
            state.best_score = state.score
            logger.debug("New best score %d", state.score)
        events.append(FoodEaten(position=new_head, score=state.score, new_best=new_best))
        state.food = spawn_food(state.snake, state.rows, state.cols, state.rng)
    else:
        state.snake.pop()

    events.append(Moved(snake=tuple(state.snake), food=state.food, grew=grew))

    if grew and state.food is None:
        events.append(BoardCleared(score=state.score))
        _end_round(state, Outcome.CLEARED)
    return events
