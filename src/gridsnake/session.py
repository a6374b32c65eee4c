# session.py
from __future__ import annotations

import logging
import threading
from typing import Callable, List, Optional, Tuple, Union

import numpy as np  # type: ignore

from .clock import ElapsedTimer, Ticker
from .config import DEFAULT_DIFFICULTY, HEIGHT, WIDTH, Difficulty, Direction, get_difficulty, grid_for
from .game import (
    FoodEaten,
    GameEvent,
    GameState,
    Outcome,
    Position,
    RoundStarted,
    RoundState,
    new_game_state,
    restart_game,
    set_direction,
    step_game,
)
from .scores import BestScoreStore

logger = logging.getLogger(__name__)

Listener = Callable[[GameEvent], None]


class GameSession:
    """
    Owns one GameState plus everything around it: difficulty, tick source,
    elapsed timer, best-score storage and event listeners.

    All mutating calls take one lock, so input and ticks may come from
    different threads. Time is passed in as now_ms; nothing here reads a clock.
    """

    def __init__(self, difficulty: str = DEFAULT_DIFFICULTY,
                 store: Optional[BestScoreStore] = None,
                 seed: Optional[int] = None,
                 viewport: Tuple[int, int] = (WIDTH, HEIGHT)):
        # re-entrant so listeners may read or drive the session during dispatch
        self._lock = threading.RLock()
        self._listeners: List[Listener] = []
        self._viewport = viewport
        self._store = store
        best = store.load() if store is not None else 0

        self._difficulty: Difficulty = get_difficulty(difficulty)
        rows, cols = grid_for(self._difficulty, *viewport)
        self._state: GameState = new_game_state(
            rows, cols, rng=np.random.default_rng(seed), best_score=best
        )
        self._ticker = Ticker(self._difficulty.tick_ms)
        self._timer = ElapsedTimer()
        self._arm_on_update = False   # round started without a timestamp

    # ---------- Events ----------
    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener for every event; returns an unsubscribe callable."""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)
        return unsubscribe

    def _emit(self, events: List[GameEvent]) -> List[GameEvent]:
        """Persist a new best and dispatch; callers hold the lock so delivery follows state order."""
        for event in events:
            if isinstance(event, FoodEaten) and event.new_best and self._store is not None:
                self._store.save(event.score)
            for listener in list(self._listeners):
                listener(event)
        return events

    # ---------- Operations ----------
    def configure(self, difficulty: str) -> None:
        """Switch difficulty: new cell size and tick period, then a full restart."""
        diff = get_difficulty(difficulty)
        rows, cols = grid_for(diff, *self._viewport)
        with self._lock:
            self._difficulty = diff
            self._ticker = Ticker(diff.tick_ms)
            self._restart(rows, cols)
        logger.info("Difficulty %s: %dx%d grid, %d ms per tick",
                    diff.name, rows, cols, diff.tick_ms)

    def restart(self) -> None:
        with self._lock:
            self._restart()

    def _restart(self, rows: Optional[int] = None, cols: Optional[int] = None) -> None:
        restart_game(self._state, rows, cols)
        self._ticker.stop()
        self._timer.reset()
        self._arm_on_update = False

    def set_direction(self, direction: Union[Direction, str], now_ms: Optional[int] = None) -> List[GameEvent]:
        """
        Queue a direction; the first accepted one starts the round, its ticker and timer.
        Without now_ms the ticker and timer start from the next update() call.
        """
        with self._lock:
            events = set_direction(self._state, direction)
            if any(isinstance(e, RoundStarted) for e in events):
                if now_ms is None:
                    self._arm_on_update = True
                else:
                    self._arm(now_ms)
            return self._emit(events)

    def _arm(self, now_ms: int) -> None:
        self._ticker.reset(now_ms)
        self._timer.start(now_ms)
        self._arm_on_update = False

    def tick(self) -> List[GameEvent]:
        """Advance one step right now, regardless of the ticker."""
        with self._lock:
            return self._emit(self._tick())

    def _tick(self) -> List[GameEvent]:
        events = step_game(self._state)
        if self._state.round_state is RoundState.OVER:
            self._ticker.stop()
            self._timer.stop()
        return events

    def update(self, now_ms: int) -> List[GameEvent]:
        """Advance the elapsed timer and run the tick that is due at now_ms, if any."""
        with self._lock:
            if self._arm_on_update:
                self._arm(now_ms)
            self._timer.update(now_ms)
            events = self._tick() if self._ticker.due(now_ms) else []
            return self._emit(events)

    # ---------- Read-only accessors ----------
    @property
    def snake(self) -> Tuple[Position, ...]:
        return tuple(self._state.snake)

    @property
    def food(self) -> Optional[Position]:
        return self._state.food

    @property
    def score(self) -> int:
        return self._state.score

    @property
    def best_score(self) -> int:
        return self._state.best_score

    @property
    def round_state(self) -> RoundState:
        return self._state.round_state

    @property
    def outcome(self) -> Optional[Outcome]:
        return self._state.outcome

    @property
    def elapsed_seconds(self) -> int:
        return self._timer.seconds

    @property
    def direction(self) -> Optional[Direction]:
        return self._state.direction

    @property
    def grid(self) -> Tuple[int, int]:
        return self._state.rows, self._state.cols

    @property
    def difficulty(self) -> Difficulty:
        return self._difficulty

    @property
    def tick_ms(self) -> int:
        return self._difficulty.tick_ms
