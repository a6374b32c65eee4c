# clock.py
"""
Time sources for the game, driven by a millisecond timestamp
(pygame.time.get_ticks() in the app, plain integers in tests).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class Ticker:
    """
    Fixed-period tick source. At most one tick is due per poll: ticks missed
    during a stall are dropped, keeping the original phase.
    """
    period_ms: int
    last_tick: int = 0
    running: bool = False

    def __post_init__(self):
        if self.period_ms <= 0:
            raise ValueError(f"Tick period must be positive, got {self.period_ms}")

    def reset(self, now_ms: int) -> None:
        """Arm the ticker; the first tick falls one period after now_ms."""
        self.last_tick = now_ms
        self.running = True

    def stop(self) -> None:
        self.running = False

    def due(self, now_ms: int) -> bool:
        if not self.running or now_ms < self.last_tick:
            return False
        n = (now_ms - self.last_tick) // self.period_ms
        self.last_tick += n * self.period_ms
        return n > 0


@dataclass
class ElapsedTimer:
    """Whole seconds accumulated while started; frozen by stop()."""
    seconds: int = 0
    _mark: Optional[int] = None   # ms timestamp the next second counts from

    @property
    def running(self) -> bool:
        return self._mark is not None

    def start(self, now_ms: int) -> None:
        if self._mark is None:
            self._mark = now_ms

    def update(self, now_ms: int) -> int:
        if self._mark is not None and now_ms >= self._mark:
            whole = (now_ms - self._mark) // 1000
            self.seconds += whole
            self._mark += whole * 1000
        return self.seconds

    def stop(self) -> None:
        self._mark = None

    def reset(self) -> None:
        self._mark = None
        self.seconds = 0


def format_mmss(seconds: int) -> str:
    m, s = divmod(max(seconds, 0), 60)
    return f"{m:02d}:{s:02d}"
