from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

# ----- Window / viewport -----
WIDTH, HEIGHT = 600, 600
HUD_HEIGHT = 40
FPS = 60

# ----- Colors -----
BG        = (20, 20, 24)
GRID_LINE = (32, 32, 40)
HEAD      = (120, 235, 120)
GREEN     = (80, 200, 80)
RED       = (200, 70, 70)
TEXT      = (220, 220, 230)
MUTED     = (150, 150, 165)
ACCENT    = (255, 187, 73)
PANEL     = (34, 34, 44)


# ----- Directions (drow, dcol) -----
class Direction(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def vector(self) -> tuple[int, int]:
        return VECTORS[self]

    @property
    def opposite(self) -> "Direction":
        return OPPOSITE[self]

    @classmethod
    def parse(cls, value: "str | Direction") -> "Direction":
        """Accept a Direction or a case-insensitive name like "Up"."""
        if isinstance(value, Direction):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown direction: {value!r}") from None


VECTORS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

OPPOSITE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


# ----- Difficulty table (cell size in px, tick period in ms) -----
@dataclass(frozen=True)
class Difficulty:
    name: str
    cell_size: int
    tick_ms: int


DIFFICULTIES = {
    "easy": Difficulty("easy", cell_size=60, tick_ms=180),
    "medium": Difficulty("medium", cell_size=50, tick_ms=140),
    "hard": Difficulty("hard", cell_size=40, tick_ms=100),
}
DEFAULT_DIFFICULTY = "easy"


def get_difficulty(name: str) -> Difficulty:
    try:
        return DIFFICULTIES[name.strip().lower()]
    except KeyError:
        choices = ", ".join(DIFFICULTIES)
        raise ValueError(f"Unknown difficulty {name!r} (expected one of: {choices})") from None


def grid_for(difficulty: Difficulty, width: int = WIDTH, height: int = HEIGHT) -> tuple[int, int]:
    """(rows, cols) that fit the viewport at this difficulty's cell size."""
    rows = height // difficulty.cell_size
    cols = width // difficulty.cell_size
    if rows < 1 or cols < 4:
        raise ValueError(
            f"Viewport {width}x{height} is too small for {difficulty.cell_size}px cells"
        )
    return rows, cols


# ----- Persistence -----
BEST_SCORE_KEY = "highScore"
SCORES_PATH_ENV = "GRIDSNAKE_SCORES_PATH"


def default_scores_path() -> Path:
    override = os.getenv(SCORES_PATH_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".gridsnake" / "best_score.json"


# ----- Tunables -----
@dataclass
class Config:
    difficulty: str = DEFAULT_DIFFICULTY
    seed: int | None = None
    scores_path: Path = field(default_factory=default_scores_path)
    log_level: str = "INFO"
    fps: int = FPS
    skip_menu: bool = False

    def __post_init__(self):
        # Fail early on a bad name rather than at the first restart
        self.difficulty = get_difficulty(self.difficulty).name
        self.scores_path = Path(self.scores_path).expanduser()
