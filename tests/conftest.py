from __future__ import annotations

import os

# Headless pygame for render/main tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from pathlib import Path

import pytest

from gridsnake.game import GameState, new_game_state
from gridsnake.scores import BestScoreStore


@pytest.fixture
def state() -> GameState:
    """10x10 board, snake [(5,5),(5,4),(5,3)], food parked out of the way."""
    s = new_game_state(10, 10, seed=7)
    s.food = (0, 0)
    return s


@pytest.fixture
def store(tmp_path: Path) -> BestScoreStore:
    return BestScoreStore(tmp_path / "best.json")
