# src/gridsnake/__init__.py
"""Grid snake: a small snake game state machine with a pygame front end."""

from .config import Direction, DIFFICULTIES
from .game import GameState, RoundState, Outcome, new_game_state, set_direction, step_game, restart_game
from .session import GameSession

__all__ = [
    "Direction",
    "DIFFICULTIES",
    "GameState",
    "RoundState",
    "Outcome",
    "new_game_state",
    "set_direction",
    "step_game",
    "restart_game",
    "GameSession",
]
