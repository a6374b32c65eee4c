from __future__ import annotations

from pathlib import Path

import pygame
import pytest

from gridsnake.config import Direction
from gridsnake.game import RoundState
from gridsnake.main import App, handle_key, parse_args
from gridsnake.scores import BestScoreStore
from gridsnake.session import GameSession


@pytest.fixture
def app(store: BestScoreStore) -> App:
    return App(session=GameSession("easy", store=store, seed=3))


def test_parse_args_defaults(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("GRIDSNAKE_SCORES_PATH", str(tmp_path / "x.json"))
    cfg = parse_args([])

    assert cfg.difficulty == "easy"
    assert cfg.seed is None
    assert cfg.scores_path == tmp_path / "x.json"
    assert cfg.log_level == "INFO"
    assert cfg.skip_menu is False


def test_parse_args_overrides(tmp_path: Path) -> None:
    cfg = parse_args(
        ["--difficulty", "hard", "--seed", "5", "--scores-path", str(tmp_path / "b.json"),
         "--log-level", "debug", "--skip-menu"]
    )

    assert cfg.difficulty == "hard"
    assert cfg.seed == 5
    assert cfg.scores_path == tmp_path / "b.json"
    assert cfg.log_level == "DEBUG"
    assert cfg.skip_menu is True


def test_parse_args_rejects_unknown_difficulty() -> None:
    with pytest.raises(SystemExit):
        parse_args(["--difficulty", "insane"])


def test_menu_navigation_wraps_and_picks(app: App) -> None:
    handle_key(app, pygame.K_UP, 0)
    assert app.selected == 2

    handle_key(app, pygame.K_s, 0)
    assert app.selected == 0

    handle_key(app, pygame.K_DOWN, 0)
    handle_key(app, pygame.K_RETURN, 0)

    assert app.screen == "play"
    assert app.session.difficulty.name == "medium"
    assert app.session.grid == (12, 12)


def test_number_keys_pick_difficulty_directly(app: App) -> None:
    handle_key(app, pygame.K_3, 0)

    assert app.screen == "play"
    assert app.selected == 2
    assert app.session.tick_ms == 100


def test_escape_on_menu_quits(app: App) -> None:
    handle_key(app, pygame.K_ESCAPE, 0)
    assert app.running is False


def test_play_keys_steer_restart_and_return_to_menu(app: App) -> None:
    app.screen = "play"

    handle_key(app, pygame.K_w, 0)
    assert app.session.round_state is RoundState.RUNNING
    assert app.session._state.pending is Direction.UP

    app.modal_open = True
    handle_key(app, pygame.K_ESCAPE, 0)
    assert app.modal_open is False

    handle_key(app, pygame.K_r, 0)
    assert app.session.round_state is RoundState.IDLE

    handle_key(app, pygame.K_RIGHT, 0)
    handle_key(app, pygame.K_m, 0)
    assert app.screen == "menu"
    assert app.session.round_state is RoundState.IDLE
