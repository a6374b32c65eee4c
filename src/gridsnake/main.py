# main.py
from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import pygame  # type: ignore

from .config import DIFFICULTIES, Config, Direction, default_scores_path
from .game import RoundState
from .render import WINDOW_SIZE, draw_game, draw_game_over, draw_menu
from .scores import BestScoreStore
from .session import GameSession

logger = logging.getLogger(__name__)

KEY_TO_DIRECTION = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}
MENU_PICK_KEYS = {pygame.K_1: 0, pygame.K_2: 1, pygame.K_3: 2}
DIFFICULTY_NAMES: List[str] = list(DIFFICULTIES)


@dataclass
class App:
    """What the window is showing, around one GameSession."""
    session: GameSession
    screen: str = "menu"        # "menu" or "play"
    selected: int = 0           # menu cursor into DIFFICULTY_NAMES
    modal_open: bool = False    # game-over modal visible
    running: bool = True


def handle_key(app: App, key: int, now_ms: int) -> None:
    """Apply one key press to the app (menu navigation or gameplay)."""
    if app.screen == "menu":
        n = len(DIFFICULTY_NAMES)
        if key in (pygame.K_UP, pygame.K_w):
            app.selected = (app.selected - 1) % n
        elif key in (pygame.K_DOWN, pygame.K_s):
            app.selected = (app.selected + 1) % n
        elif key in MENU_PICK_KEYS or key in (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE):
            app.selected = MENU_PICK_KEYS.get(key, app.selected)
            app.session.configure(DIFFICULTY_NAMES[app.selected])
            app.screen = "play"
            app.modal_open = False
        elif key == pygame.K_ESCAPE:
            app.running = False
        return

    if key in KEY_TO_DIRECTION:
        app.session.set_direction(KEY_TO_DIRECTION[key], now_ms)
    elif key == pygame.K_r:
        app.session.restart()
        app.modal_open = False
    elif key == pygame.K_m:
        app.session.restart()
        app.screen = "menu"
        app.modal_open = False
    elif key == pygame.K_ESCAPE and app.modal_open:
        app.modal_open = False


def handle_input(app: App) -> bool:
    """Process events. Return False to quit."""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            handle_key(app, event.key, pygame.time.get_ticks())
    return app.running


def parse_args(argv: Optional[List[str]] = None) -> Config:
    parser = argparse.ArgumentParser(prog="gridsnake", description="Grid snake arcade game")
    parser.add_argument(
        "--difficulty",
        type=str,
        default="easy",
        choices=DIFFICULTY_NAMES,
        help="starting difficulty (preselected in the menu)",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for food placement")
    parser.add_argument(
        "--scores-path",
        type=str,
        default=None,
        help="best-score file (default: $GRIDSNAKE_SCORES_PATH or ~/.gridsnake/best_score.json)",
    )
    parser.add_argument("--log-level", type=str, default="INFO")
    parser.add_argument(
        "--skip-menu",
        action="store_true",
        help="start playing right away at --difficulty",
    )
    args = parser.parse_args(argv)

    return Config(
        difficulty=args.difficulty,
        seed=args.seed,
        scores_path=Path(args.scores_path) if args.scores_path else default_scores_path(),
        log_level=args.log_level.upper(),
        skip_menu=args.skip_menu,
    )


def main(argv: Optional[List[str]] = None) -> None:
    cfg = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, cfg.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    store = BestScoreStore(cfg.scores_path)
    logger.info("Best score file: %s", store.path)
    session = GameSession(cfg.difficulty, store=store, seed=cfg.seed)
    app = App(
        session=session,
        screen="play" if cfg.skip_menu else "menu",
        selected=DIFFICULTY_NAMES.index(cfg.difficulty),
    )

    pygame.init()
    font = pygame.font.SysFont(None, 28)
    screen = pygame.display.set_mode(WINDOW_SIZE)
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    rounds = 0
    while True:
        # 1) input
        if not handle_input(app):
            break

        # 2) update
        if app.screen == "play":
            was_over = session.round_state is RoundState.OVER
            session.update(pygame.time.get_ticks())
            if not was_over and session.round_state is RoundState.OVER:
                rounds += 1
                app.modal_open = True

        # 3) render
        if app.screen == "menu":
            draw_menu(screen, font, app.selected, session.best_score)
        else:
            draw_game(screen, font, session)
            if app.modal_open:
                draw_game_over(screen, font, session)
        pygame.display.flip()
        clock.tick(cfg.fps)  # movement gated by the session's ticker

    pygame.quit()
    print(f"[SNAKE] rounds={rounds}, best={session.best_score} → {store.path}")


if __name__ == "__main__":
    main()
