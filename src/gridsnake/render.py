# render.py
from __future__ import annotations

from typing import Sequence, Tuple

import pygame  # type: ignore

from .clock import format_mmss
from .config import (
    WIDTH, HEIGHT, HUD_HEIGHT,
    BG, GRID_LINE, HEAD, GREEN, RED, TEXT, MUTED, ACCENT, PANEL,
    DIFFICULTIES,
)
from .game import Outcome, RoundState
from .session import GameSession

WINDOW_SIZE = (WIDTH, HEIGHT + HUD_HEIGHT)

DEATH_MESSAGES = {
    Outcome.WALL: "You hit the wall!",
    Outcome.SELF: "You bit yourself!",
    Outcome.CLEARED: "Board cleared!",
}


def game_over_title(score: int, best_score: int) -> str:
    if score >= best_score and score > 0:
        return "NEW HIGH SCORE!"
    if score >= 15:
        return "Nice Run!"
    return "Better Luck Next Time"


# ---------- Helpers ----------
def draw_cell(screen: pygame.Surface, row: int, col: int, cell: int,
              color: Tuple[int, int, int]) -> None:
    rect = pygame.Rect(col * cell, HUD_HEIGHT + row * cell, cell, cell)
    pygame.draw.rect(screen, color, rect.inflate(-2, -2))

def _blit_centered(screen: pygame.Surface, surf: pygame.Surface, y: int) -> None:
    screen.blit(surf, surf.get_rect(center=(WIDTH // 2, y)))


# ---------- Board + HUD ----------
def draw_game(screen: pygame.Surface, font: pygame.font.Font, session: GameSession) -> None:
    screen.fill(BG)
    rows, cols = session.grid
    cell = session.difficulty.cell_size

    # grid lines
    for r in range(rows + 1):
        y = HUD_HEIGHT + r * cell
        pygame.draw.line(screen, GRID_LINE, (0, y), (cols * cell, y))
    for c in range(cols + 1):
        pygame.draw.line(screen, GRID_LINE, (c * cell, HUD_HEIGHT), (c * cell, HUD_HEIGHT + rows * cell))

    # food
    if session.food is not None:
        draw_cell(screen, *session.food, cell, RED)
    # snake, head brighter than body
    snake: Sequence[Tuple[int, int]] = session.snake
    for r, c in snake[1:]:
        draw_cell(screen, r, c, cell, GREEN)
    if snake:
        draw_cell(screen, *snake[0], cell, HEAD)

    draw_hud(screen, font, session)

def draw_hud(screen: pygame.Surface, font: pygame.font.Font, session: GameSession) -> None:
    pygame.draw.rect(screen, PANEL, pygame.Rect(0, 0, WIDTH, HUD_HEIGHT))
    score = font.render(f"Score: {session.score}", True, TEXT)
    best  = font.render(f"Best: {session.best_score}", True, TEXT)
    time_ = font.render(f"Time: {format_mmss(session.elapsed_seconds)}", True, TEXT)
    y = (HUD_HEIGHT - score.get_height()) // 2
    screen.blit(score, (10, y))
    screen.blit(best, best.get_rect(midtop=(WIDTH // 2, y)))
    screen.blit(time_, time_.get_rect(topright=(WIDTH - 10, y)))
    if session.round_state is RoundState.IDLE:
        hint = font.render("Press an arrow key or WASD to start", True, MUTED)
        _blit_centered(screen, hint, HUD_HEIGHT + HEIGHT - 20)


# ---------- Overlays ----------
def draw_game_over(screen: pygame.Surface, font: pygame.font.Font, session: GameSession) -> None:
    # Dim with translucent overlay
    overlay = pygame.Surface(WINDOW_SIZE, pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))  # RGBA
    screen.blit(overlay, (0, 0))

    panel = pygame.Rect(0, 0, WIDTH * 2 // 3, 200)
    panel.center = (WIDTH // 2, WINDOW_SIZE[1] // 2)
    pygame.draw.rect(screen, PANEL, panel, border_radius=12)

    cy = panel.centery
    title = font.render(game_over_title(session.score, session.best_score), True, ACCENT)
    msg   = font.render(DEATH_MESSAGES.get(session.outcome, "Game over"), True, TEXT)
    sco   = font.render(f"Score: {session.score}   Best: {session.best_score}", True, TEXT)
    sub   = font.render("R restart   M menu   Esc close", True, MUTED)

    _blit_centered(screen, title, cy - 60)
    _blit_centered(screen, msg, cy - 24)
    _blit_centered(screen, sco, cy + 12)
    _blit_centered(screen, sub, cy + 60)

def draw_menu(screen: pygame.Surface, font: pygame.font.Font, selected: int,
              best_score: int = 0) -> None:
    """Difficulty selection screen; `selected` indexes DIFFICULTIES."""
    screen.fill(BG)
    cy = WINDOW_SIZE[1] // 2
    _blit_centered(screen, font.render("SNAKE", True, ACCENT), cy - 110)
    _blit_centered(screen, font.render("Choose a difficulty", True, TEXT), cy - 70)

    for i, diff in enumerate(DIFFICULTIES.values()):
        label = f"{i + 1}. {diff.name.capitalize()}  ({diff.tick_ms} ms)"
        color = ACCENT if i == selected else MUTED
        text = font.render(("> " if i == selected else "  ") + label, True, color)
        _blit_centered(screen, text, cy - 20 + i * 36)

    _blit_centered(screen, font.render(f"Best: {best_score}", True, TEXT), cy + 110)
    _blit_centered(screen, font.render("Up/Down to choose, Enter to play", True, MUTED), cy + 140)
