from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pygame

from .models import BOARD_SIZE, CELL_SIZE, GameSnapshot

# Colors
SCREEN_COLOR = (255, 255, 255)
BOARD_COLOR = (0xEE, 0xFC, 0xF9)
SNAKE_COLOR = (0x1B, 0x99, 0x8B)
FOOD_COLOR = (0xFF, 0x6B, 0x6B)
TITLE_COLOR = (0, 0, 0)
OVERLAY_COLOR = (0, 0, 0, 128)
OVERLAY_TEXT = (255, 255, 255)

TITLE_TOP = 40
BOARD_TOP = 90


@dataclass(slots=True)
class Fonts:
    title: pygame.font.Font
    overlay: pygame.font.Font
    hint: pygame.font.Font


def load_fonts() -> Fonts:
    pygame.font.init()
    return Fonts(
        title=pygame.font.Font(None, 32),
        overlay=pygame.font.Font(None, 40),
        hint=pygame.font.Font(None, 28),
    )


def board_origin(screen_size: tuple[int, int]) -> tuple[int, int]:
    width, _ = screen_size
    return max(0, (width - BOARD_SIZE) // 2), BOARD_TOP


def cell_rect(origin: tuple[int, int], x: int, y: int) -> pygame.Rect:
    ox, oy = origin
    return pygame.Rect(ox + x * CELL_SIZE, oy + y * CELL_SIZE, CELL_SIZE, CELL_SIZE)


def _blit_centered(surface: pygame.Surface, text: pygame.Surface, center_x: int, top: int) -> pygame.Rect:
    rect = text.get_rect(midtop=(center_x, top))
    surface.blit(text, rect)
    return rect


def draw_game(surface: pygame.Surface, snapshot: GameSnapshot, fonts: Fonts) -> None:
    surface.fill(SCREEN_COLOR)
    screen_width = surface.get_width()

    title = fonts.title.render("Snake Game", True, TITLE_COLOR)
    _blit_centered(surface, title, screen_width // 2, TITLE_TOP)

    origin = board_origin(surface.get_size())
    board_rect = pygame.Rect(origin[0], origin[1], BOARD_SIZE, BOARD_SIZE)
    pygame.draw.rect(surface, BOARD_COLOR, board_rect)

    for segment in snapshot.snake:
        pygame.draw.rect(surface, SNAKE_COLOR, cell_rect(origin, segment.x, segment.y))
    pygame.draw.rect(surface, FOOD_COLOR, cell_rect(origin, snapshot.food.x, snapshot.food.y))

    if snapshot.terminal:
        overlay = pygame.Surface(board_rect.size, pygame.SRCALPHA)
        overlay.fill(OVERLAY_COLOR)
        surface.blit(overlay, board_rect.topleft)

        over = fonts.overlay.render("Game Over", True, OVERLAY_TEXT)
        retry = fonts.hint.render("Tap to Restart", True, OVERLAY_TEXT)
        center_y = board_rect.centery
        over_rect = _blit_centered(surface, over, board_rect.centerx, center_y - over.get_height() - 5)
        retry_rect = _blit_centered(surface, retry, board_rect.centerx, over_rect.bottom + 10)
        pygame.draw.line(
            surface,
            OVERLAY_TEXT,
            (retry_rect.left, retry_rect.bottom),
            (retry_rect.right, retry_rect.bottom),
            1,
        )


def save_frame(path: Path, snapshot: GameSnapshot, fonts: Fonts, screen_size: tuple[int, int]) -> None:
    surface = pygame.Surface(screen_size)
    draw_game(surface, snapshot, fonts)
    pygame.image.save(surface, str(path))
