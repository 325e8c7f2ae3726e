# render.py
from __future__ import annotations
from typing import Optional, Tuple
import pygame  # type: ignore

from .config import (
    WIDTH, HEIGHT, CELL_SIZE, HUD_H,
    BG, GRID_LINE, SNAKE, SNAKE_HEAD, FOOD, TEXT, PANEL, BUTTON, OVERLAY,
)
from .controls import Layout
from .game import RunStatus, Snapshot

ARROWS = {(0, -1): "^", (0, 1): "v", (-1, 0): "<", (1, 0): ">"}


# ---------- Helpers ----------
def cell_rect(gx: int, gy: int) -> pygame.Rect:
    return pygame.Rect(gx * CELL_SIZE, HUD_H + gy * CELL_SIZE, CELL_SIZE, CELL_SIZE)

def draw_cell(screen: pygame.Surface, gx: int, gy: int, color: Tuple[int, int, int]) -> None:
    pygame.draw.rect(screen, color, cell_rect(gx, gy))

def draw_grid(screen: pygame.Surface, grid_size: int) -> None:
    board_px = grid_size * CELL_SIZE
    for i in range(1, grid_size):
        p = i * CELL_SIZE
        pygame.draw.line(screen, GRID_LINE, (p, HUD_H), (p, HUD_H + board_px))
        pygame.draw.line(screen, GRID_LINE, (0, HUD_H + p), (board_px, HUD_H + p))

def draw_button(screen: pygame.Surface, font: pygame.font.Font, rect: pygame.Rect, label: str) -> None:
    pygame.draw.rect(screen, BUTTON, rect, border_radius=6)
    txt = font.render(label, True, TEXT)
    screen.blit(txt, txt.get_rect(center=rect.center))

def draw_overlay(screen: pygame.Surface, font: pygame.font.Font, board: pygame.Rect, lines) -> None:
    """Dim the board and centre some text on it."""
    overlay = pygame.Surface(board.size, pygame.SRCALPHA)
    overlay.fill(OVERLAY)
    screen.blit(overlay, board.topleft)
    cy = board.centery - 16 * (len(lines) - 1)
    for i, line in enumerate(lines):
        txt = font.render(line, True, (255, 255, 255))
        screen.blit(txt, txt.get_rect(center=(board.centerx, cy + 32 * i)))


# ---------- Draw ----------
class Renderer:
    """Presentation sink: draws a Snapshot, never touches GameState."""

    def __init__(self, screen: pygame.Surface, font: pygame.font.Font,
                 layout: Optional[Layout] = None, speed_fn=None):
        self.screen = screen
        self.font = font
        self.layout = layout or Layout()
        self.speed_fn = speed_fn    # returns the slider value to draw
        self.frames = 0

    def __call__(self, snap: Snapshot) -> None:
        self.draw(snap)
        self.frames += 1

    def draw(self, snap: Snapshot) -> None:
        screen = self.screen
        screen.fill(BG)
        draw_grid(screen, snap.grid_size)

        draw_cell(screen, snap.food[0], snap.food[1], FOOD)
        for i, (x, y) in enumerate(snap.snake):
            draw_cell(screen, x, y, SNAKE_HEAD if i == 0 else SNAKE)

        self.draw_hud(snap)
        self.draw_panel(snap)

        if snap.status is RunStatus.PAUSED:
            draw_overlay(screen, self.font, self.layout.board, ["Paused - Press Space or Resume"])
        elif snap.status is RunStatus.OVER:
            draw_overlay(screen, self.font, self.layout.board,
                         ["GAME OVER", f"Score: {snap.score}", "Press R to restart"])

    def draw_hud(self, snap: Snapshot) -> None:
        pygame.draw.rect(self.screen, PANEL, pygame.Rect(0, 0, WIDTH, HUD_H))
        txt = self.font.render(f"Score: {snap.score}    High score: {snap.high_score}", True, TEXT)
        self.screen.blit(txt, (8, (HUD_H - txt.get_height()) // 2))

    def draw_panel(self, snap: Snapshot) -> None:
        layout = self.layout
        panel_top = layout.board.bottom
        pygame.draw.rect(self.screen, PANEL, pygame.Rect(0, panel_top, WIDTH, HEIGHT - panel_top))

        draw_button(self.screen, self.font, layout.pause_button,
                    "Pause" if snap.status is RunStatus.RUNNING else "Resume")
        draw_button(self.screen, self.font, layout.restart_button, "Restart")
        for direction, rect in layout.dpad.items():
            draw_button(self.screen, self.font, rect, ARROWS[direction])

        # speed slider
        track = layout.slider
        label = self.font.render("Speed", True, TEXT)
        self.screen.blit(label, (track.left, track.top - 28))
        pygame.draw.rect(self.screen, BUTTON, track, border_radius=4)
        if self.speed_fn is not None:
            knob_x = track.left + round(self.speed_fn() * track.width)
            pygame.draw.circle(self.screen, SNAKE_HEAD, (knob_x, track.centery), 9)
