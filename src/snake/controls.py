# controls.py
"""
Input adapter: turns pygame events (keys, on-screen buttons, the speed
slider and swipe gestures) into GameState.set_direction / toggle_pause /
restart and Driver.set_speed calls. The core never sees pygame events.

Touch input arrives as the mouse events SDL synthesizes from fingers, so a
finger swipe and a mouse drag across the board are handled the same way.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple
import logging

import pygame  # type: ignore

from .clock import Driver
from .config import (
    WIDTH, HUD_H, BOARD_PX,
    UP, DOWN, LEFT, RIGHT,
    CFG,
)
from .game import GameState

logger = logging.getLogger(__name__)

SPEED_STEP = 0.1

KEY_DIRECTIONS = {
    pygame.K_UP: UP, pygame.K_w: UP,
    pygame.K_DOWN: DOWN, pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT, pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT, pygame.K_d: RIGHT,
}
FASTER_KEYS = (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS)
SLOWER_KEYS = (pygame.K_MINUS, pygame.K_KP_MINUS)


def classify_swipe(dx: float, dy: float, threshold: float = CFG.swipe_threshold) -> Optional[Tuple[int, int]]:
    """
    Gesture displacement (px) -> direction, or None for a tap.
    A gesture counts as a swipe once either axis reaches the threshold;
    the dominant axis wins, ties go vertical.
    """
    if abs(dx) < threshold and abs(dy) < threshold:
        return None
    if abs(dx) > abs(dy):
        return RIGHT if dx > 0 else LEFT
    return DOWN if dy > 0 else UP


# ---------- Layout ----------
def _default_dpad(top: int) -> Dict[Tuple[int, int], pygame.Rect]:
    cx = WIDTH - 80
    return {
        UP:    pygame.Rect(cx - 18, top + 6, 36, 36),
        LEFT:  pygame.Rect(cx - 58, top + 46, 36, 36),
        RIGHT: pygame.Rect(cx + 22, top + 46, 36, 36),
        DOWN:  pygame.Rect(cx - 18, top + 86, 36, 36),
    }

@dataclass
class Layout:
    """Screen regions shared by the renderer (to draw) and the adapter (to hit-test)."""
    board: pygame.Rect = field(default_factory=lambda: pygame.Rect(0, HUD_H, BOARD_PX, BOARD_PX))
    pause_button: pygame.Rect = field(default_factory=lambda: pygame.Rect(12, HUD_H + BOARD_PX + 16, 110, 36))
    restart_button: pygame.Rect = field(default_factory=lambda: pygame.Rect(12, HUD_H + BOARD_PX + 70, 110, 36))
    slider: pygame.Rect = field(default_factory=lambda: pygame.Rect(150, HUD_H + BOARD_PX + 72, 220, 10))
    dpad: Dict[Tuple[int, int], pygame.Rect] = field(default_factory=lambda: _default_dpad(HUD_H + BOARD_PX))

    def slider_value(self, x: int) -> float:
        """Pixel x on the slider track -> normalized value in [0, 1]."""
        t = (x - self.slider.left) / max(self.slider.width, 1)
        return min(max(t, 0.0), 1.0)


# ---------- Adapter ----------
class InputAdapter:
    def __init__(
        self,
        state: GameState,
        driver: Driver,
        layout: Optional[Layout] = None,
        swipe_threshold: int = CFG.swipe_threshold,
    ):
        self.state = state
        self.driver = driver
        self.layout = layout or Layout()
        self.swipe_threshold = swipe_threshold
        self.gesture_start: Optional[Tuple[int, int]] = None
        self.dragging_slider = False

    def handle_events(self) -> bool:
        """Drain the pygame event queue. Return False to quit."""
        for event in pygame.event.get():
            if not self.handle(event):
                return False
        return True

    def handle(self, event) -> bool:
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            self._on_key(event.key)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._on_press(event.pos)
        elif event.type == pygame.MOUSEMOTION and self.dragging_slider:
            self.driver.set_speed(self.layout.slider_value(event.pos[0]))
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self._on_release(event.pos)
        return True

    def _on_key(self, key: int) -> None:
        if key in KEY_DIRECTIONS:
            self.state.set_direction(*KEY_DIRECTIONS[key])
        elif key == pygame.K_SPACE:
            self.state.toggle_pause()
        elif key == pygame.K_r:
            self.state.restart()
        elif key in FASTER_KEYS:
            self.driver.set_speed(self.driver.speed + SPEED_STEP)
            logger.debug("Speed %.1f -> %d ms/tick", self.driver.speed, self.driver.interval_ms)
        elif key in SLOWER_KEYS:
            self.driver.set_speed(self.driver.speed - SPEED_STEP)
            logger.debug("Speed %.1f -> %d ms/tick", self.driver.speed, self.driver.interval_ms)

    def _on_press(self, pos: Tuple[int, int]) -> None:
        layout = self.layout
        if layout.board.collidepoint(pos):
            self.gesture_start = pos
        elif layout.pause_button.collidepoint(pos):
            self.state.toggle_pause()
        elif layout.restart_button.collidepoint(pos):
            self.state.restart()
        elif layout.slider.inflate(0, 16).collidepoint(pos):
            self.dragging_slider = True
            self.driver.set_speed(layout.slider_value(pos[0]))
        else:
            for direction, rect in layout.dpad.items():
                if rect.collidepoint(pos):
                    self.state.set_direction(*direction)
                    break

    def _on_release(self, pos: Tuple[int, int]) -> None:
        self.dragging_slider = False
        if self.gesture_start is None:
            return
        sx, sy = self.gesture_start
        self.gesture_start = None
        direction = classify_swipe(pos[0] - sx, pos[1] - sy, self.swipe_threshold)
        if direction is None:
            self.state.toggle_pause()
        else:
            self.state.set_direction(*direction)
