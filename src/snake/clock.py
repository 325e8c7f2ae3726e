# clock.py
from __future__ import annotations
from typing import Callable, Optional

from .config import CFG
from .game import GameState, Snapshot

Sink = Callable[[Snapshot], None]


def speed_to_ms(t: float, min_ms: int = CFG.min_tick_ms, max_ms: int = CFG.max_tick_ms) -> int:
    """
    Slider position -> tick interval.
    t=0 is the slowest setting (max_ms), t=1 the fastest (min_ms).
    """
    t = min(max(t, 0.0), 1.0)
    return round(max_ms - t * (max_ms - min_ms))


class Driver:
    """
    Fixed-rate scheduler driven by the host's frame loop.

    Call frame(now_ms) once per presentation frame with a monotonic
    timestamp. At most one tick fires per frame, and after firing the
    baseline jumps to the frame time instead of advancing by the interval,
    so the tick rate follows frame timing. The sink is fed a snapshot
    every frame whether or not a tick fired.
    """

    def __init__(
        self,
        state: GameState,
        sink: Optional[Sink] = None,
        speed: float = CFG.initial_speed,
        min_ms: int = CFG.min_tick_ms,
        max_ms: int = CFG.max_tick_ms,
    ):
        self.state = state
        self.sink = sink
        self.min_ms = min_ms
        self.max_ms = max_ms
        self.speed = 0.0
        self.interval_ms = max_ms
        self.last_tick: Optional[int] = None
        self.set_speed(speed)

    def set_speed(self, t: float) -> None:
        """Takes effect on the next frame check."""
        self.speed = min(max(t, 0.0), 1.0)
        self.interval_ms = speed_to_ms(self.speed, self.min_ms, self.max_ms)

    def frame(self, now_ms: int) -> bool:
        """Run one frame. Returns True if tick() was called this frame."""
        if self.last_tick is None:
            self.last_tick = now_ms

        ticked = False
        if now_ms - self.last_tick >= self.interval_ms:
            # tick() itself is a no-op while paused or over
            self.state.tick()
            self.last_tick = now_ms
            ticked = True

        if self.sink is not None:
            self.sink(self.state.snapshot())
        return ticked
