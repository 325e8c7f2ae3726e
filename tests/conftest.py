import os
import random

# pygame draws into off-screen surfaces; no window or audio device needed
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest  # noqa: E402

from snake.config import RIGHT  # noqa: E402
from snake.game import GameState, RunStatus  # noqa: E402
from snake.storage import MemoryHighScoreStore  # noqa: E402


@pytest.fixture
def store():
    return MemoryHighScoreStore()


@pytest.fixture
def make_state(store):
    """Build a GameState with an explicit body, direction and food."""
    def _make(snake, direction=RIGHT, food=(0, 0), grid_size=24, score=0, high_score=0):
        return GameState(
            snake=list(snake),
            direction=direction,
            pending=direction,
            food=food,
            score=score,
            high_score=high_score,
            status=RunStatus.RUNNING,
            grid_size=grid_size,
            rng=random.Random(7),
            store=store,
        )

    return _make
