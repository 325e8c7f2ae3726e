"""
Tests for snake.clock - speed mapping and the frame-driven tick scheduler.
"""

from snake.clock import Driver, speed_to_ms
from snake.game import RunStatus


def test_speed_to_ms_endpoints():
    assert speed_to_ms(0.0) == 220
    assert speed_to_ms(1.0) == 60
    assert speed_to_ms(0.5) == 140


def test_speed_to_ms_rounds_and_clamps():
    assert speed_to_ms(0.33) == round(220 - 0.33 * 160)
    assert speed_to_ms(-1.0) == 220
    assert speed_to_ms(2.0) == 60


class TestDriver:
    def _state(self, make_state):
        return make_state([(6, 12), (5, 12), (4, 12)], food=(0, 0))

    def test_first_frame_sets_baseline(self, make_state):
        state = self._state(make_state)
        driver = Driver(state, speed=1.0)
        assert driver.frame(1000) is False
        assert state.snake[0] == (6, 12)

    def test_ticks_once_interval_elapsed(self, make_state):
        state = self._state(make_state)
        driver = Driver(state, speed=1.0)     # 60 ms
        driver.frame(0)
        assert driver.frame(59) is False
        assert driver.frame(60) is True
        assert state.snake[0] == (7, 12)

    def test_baseline_resets_to_frame_time(self, make_state):
        """A late frame does not leave a backlog: the next tick waits a full interval."""
        state = self._state(make_state)
        driver = Driver(state, speed=1.0)
        driver.frame(0)
        assert driver.frame(150) is True      # 2.5 intervals late, still one tick
        assert driver.last_tick == 150
        assert driver.frame(200) is False
        assert driver.frame(210) is True
        assert state.snake[0] == (8, 12)

    def test_sink_gets_every_frame(self, make_state):
        state = self._state(make_state)
        frames = []
        driver = Driver(state, sink=frames.append, speed=0.0)
        for now in range(0, 100, 16):
            driver.frame(now)
        assert len(frames) == 7
        assert all(f.snake[0] == (6, 12) for f in frames)

    def test_paused_game_keeps_rendering(self, make_state):
        state = self._state(make_state)
        frames = []
        driver = Driver(state, sink=frames.append, speed=1.0)
        state.toggle_pause()
        driver.frame(0)
        driver.frame(100)
        driver.frame(200)
        assert len(frames) == 3
        assert state.snake[0] == (6, 12)
        assert frames[-1].status is RunStatus.PAUSED

    def test_speed_change_applies_on_next_check(self, make_state):
        state = self._state(make_state)
        driver = Driver(state, speed=0.0)     # 220 ms
        driver.frame(0)
        assert driver.frame(100) is False
        driver.set_speed(1.0)
        assert driver.interval_ms == 60
        assert driver.frame(100) is True
