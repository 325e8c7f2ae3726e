"""
Tests for snake.storage - the best-effort high score stores.
"""

import json

import pytest

from snake.errors import PersistenceUnavailable
from snake.game import new_game_state
from snake.storage import JsonHighScoreStore, MemoryHighScoreStore


def test_missing_file_reads_zero(tmp_path):
    store = JsonHighScoreStore(str(tmp_path / "scores.json"))
    assert store.load_high_score() == 0


def test_save_then_load(tmp_path):
    path = tmp_path / "nested" / "scores.json"
    store = JsonHighScoreStore(str(path))
    store.save_high_score(12)
    assert json.loads(path.read_text()) == {"snake_high_score": 12}
    assert JsonHighScoreStore(str(path)).load_high_score() == 12


def test_save_keeps_other_keys(tmp_path):
    path = tmp_path / "scores.json"
    path.write_text(json.dumps({"volume": 3, "snake_high_score": 1}))
    JsonHighScoreStore(str(path)).save_high_score(4)
    assert json.loads(path.read_text()) == {"volume": 3, "snake_high_score": 4}


@pytest.mark.parametrize("payload", ["not json", "[1, 2]", '{"snake_high_score": "abc"}',
                                     '{"snake_high_score": -5}', '{"snake_high_score": null}',
                                     '{"snake_high_score": 1e999}'])
def test_corrupt_values_read_zero(tmp_path, payload):
    path = tmp_path / "scores.json"
    path.write_text(payload)
    assert JsonHighScoreStore(str(path)).load_high_score() == 0


def test_numeric_string_is_accepted(tmp_path):
    path = tmp_path / "scores.json"
    path.write_text('{"snake_high_score": "7"}')
    assert JsonHighScoreStore(str(path)).load_high_score() == 7


def test_unwritable_location_raises(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("")
    store = JsonHighScoreStore(str(blocker / "scores.json"))
    with pytest.raises(PersistenceUnavailable):
        store.save_high_score(3)


def test_unreadable_path_raises(tmp_path):
    # a directory where the file should be
    store = JsonHighScoreStore(str(tmp_path))
    with pytest.raises(PersistenceUnavailable):
        store.load_high_score()


def test_custom_key(tmp_path):
    path = tmp_path / "scores.json"
    JsonHighScoreStore(str(path), key="other").save_high_score(2)
    assert json.loads(path.read_text()) == {"other": 2}


def test_memory_store():
    store = MemoryHighScoreStore(initial=3)
    assert store.load_high_score() == 3
    store.save_high_score(8)
    assert store.load_high_score() == 8


def test_non_utf8_file_reads_zero(tmp_path):
    path = tmp_path / "scores.json"
    path.write_bytes(b'\xff\xfe{"snake_high_score": 3}')
    assert JsonHighScoreStore(str(path)).load_high_score() == 0


def test_non_utf8_file_does_not_break_a_new_high_score(tmp_path):
    path = tmp_path / "scores.json"
    path.write_bytes(b"\xff\xff")
    state = new_game_state(JsonHighScoreStore(str(path)), seed=1)
    assert state.high_score == 0
    state.food = (7, 12)
    assert state.tick() is True
    assert state.high_score == 1
    assert json.loads(path.read_text()) == {"snake_high_score": 1}


def test_unreadable_file_is_not_overwritten(tmp_path):
    # a directory where the file should be: the read fails, nothing is written
    store = JsonHighScoreStore(str(tmp_path))
    with pytest.raises(PersistenceUnavailable):
        store.save_high_score(5)
    assert not (tmp_path.parent / (tmp_path.name + ".tmp")).exists()


def test_failed_replace_removes_temp_file(tmp_path):
    # the target is a non-empty directory, so os.replace fails after the temp write
    target = tmp_path / "scores.json"
    target.mkdir()
    (target / "keep").write_text("")
    store = JsonHighScoreStore(str(target))
    store._read = lambda: {}
    with pytest.raises(PersistenceUnavailable):
        store.save_high_score(5)
    assert not (tmp_path / "scores.json.tmp").exists()
