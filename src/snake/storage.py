# storage.py
"""
High-score persistence.

The game only needs one integer kept under a fixed key. Stores are
best-effort: a missing or corrupt value reads as 0, and backend failures
surface as PersistenceUnavailable so the caller can log and carry on.
"""
from __future__ import annotations
import json
import logging
import os
from typing import Dict, Protocol

from .config import HIGH_SCORE_KEY
from .errors import PersistenceUnavailable

logger = logging.getLogger(__name__)


class HighScoreStore(Protocol):
    def load_high_score(self) -> int: ...
    def save_high_score(self, value: int) -> None: ...


def _coerce_score(raw) -> int:
    """Stored value -> non-negative int, or 0 if it is not one."""
    if isinstance(raw, bool):
        return 0
    try:
        value = int(raw)
    except (TypeError, ValueError, OverflowError):
        return 0
    return value if value >= 0 else 0


class MemoryHighScoreStore:
    """Keeps the score in a dict; used when no file is wanted (and in tests)."""

    def __init__(self, initial: int = 0, key: str = HIGH_SCORE_KEY):
        self.key = key
        self.data: Dict[str, object] = {key: initial}

    def load_high_score(self) -> int:
        return _coerce_score(self.data.get(self.key, 0))

    def save_high_score(self, value: int) -> None:
        self.data[self.key] = int(value)


class JsonHighScoreStore:
    """
    Small JSON key-value file, e.g. {"snake_high_score": 17}.
    Other keys in the file are preserved on save.
    """

    def __init__(self, path: str, key: str = HIGH_SCORE_KEY):
        self.path = path
        self.key = key

    def _read(self) -> Dict[str, object]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except ValueError:
            # bad JSON or bytes that are not UTF-8
            logger.warning("Ignoring corrupt high score file %s", self.path)
            return {}
        except OSError as exc:
            raise PersistenceUnavailable(f"cannot read {self.path}: {exc}") from exc
        if not isinstance(data, dict):
            logger.warning("Ignoring unexpected high score payload in %s", self.path)
            return {}
        return data

    def load_high_score(self) -> int:
        data = self._read()
        if self.key not in data:
            return 0
        value = _coerce_score(data[self.key])
        if value == 0 and data[self.key] != 0:
            logger.warning("High score %r in %s is not a valid score; using 0", data[self.key], self.path)
        return value

    def save_high_score(self, value: int) -> None:
        # a failed read propagates; the file may hold keys we must not clobber
        data = self._read()
        data[self.key] = int(value)

        tmp_path = self.path + ".tmp"
        try:
            parent = os.path.dirname(self.path)
            if parent:
                os.makedirs(parent, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(data, f)
            os.replace(tmp_path, self.path)
        except OSError as exc:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise PersistenceUnavailable(f"cannot write {self.path}: {exc}") from exc
        logger.debug("Saved high score %d to %s", value, self.path)
