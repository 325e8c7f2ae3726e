# errors.py


class SnakeError(Exception):
    """Base class for errors raised by the snake package."""


class PersistenceUnavailable(SnakeError):
    """The high-score store could not be read or written."""


class BoardFull(SnakeError):
    """Every cell is covered by the snake; there is nowhere to put food."""
