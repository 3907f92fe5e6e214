# errors.py


class SnakeError(Exception):
    """Base class for errors raised by the snake package."""


class BoardFullError(SnakeError):
    """No free cell is left to place food on."""
