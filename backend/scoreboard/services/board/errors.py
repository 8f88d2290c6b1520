"""Errors raised by the scoreboard store."""


class ScoreboardError(Exception):
    """Base class for rejected scoreboard operations."""

    def __init__(self, message: str, position=None):
        super().__init__(message)
        self.message = message
        self.position = position


class InvalidArgument(ScoreboardError, ValueError):
    """Empty team name or negative score."""


class IndexOutOfRange(ScoreboardError, IndexError):
    """Position does not address an active match."""
