"""Scoreboard domain services: the in-memory match store and its ranking.

HTTP routes and CLI commands import from here, keeping transport concerns
separated from the store's validation, ordering and locking rules.
"""

from .errors import IndexOutOfRange, InvalidArgument, ScoreboardError
from .ranking import format_summary, rank, rank_key
from .store import ScoreboardStore

__all__ = [
    'IndexOutOfRange',
    'InvalidArgument',
    'ScoreboardError',
    'ScoreboardStore',
    'format_summary',
    'rank',
    'rank_key',
]
