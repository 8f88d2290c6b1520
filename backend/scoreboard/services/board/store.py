import logging
import threading
from typing import List

from scoreboard.models import Match
from .errors import IndexOutOfRange, InvalidArgument
from .ranking import format_summary, rank

logger = logging.getLogger(__name__)


class ScoreboardStore:
    """Thread-safe in-memory collection of active matches.

    Matches are addressed by position in the store's current ordering.
    With ``reorder_on_summary`` enabled (the default), reading a summary
    also rewrites that ordering into ranked order, so positions used after
    a summary call refer to rank. With it disabled the summary is a pure
    projection and positions always follow insertion order.

    Every public method holds a single lock for its whole body; callers
    only ever receive detached copies of the stored matches.
    """

    def __init__(self, reorder_on_summary: bool = True):
        self.reorder_on_summary = reorder_on_summary
        self._matches: List[Match] = []
        self._lock = threading.Lock()

    def __len__(self):
        with self._lock:
            return len(self._matches)

    def start_match(self, home_team: str, away_team: str) -> int:
        """Append a new 0-0 match and return its position."""
        if not _is_team_name(home_team) or not _is_team_name(away_team):
            raise InvalidArgument('Team names cannot be null or empty')
        with self._lock:
            # created under the lock so start times follow append order
            self._matches.append(Match(home_team, away_team))
            position = len(self._matches) - 1
        logger.info(f"[match-start] position={position} home={home_team} away={away_team}")
        return position

    def update_score(self, position: int, home_score: int, away_score: int) -> None:
        with self._lock:
            match = self._locate(position)
            if home_score < 0 or away_score < 0:
                raise InvalidArgument('Scores cannot be negative.', position=position)
            match.update_score(home_score, away_score)
        logger.info(f"[match-score] position={position} score={home_score}-{away_score}")

    def finish_match(self, position: int) -> None:
        with self._lock:
            self._locate(position)
            finished = self._matches.pop(position)
        logger.info(f"[match-finish] position={position} match={finished}")

    def get_match(self, position: int) -> Match:
        with self._lock:
            return self._locate(position).copy()

    def get_summary(self) -> List[Match]:
        """Matches by descending total score, ties by earlier start."""
        with self._lock:
            ranked = rank(self._matches)
            if self.reorder_on_summary:
                self._matches = ranked
            return [m.copy() for m in ranked]

    def get_formatted_summary(self) -> List[str]:
        return format_summary(self.get_summary())

    def reset(self) -> None:
        with self._lock:
            dropped = len(self._matches)
            self._matches = []
        logger.info(f"[reset] dropped={dropped}")

    def _locate(self, position: int) -> Match:
        # Only addressing seam; callers hold the lock.
        if position < 0 or position >= len(self._matches):
            raise IndexOutOfRange('Match index is out of range.', position=position)
        return self._matches[position]


def _is_team_name(value) -> bool:
    return isinstance(value, str) and value != ''
