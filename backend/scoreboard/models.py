import itertools
import time

_sequence = itertools.count()


class Match:
    """One active contest between two teams."""

    __slots__ = ('_home_team', '_away_team', 'home_score', 'away_score', '_start_time', '_sequence')

    def __init__(self, home_team: str, away_team: str, start_time: float = None):
        self._home_team = home_team
        self._away_team = away_team
        self.home_score = 0
        self.away_score = 0
        self._start_time = time.time() if start_time is None else start_time
        # breaks ties between matches created within the same clock tick
        self._sequence = next(_sequence)

    @property
    def home_team(self) -> str:
        return self._home_team

    @property
    def away_team(self) -> str:
        return self._away_team

    @property
    def start_time(self) -> float:
        return self._start_time

    @property
    def sequence(self) -> int:
        return self._sequence

    @property
    def total_score(self) -> int:
        return self.home_score + self.away_score

    def update_score(self, home_score: int, away_score: int) -> None:
        self.home_score = home_score
        self.away_score = away_score

    def copy(self) -> 'Match':
        clone = Match.__new__(Match)
        clone._home_team = self._home_team
        clone._away_team = self._away_team
        clone.home_score = self.home_score
        clone.away_score = self.away_score
        clone._start_time = self._start_time
        clone._sequence = self._sequence
        return clone

    def to_dict(self):
        return {
            'home_team': self.home_team,
            'away_team': self.away_team,
            'home_score': self.home_score,
            'away_score': self.away_score,
            'total_score': self.total_score,
            'start_time': self.start_time,
        }

    def __str__(self):
        return f"{self.home_team} {self.home_score} - {self.away_score} {self.away_team}"

    def __repr__(self):
        return f"<Match {self}>"
