from typing import Iterable, List, Tuple

from scoreboard.models import Match


def rank_key(match: Match) -> Tuple[int, float, int]:
    """Higher total first; equal totals keep the earlier-started match ahead."""
    return (-match.total_score, match.start_time, match.sequence)


def rank(matches: Iterable[Match]) -> List[Match]:
    return sorted(matches, key=rank_key)


def format_summary(matches: Iterable[Match]) -> List[str]:
    return [f"{i}. {m}" for i, m in enumerate(matches, start=1)]
