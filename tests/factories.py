"""Builders and fakes shared by the test modules."""
from typing import List, Optional

from domain.entities import MatchOutcome
from domain.enums import Region
from domain.interfaces import IMatchHistoryRepository


class FakeHistory(IMatchHistoryRepository):
    """In-memory match history; records every call."""

    def __init__(self, outcomes: Optional[List[MatchOutcome]] = None, error: Optional[Exception] = None):
        self.outcomes = list(outcomes or [])
        self.error = error
        self.calls: list[tuple[Region, str, int]] = []

    async def get_recent_ranked_outcomes(self, region, puuid, count=10):
        self.calls.append((region, puuid, count))
        if self.error is not None:
            raise self.error
        return self.outcomes[:count]


def outcome(match_id: str, win, played_at: int = 0) -> MatchOutcome:
    return MatchOutcome(match_id=match_id, played_at=played_at, win=win)


def newest_first(*results) -> List[MatchOutcome]:
    """Outcomes m<n>..m1 from win/loss flags given newest first; timestamps descend."""
    n = len(results)
    return [
        outcome(f"m{n - i}", win, played_at=1_700_000_000_000 + (n - i) * 60_000)
        for i, win in enumerate(results)
    ]
