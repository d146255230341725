"""Ranked match outcome as supplied by match history."""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class MatchOutcome:
    """One ranked solo game, remakes already excluded.

    ``win`` is ``None`` when the history entry did not carry a usable result.
    """

    match_id: str
    played_at: int  # Unix timestamp milliseconds
    win: Optional[bool]

    @property
    def played_date(self) -> datetime:
        return datetime.fromtimestamp(self.played_at / 1000)

    def to_dict(self) -> dict:
        return {
            'match_id': self.match_id,
            'played_at': self.played_at,
            'win': self.win,
        }
