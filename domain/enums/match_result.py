"""Match result enumeration."""
from enum import Enum


class MatchResult(Enum):
    """Outcome of a ranked game as shown on the LP chart."""

    WIN = "Win"
    LOSS = "Loss"

    @classmethod
    def from_win(cls, win: bool | None) -> 'MatchResult':
        """Anything other than an explicit win counts as a loss."""
        return cls.WIN if win is True else cls.LOSS
