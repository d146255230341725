"""The player's authoritative current rank."""
from dataclasses import dataclass

from .rank_point import RankPoint


@dataclass(frozen=True)
class PlayerRankAnchor:
    """Fixes the newest end of a reconstructed trajectory."""

    puuid: str
    current: RankPoint

    def to_dict(self) -> dict:
        return {'puuid': self.puuid, 'current': self.current.to_dict()}
