"""Reconstructed trajectory points and their persisted form."""
from dataclasses import dataclass
from typing import Optional

from ..enums import Division, MatchResult, Tier
from .rank_point import RankPoint


@dataclass(frozen=True)
class TrajectoryPoint:
    """Rank before and after one match."""

    label_index: int
    before: RankPoint
    after: RankPoint
    delta: int
    result: MatchResult
    match_id: str
    exact: bool = False
    played_at: Optional[int] = None

    @property
    def rank_changed(self) -> bool:
        return not self.before.same_rank(self.after)

    def to_dict(self) -> dict:
        return {
            'label_index': self.label_index,
            'match_id': self.match_id,
            'lp_before': self.before.points,
            'lp_after': self.after.points,
            'lp_delta': self.delta,
            'result': self.result.value,
            'tier_before': self.before.tier.value,
            'division_before': self.before.division.value,
            'tier_after': self.after.tier.value,
            'division_after': self.after.division.value,
            'exact': self.exact,
            'played_at': self.played_at,
        }


@dataclass(frozen=True)
class CachedTrajectoryRow:
    """A stored TrajectoryPoint keyed by ``(puuid, match_id)``. Write-once."""

    puuid: str
    match_id: str
    label_index: int
    lp_before: int
    lp_after: int
    lp_delta: int
    result: str
    tier_before: str
    division_before: str
    tier_after: str
    division_after: str
    exact: bool
    game_creation: Optional[int] = None
    created_at: Optional[str] = None

    @classmethod
    def from_point(cls, puuid: str, point: TrajectoryPoint) -> 'CachedTrajectoryRow':
        return cls(
            puuid=puuid,
            match_id=point.match_id,
            label_index=point.label_index,
            lp_before=point.before.points,
            lp_after=point.after.points,
            lp_delta=point.delta,
            result=point.result.value,
            tier_before=point.before.tier.value,
            division_before=point.before.division.value,
            tier_after=point.after.tier.value,
            division_after=point.after.division.value,
            exact=point.exact,
            game_creation=point.played_at,
        )

    def to_point(self) -> TrajectoryPoint:
        return TrajectoryPoint(
            label_index=self.label_index,
            before=RankPoint(Tier(self.tier_before), Division(self.division_before), self.lp_before),
            after=RankPoint(Tier(self.tier_after), Division(self.division_after), self.lp_after),
            delta=self.lp_delta,
            result=MatchResult(self.result),
            match_id=self.match_id,
            exact=self.exact,
            played_at=self.game_creation,
        )

    def to_dict(self) -> dict:
        return {
            'puuid': self.puuid,
            'match_id': self.match_id,
            'label_index': self.label_index,
            'lp_before': self.lp_before,
            'lp_after': self.lp_after,
            'lp_delta': self.lp_delta,
            'result': self.result,
            'tier_before': self.tier_before,
            'division_before': self.division_before,
            'tier_after': self.tier_after,
            'division_after': self.division_after,
            'exact': self.exact,
            'game_creation': self.game_creation,
            'created_at': self.created_at,
        }
