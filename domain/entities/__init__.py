"""Domain entities."""
from .rank_point import RankPoint
from .match_outcome import MatchOutcome
from .player_rank_anchor import PlayerRankAnchor
from .trajectory_point import TrajectoryPoint, CachedTrajectoryRow

__all__ = [
    'RankPoint',
    'MatchOutcome',
    'PlayerRankAnchor',
    'TrajectoryPoint',
    'CachedTrajectoryRow',
]
