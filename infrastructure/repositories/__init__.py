"""Infrastructure repositories module."""
from .match_history_repository import MatchHistoryRepository
from .rank_anchor_repository import RankAnchorRepository

__all__ = [
    'MatchHistoryRepository',
    'RankAnchorRepository',
]
