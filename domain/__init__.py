"""Domain layer - Value objects, enums, errors and interfaces."""
from .entities import (
    RankPoint,
    MatchOutcome,
    PlayerRankAnchor,
    TrajectoryPoint,
    CachedTrajectoryRow,
)
from .enums import Division, MatchResult, QueueType, Region, Tier
from .exceptions import (
    RankProgressError,
    AnchorValidationError,
    WindowValidationError,
    HistoryFetchError,
    CacheWriteError,
)
from .interfaces import IMatchHistoryRepository, IRankAnchorRepository, IProgressCache

__all__ = [
    # Entities
    'RankPoint',
    'MatchOutcome',
    'PlayerRankAnchor',
    'TrajectoryPoint',
    'CachedTrajectoryRow',
    # Enums
    'Division',
    'MatchResult',
    'QueueType',
    'Region',
    'Tier',
    # Errors
    'RankProgressError',
    'AnchorValidationError',
    'WindowValidationError',
    'HistoryFetchError',
    'CacheWriteError',
    # Interfaces
    'IMatchHistoryRepository',
    'IRankAnchorRepository',
    'IProgressCache',
]
