"""Application layer - Trajectory services, cache and use cases."""
from .services import ProgressCache
from .use_cases import ComputeRankProgressUseCase, RankProgressRequest, RankProgressResult

__all__ = [
    'ProgressCache',
    'ComputeRankProgressUseCase',
    'RankProgressRequest',
    'RankProgressResult',
]
