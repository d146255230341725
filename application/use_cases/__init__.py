"""Application use cases."""
from .compute_rank_progress import (
    ComputeRankProgressUseCase,
    RankProgressRequest,
    RankProgressResult,
)

__all__ = [
    'ComputeRankProgressUseCase',
    'RankProgressRequest',
    'RankProgressResult',
]
