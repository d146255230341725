"""Infrastructure layer - Riot API client and repositories."""
from .api import RiotAPIClient, RateLimiter, EndpointRateLimiter
from .repositories import MatchHistoryRepository, RankAnchorRepository

__all__ = [
    'RiotAPIClient',
    'RateLimiter',
    'EndpointRateLimiter',
    'MatchHistoryRepository',
    'RankAnchorRepository',
]
