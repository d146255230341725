"""Infrastructure API module."""
from .riot_client import RiotAPIClient
from .rate_limiter import RateLimiter, EndpointRateLimiter

__all__ = [
    'RiotAPIClient',
    'RateLimiter',
    'EndpointRateLimiter',
]
