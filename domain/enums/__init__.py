"""Domain enumerations."""
from .division import Division
from .match_result import MatchResult
from .queue_type import QueueType
from .region import Region
from .tier import Tier

__all__ = [
    'Division',
    'MatchResult',
    'QueueType',
    'Region',
    'Tier',
]
