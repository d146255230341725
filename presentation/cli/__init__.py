"""Presentation CLI exports."""
from .progress_command import ProgressCommand
from .cache_check_command import CacheCheckCommand
from .purge_cache_command import PurgeCacheCommand

__all__ = [
    "ProgressCommand",
    "CacheCheckCommand",
    "PurgeCacheCommand",
]
