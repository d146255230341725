"""Presentation layer - User interfaces."""
from .cli import ProgressCommand, CacheCheckCommand, PurgeCacheCommand

__all__ = [
    "ProgressCommand",
    "CacheCheckCommand",
    "PurgeCacheCommand",
]
