"""Domain interfaces."""
from .repository import IMatchHistoryRepository, IRankAnchorRepository, IProgressCache

__all__ = [
    'IMatchHistoryRepository',
    'IRankAnchorRepository',
    'IProgressCache',
]
