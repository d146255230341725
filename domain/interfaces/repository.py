"""Interfaces for the collaborators around trajectory reconstruction."""
from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities import CachedTrajectoryRow, MatchOutcome, PlayerRankAnchor, TrajectoryPoint
from ..enums import Region


class IMatchHistoryRepository(ABC):
    """Source of recent ranked solo outcomes."""

    @abstractmethod
    async def get_recent_ranked_outcomes(
        self,
        region: Region,
        puuid: str,
        count: int = 10,
    ) -> List[MatchOutcome]:
        """Newest first, at most ``count`` entries, remakes excluded."""
        pass


class IRankAnchorRepository(ABC):
    """Source of a player's current solo-queue rank."""

    @abstractmethod
    async def get_anchor(self, region: Region, puuid: str) -> Optional[PlayerRankAnchor]:
        """Current rank, or None when the player is unranked."""
        pass


class IProgressCache(ABC):
    """Write-once store of trajectory points."""

    @abstractmethod
    def store(self, puuid: str, match_id: str, point: TrajectoryPoint) -> bool:
        """Insert if absent. Returns True when a row was written."""
        pass

    @abstractmethod
    def get(self, puuid: str, match_id: str) -> Optional[CachedTrajectoryRow]:
        pass

    @abstractmethod
    def list_for_player(self, puuid: str) -> List[CachedTrajectoryRow]:
        pass
