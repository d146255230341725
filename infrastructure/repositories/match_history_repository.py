"""Ranked solo match history backed by match-v5."""
import asyncio
from typing import List, Optional

from config import settings
from core.logging.logger import get_logger
from domain.entities import MatchOutcome
from domain.enums import QueueType, Region
from domain.exceptions import HistoryFetchError
from domain.interfaces import IMatchHistoryRepository
from infrastructure.api import RiotAPIClient

logger = get_logger(__name__, service="match-history")


class MatchHistoryRepository(IMatchHistoryRepository):
    """Recent ranked solo outcomes for one player.

    Any failed request fails the whole window; a partial history would
    shift every reconstructed point.
    """

    def __init__(self, api_client: RiotAPIClient, remake_max_duration_s: Optional[int] = None):
        """
        Args:
            api_client: open Riot API client
            remake_max_duration_s: games shorter than this are treated as remakes
        """
        self.api_client = api_client
        self.remake_max_duration_s = (
            settings.REMAKE_MAX_DURATION_S if remake_max_duration_s is None else remake_max_duration_s
        )

    async def get_recent_ranked_outcomes(
        self,
        region: Region,
        puuid: str,
        count: int = 10,
    ) -> List[MatchOutcome]:
        match_ids = await self.api_client.get_match_ids_by_puuid(
            region, puuid, queue=QueueType.RANKED_SOLO_5x5, count=count
        )
        if match_ids is None:
            raise HistoryFetchError(
                f"Match ids unavailable for {puuid} (HTTP {self.api_client.last_status_code})"
            )

        details = await asyncio.gather(
            *(self.api_client.get_match_by_id(region, mid) for mid in match_ids)
        )

        outcomes: List[MatchOutcome] = []
        for match_id, data in zip(match_ids, details):
            if not data:
                raise HistoryFetchError(f"Match {match_id} could not be fetched")
            outcome = self._parse_outcome(match_id, data, puuid)
            if outcome is not None:
                outcomes.append(outcome)

        outcomes.sort(key=lambda o: o.played_at, reverse=True)
        logger.debug(lambda: f"{len(outcomes)}/{len(match_ids)} ranked games kept for {puuid}")
        return outcomes[:count]

    def _parse_outcome(self, match_id: str, data: dict, puuid: str) -> Optional[MatchOutcome]:
        """None for games that do not count (other queue, remake)."""
        info = data.get('info', {})
        if info.get('queueId') != QueueType.RANKED_SOLO_5x5.queue_id:
            return None
        if info.get('gameDuration', 0) < self.remake_max_duration_s:
            logger.debug(lambda: f"skipping remake {match_id}")
            return None

        participant = next(
            (p for p in info.get('participants', []) if p.get('puuid') == puuid),
            None,
        )
        win = participant.get('win') if participant else None
        if not isinstance(win, bool):
            logger.warning(lambda: f"match {match_id} has no usable result for {puuid}")
            win = None

        return MatchOutcome(
            match_id=data.get('metadata', {}).get('matchId', match_id),
            played_at=info.get('gameCreation', 0),
            win=win,
        )
