"""Current solo-queue rank from league-v4."""
from typing import Optional

from core.logging.logger import get_logger
from domain.entities import PlayerRankAnchor, RankPoint
from domain.enums import Division, QueueType, Region, Tier
from domain.exceptions import HistoryFetchError
from domain.interfaces import IRankAnchorRepository
from infrastructure.api import RiotAPIClient

logger = get_logger(__name__, service="rank-anchor")


class RankAnchorRepository(IRankAnchorRepository):
    """Builds the anchor from the player's RANKED_SOLO_5x5 league entry."""

    def __init__(self, api_client: RiotAPIClient):
        self.api_client = api_client

    async def get_anchor(self, region: Region, puuid: str) -> Optional[PlayerRankAnchor]:
        entries = await self.api_client.get_league_entries_by_puuid(region, puuid)
        if entries is None:
            raise HistoryFetchError(
                f"League entries unavailable for {puuid} (HTTP {self.api_client.last_status_code})"
            )

        solo = next(
            (e for e in entries if e.get('queueType') == QueueType.RANKED_SOLO_5x5.api_queue_name),
            None,
        )
        if solo is None:
            logger.info(lambda: f"{puuid} is unranked in solo queue")
            return None

        try:
            current = RankPoint(
                tier=Tier.from_string(solo['tier']),
                division=Division.from_string(solo['rank']),
                points=int(solo['leaguePoints']),
            )
        except (KeyError, ValueError, TypeError) as e:
            raise HistoryFetchError(f"Malformed league entry for {puuid}: {e}") from e
        return PlayerRankAnchor(puuid=puuid, current=current)
