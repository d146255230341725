"""Riot Games API client (league-v4 and match-v5 only)."""
import asyncio
import time
from typing import Any, Dict, List, Optional

import httpx

from config import settings
from core.logging.logger import get_logger
from domain.enums import QueueType, Region
from .rate_limiter import EndpointRateLimiter, RateLimiter

logger = get_logger(__name__, service="riot-api")


class RiotAPIClient:
    """Asynchronous Riot API client with rate limiting and retries.

    Failed requests return ``None``; callers decide whether that is fatal.
    """

    def __init__(self, api_key: str, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.api_key = api_key
        self.session: Optional[httpx.AsyncClient] = None
        self.timeout = settings.REQUEST_TIMEOUT
        self.last_status_code: Optional[int] = None
        self._transport = transport
        self._endpoint_cooldown: dict[str, float] = {}

        self.rate_limiter = EndpointRateLimiter(
            RateLimiter(settings.RATE_LIMIT_PER_1_SEC, settings.RATE_LIMIT_PER_2_MIN)
        )
        self.rate_limiter.add_endpoint_limiter(
            "match", settings.MATCH_RATE_LIMIT_PER_1_SEC, settings.MATCH_RATE_LIMIT_PER_2_MIN
        )
        self.rate_limiter.add_endpoint_limiter(
            "league", settings.LEAGUE_RATE_LIMIT_PER_1_SEC, settings.LEAGUE_RATE_LIMIT_PER_2_MIN
        )

    async def __aenter__(self):
        http2 = False
        if self._transport is None:
            try:
                import h2  # type: ignore  # noqa: F401
                http2 = True
            except ImportError:
                pass
        self.session = httpx.AsyncClient(
            timeout=self.timeout,
            headers={"X-Riot-Token": self.api_key},
            http2=http2,
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *_):
        if self.session:
            await self.session.aclose()
            self.session = None

    @staticmethod
    def _platform_url(region: Region) -> str:
        return f"https://{region.platform_route}.api.riotgames.com"

    @staticmethod
    def _regional_url(region: Region) -> str:
        return f"https://{region.regional_route}.api.riotgames.com"

    async def _make_request(
        self,
        url: str,
        endpoint_type: str = "default",
        params: Optional[Dict[str, Any]] = None,
        max_retries: Optional[int] = None,
    ) -> Optional[Any]:
        if self.session is None:
            raise RuntimeError("RiotAPIClient must be used as an async context manager")
        if max_retries is None:
            max_retries = settings.MAX_RETRIES

        for attempt in range(max_retries + 1):
            try:
                cd = self._endpoint_cooldown.get(endpoint_type, 0.0)
                now = time.monotonic()
                if cd > now:
                    await asyncio.sleep(cd - now)

                await self.rate_limiter.acquire(endpoint_type)
                response = await self.session.get(url, params=params)
                self.last_status_code = response.status_code

                if response.status_code == 200:
                    return response.json()

                if response.status_code in (401, 403):
                    logger.error(lambda: f"{response.status_code} from Riot - check RIOT_API_KEY")
                    return None

                if response.status_code == 404:
                    logger.debug(lambda: f"404 for {url}")
                    return None

                if response.status_code == 429:
                    retry_after = int(response.headers.get("Retry-After", "5"))
                    logger.warning(lambda: f"429 rate-limited - waiting {retry_after}s")
                    self._endpoint_cooldown[endpoint_type] = time.monotonic() + retry_after
                    await self.rate_limiter.reset_endpoint(endpoint_type)
                    continue

                if response.status_code >= 500 and attempt < max_retries:
                    await asyncio.sleep(settings.RETRY_BACKOFF ** attempt)
                    continue

                logger.warning(lambda: f"HTTP {response.status_code} for {url}")
                return None

            except (httpx.TimeoutException, httpx.TransportError) as exc:
                logger.warning(lambda: f"network error on {url}: {exc!r}")
                if attempt < max_retries:
                    await asyncio.sleep(settings.RETRY_BACKOFF ** attempt)
                    continue
                return None

        return None

    # ── Match API ──────────────────────────────────────────────────────

    async def get_match_ids_by_puuid(
        self,
        region: Region,
        puuid: str,
        queue: QueueType = QueueType.RANKED_SOLO_5x5,
        start: int = 0,
        count: int = 10,
    ) -> Optional[List[str]]:
        url = f"{self._regional_url(region)}/lol/match/v5/matches/by-puuid/{puuid}/ids"
        params = {"queue": queue.queue_id, "start": start, "count": min(count, 100)}
        result = await self._make_request(url, "match", params=params)
        return result if isinstance(result, list) else None

    async def get_match_by_id(self, region: Region, match_id: str) -> Optional[Dict]:
        return await self._make_request(f"{self._regional_url(region)}/lol/match/v5/matches/{match_id}", "match")

    # ── League API ─────────────────────────────────────────────────────

    async def get_league_entries_by_puuid(self, region: Region, puuid: str) -> Optional[List[Dict]]:
        url = f"{self._platform_url(region)}/lol/league/v4/entries/by-puuid/{puuid}"
        result = await self._make_request(url, "league")
        return result if isinstance(result, list) else None
