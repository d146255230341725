from __future__ import annotations

from config import settings
from core.logging.logger import get_logger
from domain.enums import Region
from domain.exceptions import RankProgressError
from infrastructure import MatchHistoryRepository, RankAnchorRepository, RiotAPIClient
from application.services import ProgressCache
from application.use_cases import ComputeRankProgressUseCase, RankProgressRequest
from .trajectory_view import render_result


class ProgressCommand:
    """Interactive LP trajectory lookup."""

    def __init__(self) -> None:
        self.log = get_logger(__name__, service="progress-cli")

    def _ask_region(self) -> Region:
        raw = input(f"Region [{settings.DEFAULT_REGION}]: ").strip() or settings.DEFAULT_REGION
        return Region.from_string(raw)

    async def run(self, *, live: bool = False) -> None:
        try:
            settings.validate()
            settings.create_directories()
            region = self._ask_region()
        except ValueError as e:
            print(f"Error: {e}", flush=True)
            return

        puuid = input("PUUID: ").strip()
        request = None
        if not live:
            request = RankProgressRequest(
                puuid=puuid,
                current_tier=input("Current tier (e.g. GOLD): ").strip(),
                current_division=input("Current division (I-IV): ").strip(),
                current_points=input("Current LP: ").strip(),
                region=region,
            )

        cache = ProgressCache(settings.cache_db_path)
        try:
            async with RiotAPIClient(settings.RIOT_API_KEY) as api:
                use_case = ComputeRankProgressUseCase(
                    history=MatchHistoryRepository(api),
                    cache=cache,
                    anchors=RankAnchorRepository(api),
                    default_region=region,
                )
                if live:
                    result = await use_case.execute_live(region, puuid)
                else:
                    result = await use_case.execute(request)
        except RankProgressError as e:
            self.log.error(lambda: f"rank-progress-failed {type(e).__name__}: {e}")
            print(f"Error: {e}", flush=True)
            return
        finally:
            cache.close()

        print("", flush=True)
        for line in render_result(result):
            print(line, flush=True)
        self.log.success(lambda: f"rank-progress-ok {puuid} points={len(result.points)}")
