"""Use case: reconstruct, annotate and cache a player's recent LP trajectory."""
from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any, List, Optional

from config import settings
from core.logging.context import context
from core.logging.logger import get_logger
from domain.entities import TrajectoryPoint
from domain.enums import Region
from domain.exceptions import AnchorValidationError, CacheWriteError
from domain.interfaces import IMatchHistoryRepository, IProgressCache, IRankAnchorRepository
from application.services.trajectory import BoundaryDetector, TrajectoryReconstructor, build_anchor

logger = get_logger(__name__, service="rank-progress")


@dataclass
class RankProgressRequest:
    """Raw values from the caller; validated by :meth:`execute`."""

    puuid: Any
    current_tier: Any
    current_division: Any
    current_points: Any
    region: Optional[Region] = None


@dataclass
class RankProgressResult:
    puuid: str
    points: List[TrajectoryPoint] = field(default_factory=list)
    boundaries: List[int] = field(default_factory=list)
    stored: int = 0
    cache_failures: int = 0

    def to_dict(self) -> dict:
        return {
            'puuid': self.puuid,
            'points': [p.to_dict() for p in self.points],
            'boundaries': self.boundaries,
            'stored': self.stored,
            'cache_failures': self.cache_failures,
        }


class ComputeRankProgressUseCase:
    """
    Flow per request:
      validate anchor → fetch window → reconstruct → boundaries → cache

    Validation errors and history failures propagate. Cache writes are
    best-effort: each point is written independently and a failure is
    logged and counted without touching the returned trajectory.
    """

    def __init__(
        self,
        history: IMatchHistoryRepository,
        cache: Optional[IProgressCache] = None,
        reconstructor: Optional[TrajectoryReconstructor] = None,
        anchors: Optional[IRankAnchorRepository] = None,
        default_region: Optional[Region] = None,
    ):
        self.history = history
        self.cache = cache
        self.reconstructor = reconstructor or TrajectoryReconstructor()
        self.anchors = anchors
        self.default_region = default_region or Region.from_string(settings.DEFAULT_REGION)

    async def execute(self, request: RankProgressRequest) -> RankProgressResult:
        anchor = build_anchor(
            request.puuid, request.current_tier, request.current_division, request.current_points
        )
        region = request.region or self.default_region

        with context(puuid=anchor.puuid, region=region.value):
            window = await self.history.get_recent_ranked_outcomes(
                region, anchor.puuid, count=self.reconstructor.window_size
            )
            points = self.reconstructor.reconstruct(anchor, window)
            result = RankProgressResult(
                puuid=anchor.puuid,
                points=points,
                boundaries=BoundaryDetector.boundaries(points),
            )
            if self.cache is not None and points:
                result.stored, result.cache_failures = await self._store_points(anchor.puuid, points)

            logger.info(
                lambda: f"rank-progress points={len(points)} stored={result.stored} "
                        f"cache_failures={result.cache_failures}"
            )
        return result

    async def execute_live(self, region: Region, puuid: str) -> RankProgressResult:
        """Same as :meth:`execute` with the current rank read from Riot."""
        if self.anchors is None:
            raise RuntimeError("No rank anchor repository configured")
        anchor = await self.anchors.get_anchor(region, puuid)
        if anchor is None:
            raise AnchorValidationError(f"{puuid} has no ranked solo entry")
        current = anchor.current
        return await self.execute(RankProgressRequest(
            puuid=anchor.puuid,
            current_tier=current.tier,
            current_division=current.division,
            current_points=current.points,
            region=region,
        ))

    async def _store_points(self, puuid: str, points: List[TrajectoryPoint]) -> tuple[int, int]:
        cache = self.cache
        tasks = [asyncio.to_thread(cache.store, puuid, p.match_id, p) for p in points]
        outcomes = await asyncio.gather(*tasks, return_exceptions=True)

        stored = failures = 0
        for point, outcome in zip(points, outcomes):
            if isinstance(outcome, BaseException):
                failures += 1
                level = logger.warning if isinstance(outcome, CacheWriteError) else logger.error
                level(lambda: f"cache-write-failed {point.match_id}: {outcome}")
            elif outcome:
                stored += 1
        return stored, failures
