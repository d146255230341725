"""
Tests for the rank-progress use case with in-memory collaborators.
"""
import asyncio

import pytest

from application.use_cases import ComputeRankProgressUseCase, RankProgressRequest
from domain.entities import PlayerRankAnchor, RankPoint
from domain.enums import Division, Region, Tier
from domain.exceptions import AnchorValidationError, CacheWriteError, HistoryFetchError
from domain.interfaces import IRankAnchorRepository
from factories import FakeHistory, newest_first, outcome


class FlakyCache:
    """Fails writes for selected matches, records the rest."""

    def __init__(self, failing=()):
        self.failing = set(failing)
        self.rows = {}

    def store(self, puuid, match_id, point):
        if match_id in self.failing:
            raise CacheWriteError(f"disk full for {match_id}")
        if (puuid, match_id) in self.rows:
            return False
        self.rows[(puuid, match_id)] = point
        return True


class FakeAnchors(IRankAnchorRepository):

    def __init__(self, anchor):
        self.anchor = anchor

    async def get_anchor(self, region, puuid):
        return self.anchor


def _request(**overrides):
    values = dict(puuid="p1", current_tier="GOLD", current_division="II", current_points=40, region=Region.EUW1)
    values.update(overrides)
    return RankProgressRequest(**values)


def test_scenario_end_to_end(cache):
    history = FakeHistory([outcome("m2", True, 2), outcome("m1", False, 1)])
    use_case = ComputeRankProgressUseCase(history, cache=cache)

    result = asyncio.run(use_case.execute(_request()))

    assert [p.match_id for p in result.points] == ["m1", "m2"]
    assert [p.after.points for p in result.points] == [25, 40]
    assert result.boundaries == []
    assert result.stored == 2
    assert result.cache_failures == 0
    assert history.calls == [(Region.EUW1, "p1", 10)]
    assert cache.get("p1", "m1").lp_after == 25


def test_recompute_with_new_anchor_keeps_first_rows(cache):
    history = FakeHistory([outcome("m1", True, 1)])
    use_case = ComputeRankProgressUseCase(history, cache=cache)

    asyncio.run(use_case.execute(_request(current_points=40)))
    second = asyncio.run(use_case.execute(_request(current_points=70)))

    assert second.points[0].after.points == 70
    assert second.stored == 0
    assert cache.get("p1", "m1").lp_after == 40


def test_validation_happens_before_fetch():
    history = FakeHistory(newest_first(True))
    use_case = ComputeRankProgressUseCase(history)
    with pytest.raises(AnchorValidationError):
        asyncio.run(use_case.execute(_request(current_division=None)))
    assert history.calls == []


def test_history_failure_propagates(cache):
    history = FakeHistory(error=HistoryFetchError("riot down"))
    use_case = ComputeRankProgressUseCase(history, cache=cache)
    with pytest.raises(HistoryFetchError):
        asyncio.run(use_case.execute(_request()))
    assert cache.count() == 0


def test_cache_failure_is_not_fatal():
    cache = FlakyCache(failing={"m2"})
    use_case = ComputeRankProgressUseCase(FakeHistory(newest_first(True, False, True)), cache=cache)

    result = asyncio.run(use_case.execute(_request()))

    assert len(result.points) == 3
    assert result.cache_failures == 1
    assert result.stored == 2
    assert set(cache.rows) == {("p1", "m1"), ("p1", "m3")}


def test_empty_history():
    use_case = ComputeRankProgressUseCase(FakeHistory([]), cache=FlakyCache())
    result = asyncio.run(use_case.execute(_request()))
    assert result.points == []
    assert result.stored == 0


def test_default_region_used():
    history = FakeHistory([])
    use_case = ComputeRankProgressUseCase(history, default_region=Region.KR)
    asyncio.run(use_case.execute(_request(region=None)))
    assert history.calls[0][0] is Region.KR


def test_execute_live_uses_anchor_repository():
    anchor = PlayerRankAnchor("p1", RankPoint(Tier.DIAMOND, Division.IV, 5))
    use_case = ComputeRankProgressUseCase(
        FakeHistory([outcome("m1", True)]), anchors=FakeAnchors(anchor)
    )
    result = asyncio.run(use_case.execute_live(Region.EUW1, "p1"))
    assert result.points[0].after == anchor.current
    assert result.points[0].before.points == -10


def test_execute_live_unranked():
    use_case = ComputeRankProgressUseCase(FakeHistory([]), anchors=FakeAnchors(None))
    with pytest.raises(AnchorValidationError):
        asyncio.run(use_case.execute_live(Region.EUW1, "p1"))


def test_result_to_dict():
    use_case = ComputeRankProgressUseCase(FakeHistory([outcome("m1", False)]))
    data = asyncio.run(use_case.execute(_request())).to_dict()
    assert data['points'][0]['lp_before'] == 55
    assert data['points'][0]['result'] == "Loss"
    assert data['points'][0]['exact'] is False
