"""
Pytest configuration for the LP trajectory tests.
"""
import pytest

from application.services import ProgressCache
from domain.entities import PlayerRankAnchor, RankPoint
from domain.enums import Division, Tier


@pytest.fixture
def gold_anchor() -> PlayerRankAnchor:
    return PlayerRankAnchor("p1", RankPoint(Tier.GOLD, Division.II, 40))


@pytest.fixture
def cache(tmp_path):
    c = ProgressCache(tmp_path / "db" / "progress.sqlite")
    yield c
    c.close()
