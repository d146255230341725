"""
Tests for backward trajectory reconstruction.

Tests verify that:
1. One point per match, labelled 1..K oldest first
2. The newest point ends at the anchor and deltas chain backward
3. LP is not clamped near division lines
4. Invalid anchors and oversized windows are rejected before any work

Run with: pytest tests/test_reconstructor.py -v
"""
import pytest

from application.services.trajectory import DeltaInferencer, TrajectoryReconstructor
from domain.entities import PlayerRankAnchor, RankPoint
from domain.enums import Division, MatchResult, Tier
from domain.exceptions import AnchorValidationError, WindowValidationError
from factories import newest_first, outcome


@pytest.fixture
def reconstructor() -> TrajectoryReconstructor:
    return TrajectoryReconstructor(DeltaInferencer(heuristic_delta=15), window_size=10)


class TestScenario:

    def test_two_game_window(self, reconstructor, gold_anchor):
        window = [outcome("m2", True), outcome("m1", False)]
        p1, p2 = reconstructor.reconstruct(gold_anchor, window)

        assert p1.match_id == "m1"
        assert (p1.before.points, p1.after.points, p1.delta, p1.result) == (40, 25, -15, MatchResult.LOSS)
        assert p2.match_id == "m2"
        assert (p2.before.points, p2.after.points, p2.delta, p2.result) == (25, 40, 15, MatchResult.WIN)
        assert [p1.label_index, p2.label_index] == [1, 2]


class TestInvariants:

    @pytest.mark.parametrize("k", [1, 3, 7, 10])
    def test_length_and_labels(self, reconstructor, gold_anchor, k):
        window = newest_first(*[i % 2 == 0 for i in range(k)])
        points = reconstructor.reconstruct(gold_anchor, window)
        assert len(points) == k
        assert [p.label_index for p in points] == list(range(1, k + 1))
        assert [p.match_id for p in points] == [o.match_id for o in reversed(window)]

    def test_newest_point_ends_at_anchor(self, reconstructor, gold_anchor):
        points = reconstructor.reconstruct(gold_anchor, newest_first(True, False, False, True))
        assert points[-1].after == gold_anchor.current

    def test_deltas_chain(self, reconstructor, gold_anchor):
        points = reconstructor.reconstruct(gold_anchor, newest_first(True, True, False, None, True))
        for p in points:
            assert p.before.points == p.after.points - p.delta
        for older, newer in zip(points, points[1:]):
            assert older.after == newer.before

    def test_tier_and_division_carried(self, reconstructor, gold_anchor):
        points = reconstructor.reconstruct(gold_anchor, newest_first(True, True, True))
        for p in points:
            assert p.before.tier is Tier.GOLD and p.before.division is Division.II
            assert p.after.tier is Tier.GOLD and p.after.division is Division.II

    def test_heuristic_points_are_not_exact(self, reconstructor, gold_anchor):
        points = reconstructor.reconstruct(gold_anchor, newest_first(True, False))
        assert not any(p.exact for p in points)

    def test_played_at_carried(self, reconstructor, gold_anchor):
        window = newest_first(True, False)
        points = reconstructor.reconstruct(gold_anchor, window)
        assert points[0].played_at == window[1].played_at


class TestUnclampedBoundary:

    def test_points_go_negative_after_wins_from_low_lp(self, reconstructor):
        anchor = PlayerRankAnchor("p1", RankPoint(Tier.PLATINUM, Division.IV, 10))
        points = reconstructor.reconstruct(anchor, newest_first(True, True))
        assert points[0].before.points == -20
        assert points[0].before.tier is Tier.PLATINUM
        assert points[0].before.division is Division.IV

    def test_points_exceed_hundred_after_losses_from_high_lp(self, reconstructor):
        anchor = PlayerRankAnchor("p1", RankPoint(Tier.SILVER, Division.I, 95))
        points = reconstructor.reconstruct(anchor, newest_first(False))
        assert points[0].before.points == 110


class TestEdgeCases:

    def test_empty_window(self, reconstructor, gold_anchor):
        assert reconstructor.reconstruct(gold_anchor, []) == []

    def test_window_over_limit(self, reconstructor, gold_anchor):
        with pytest.raises(WindowValidationError):
            reconstructor.reconstruct(gold_anchor, newest_first(*[True] * 11))

    def test_malformed_outcome_counts_as_loss(self, reconstructor, gold_anchor):
        (point,) = reconstructor.reconstruct(gold_anchor, [outcome("m1", None)])
        assert point.delta == -15
        assert point.result is MatchResult.LOSS

    def test_exact_delta_used(self, gold_anchor):
        rec = TrajectoryReconstructor(DeltaInferencer(exact_deltas={"m1": 19}))
        (point,) = rec.reconstruct(gold_anchor, [outcome("m1", True)])
        assert point.delta == 19
        assert point.exact is True
        assert point.before.points == 21


class TestAnchorValidation:

    @pytest.mark.parametrize("current", [
        RankPoint(None, Division.II, 40),
        RankPoint(Tier.GOLD, None, 40),
        RankPoint(Tier.GOLD, Division.II, None),
        RankPoint(Tier.GOLD, Division.II, 100),
        RankPoint(Tier.GOLD, Division.II, -1),
    ])
    def test_incomplete_anchor_rejected(self, reconstructor, current):
        with pytest.raises(AnchorValidationError):
            reconstructor.reconstruct(PlayerRankAnchor("p1", current), [outcome("m1", True)])

    def test_missing_puuid_rejected(self, reconstructor):
        anchor = PlayerRankAnchor("", RankPoint(Tier.GOLD, Division.II, 40))
        with pytest.raises(AnchorValidationError):
            reconstructor.reconstruct(anchor, [])

    def test_apex_lp_above_hundred_accepted(self, reconstructor):
        anchor = PlayerRankAnchor("p1", RankPoint(Tier.MASTER, Division.I, 312))
        (point,) = reconstructor.reconstruct(anchor, [outcome("m1", True)])
        assert point.before.points == 297
