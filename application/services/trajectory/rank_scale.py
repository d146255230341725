"""Continuous LP scale across tiers and divisions.

Every (tier, division, points) triple maps onto one integer so a chart can
plot a trajectory that crosses division and tier lines without jumps::

    scalar = tier.index * 400 + division.index * 100 + points

Apex tiers (Master+) have no divisions: their division index is always 0 and
all LP above the tier base is kept in ``points``.
"""
from __future__ import annotations

from domain.entities import RankPoint
from domain.enums import Division, Tier

POINTS_PER_DIVISION = 100
DIVISIONS_PER_TIER = 4
POINTS_PER_TIER = POINTS_PER_DIVISION * DIVISIONS_PER_TIER

_MAX_TIER_INDEX = len(Tier.all_tiers()) - 1
_MAX_DIVISION_INDEX = DIVISIONS_PER_TIER - 1


class RankScale:
    """Bidirectional mapping between RankPoint and a monotonic scalar."""

    @staticmethod
    def to_scalar(tier: Tier, division: Division, points: int) -> int:
        division_index = 0 if tier.is_apex else division.index
        return tier.index * POINTS_PER_TIER + division_index * POINTS_PER_DIVISION + points

    @classmethod
    def point_to_scalar(cls, point: RankPoint) -> int:
        return cls.to_scalar(point.tier, point.division, point.points)

    @staticmethod
    def from_scalar(scalar: int) -> RankPoint:
        """Inverse of :meth:`to_scalar`.

        Negative input clamps to IRON IV 0. Values past the top of the ladder
        stay in CHALLENGER with the excess kept as LP.
        """
        scalar = max(0, int(scalar))
        tier_index = min(scalar // POINTS_PER_TIER, _MAX_TIER_INDEX)
        tier = Tier.from_index(tier_index)
        remainder = scalar - tier_index * POINTS_PER_TIER
        if tier.is_apex:
            return RankPoint(tier, Division.I, remainder)
        division_index = min(remainder // POINTS_PER_DIVISION, _MAX_DIVISION_INDEX)
        points = remainder - division_index * POINTS_PER_DIVISION
        return RankPoint(tier, Division.from_index(division_index), points)

    @classmethod
    def normalize(cls, point: RankPoint) -> RankPoint:
        """Roll out-of-range LP into the neighbouring division.

        ``GOLD II 100`` becomes ``GOLD I 0`` and ``GOLD II -5`` becomes
        ``GOLD III 95``. The reconstructor never calls this; it is for
        callers that need canonical form.
        """
        return cls.from_scalar(cls.point_to_scalar(point))
