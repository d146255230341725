"""RankPoint value object: a rank state at one instant."""
from dataclasses import dataclass

from ..enums import Division, Tier


@dataclass(frozen=True)
class RankPoint:
    """Tier, division and LP.

    Points are deliberately not range-checked: reconstructed points near a
    promotion or demotion can fall outside [0, 100). Apex tiers have no
    divisions; their division is stored as ``I`` so that two apex points
    compare equal regardless of what the caller passed.
    """

    tier: Tier
    division: Division
    points: int

    def __post_init__(self) -> None:
        if isinstance(self.tier, Tier) and self.tier.is_apex and self.division is not Division.I:
            object.__setattr__(self, 'division', Division.I)

    def with_points(self, points: int) -> 'RankPoint':
        """Same tier and division, different LP."""
        return RankPoint(self.tier, self.division, points)

    def same_rank(self, other: 'RankPoint') -> bool:
        return self.tier is other.tier and self.division is other.division

    @property
    def label(self) -> str:
        """Chart label, e.g. ``GOLD II`` or ``MASTER``."""
        if self.tier.is_apex:
            return self.tier.value
        return f"{self.tier.value} {self.division.value}"

    def to_dict(self) -> dict:
        return {
            'tier': self.tier.value,
            'division': self.division.value,
            'points': self.points,
        }

    def __str__(self) -> str:
        return f"{self.label} {self.points} LP"
