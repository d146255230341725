"""Rank tier enumeration."""
from enum import Enum


class Tier(Enum):
    """League of Legends rank tiers, lowest to highest."""

    IRON = "IRON"
    BRONZE = "BRONZE"
    SILVER = "SILVER"
    GOLD = "GOLD"
    PLATINUM = "PLATINUM"
    EMERALD = "EMERALD"
    DIAMOND = "DIAMOND"
    MASTER = "MASTER"
    GRANDMASTER = "GRANDMASTER"
    CHALLENGER = "CHALLENGER"

    @property
    def index(self) -> int:
        """Position in the ladder (IRON=0 … CHALLENGER=9)."""
        return _TIER_ORDER.index(self)

    @property
    def is_apex(self) -> bool:
        """Master and above have no divisions."""
        return self in (Tier.MASTER, Tier.GRANDMASTER, Tier.CHALLENGER)

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @classmethod
    def all_tiers(cls) -> list['Tier']:
        """Get all tiers in ladder order."""
        return list(_TIER_ORDER)

    @classmethod
    def from_index(cls, index: int) -> 'Tier':
        return _TIER_ORDER[index]

    @classmethod
    def from_string(cls, tier_str: str) -> 'Tier':
        """Create Tier from string (case-insensitive).

        Raises:
            ValueError: unknown tier name.
        """
        try:
            return cls[tier_str.strip().upper()]
        except (KeyError, AttributeError):
            raise ValueError(f"Unknown tier: {tier_str!r}") from None


_TIER_ORDER = tuple(Tier)
