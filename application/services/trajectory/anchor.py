"""Building and validating the current-rank anchor."""
from __future__ import annotations

from typing import Any

from domain.entities import PlayerRankAnchor, RankPoint
from domain.enums import Division, Tier
from domain.exceptions import AnchorValidationError


def _missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def build_anchor(puuid: Any, tier: Any, division: Any, points: Any) -> PlayerRankAnchor:
    """Parse raw request values into a validated anchor.

    All four values are required. Tier and division accept enum members or
    their string names; points accept ints or digit strings.
    """
    missing = [
        name for name, value in (
            ("puuid", puuid),
            ("currentTier", tier),
            ("currentDivision", division),
            ("currentPoints", points),
        )
        if _missing(value)
    ]
    if missing:
        raise AnchorValidationError(f"Missing required values: {', '.join(missing)}")

    try:
        tier_value = tier if isinstance(tier, Tier) else Tier.from_string(str(tier))
        division_value = division if isinstance(division, Division) else Division.from_string(str(division))
    except ValueError as e:
        raise AnchorValidationError(str(e)) from e

    if isinstance(points, bool):
        raise AnchorValidationError(f"currentPoints must be an integer, got {points!r}")
    try:
        points_value = int(str(points).strip()) if not isinstance(points, int) else points
    except ValueError:
        raise AnchorValidationError(f"currentPoints must be an integer, got {points!r}") from None

    anchor = PlayerRankAnchor(str(puuid).strip(), RankPoint(tier_value, division_value, points_value))
    validate_anchor(anchor)
    return anchor


def validate_anchor(anchor: PlayerRankAnchor) -> None:
    """Reject anchors that are incomplete or out of range."""
    if anchor is None or _missing(anchor.puuid):
        raise AnchorValidationError("Anchor has no puuid")
    current = anchor.current
    if current is None:
        raise AnchorValidationError("Anchor has no current rank")
    if not isinstance(current.tier, Tier):
        raise AnchorValidationError(f"Anchor tier missing or invalid: {current.tier!r}")
    if not isinstance(current.division, Division):
        raise AnchorValidationError(f"Anchor division missing or invalid: {current.division!r}")
    if not isinstance(current.points, int) or isinstance(current.points, bool):
        raise AnchorValidationError(f"Anchor points missing or invalid: {current.points!r}")
    if current.points < 0:
        raise AnchorValidationError(f"Anchor points must be >= 0, got {current.points}")
    if not current.tier.is_apex and current.points >= 100:
        raise AnchorValidationError(
            f"Anchor points must be below 100 for {current.tier.value}, got {current.points}"
        )
