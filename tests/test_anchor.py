"""
Tests for parsing raw request values into an anchor.
"""
import pytest

from application.services.trajectory import build_anchor
from domain.entities import RankPoint
from domain.enums import Division, Tier
from domain.exceptions import AnchorValidationError


def test_parses_strings():
    anchor = build_anchor("p1", "gold", "ii", "40")
    assert anchor.puuid == "p1"
    assert anchor.current == RankPoint(Tier.GOLD, Division.II, 40)


def test_accepts_enums_and_digit_division():
    anchor = build_anchor("p1", Tier.EMERALD, "4", 0)
    assert anchor.current == RankPoint(Tier.EMERALD, Division.IV, 0)


def test_apex_division_normalized():
    assert build_anchor("p1", "MASTER", "III", 150).current.division is Division.I


@pytest.mark.parametrize("values", [
    (None, "GOLD", "II", 40),
    ("p1", None, "II", 40),
    ("p1", "GOLD", "", 40),
    ("p1", "GOLD", "II", None),
])
def test_missing_value(values):
    with pytest.raises(AnchorValidationError, match="Missing"):
        build_anchor(*values)


@pytest.mark.parametrize("values", [
    ("p1", "WOOD", "II", 40),
    ("p1", "GOLD", "V", 40),
    ("p1", "GOLD", "II", "forty"),
    ("p1", "GOLD", "II", True),
    ("p1", "GOLD", "II", 100),
])
def test_invalid_value(values):
    with pytest.raises(AnchorValidationError):
        build_anchor(*values)
