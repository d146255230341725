"""Division enumeration."""
from enum import Enum


class Division(Enum):
    """Divisions within a tier, lowest (IV) to highest (I)."""

    IV = "IV"
    III = "III"
    II = "II"
    I = "I"  # noqa: E741

    @property
    def index(self) -> int:
        """IV=0 … I=3."""
        return _DIVISION_ORDER.index(self)

    @classmethod
    def from_index(cls, index: int) -> 'Division':
        return _DIVISION_ORDER[index]

    @classmethod
    def from_string(cls, division_str: str) -> 'Division':
        """Accepts roman numerals ("II") or digits ("2").

        Raises:
            ValueError: unknown division.
        """
        value = str(division_str).strip().upper()
        if value in _ARABIC:
            return _ARABIC[value]
        try:
            return cls[value]
        except KeyError:
            raise ValueError(f"Unknown division: {division_str!r}") from None


_DIVISION_ORDER = tuple(Division)
_ARABIC = {"1": Division.I, "2": Division.II, "3": Division.III, "4": Division.IV}
