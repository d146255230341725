"""Region enumeration for League of Legends servers."""
from enum import Enum

_REGIONAL_ROUTES = {
    "americas": ("na1", "br1", "la1", "la2"),
    "europe": ("euw1", "eun1", "tr1", "ru", "me1"),
    "asia": ("kr", "jp1"),
    "sea": ("oc1", "ph2", "sg2", "th2", "tw2", "vn2"),
}


class Region(Enum):
    """Riot platform hosts.

    - platform_route: host for league-v4 (e.g. euw1)
    - regional_route: host for match-v5 (e.g. europe)
    """

    EUW1 = "euw1"
    EUN1 = "eun1"
    TR1 = "tr1"
    RU = "ru"
    ME1 = "me1"
    NA1 = "na1"
    BR1 = "br1"
    LA1 = "la1"
    LA2 = "la2"
    KR = "kr"
    JP1 = "jp1"
    OC1 = "oc1"
    PH2 = "ph2"
    SG2 = "sg2"
    TH2 = "th2"
    TW2 = "tw2"
    VN2 = "vn2"

    @property
    def platform_route(self) -> str:
        return self.value

    @property
    def regional_route(self) -> str:
        for route, platforms in _REGIONAL_ROUTES.items():
            if self.value in platforms:
                return route
        return "americas"

    @classmethod
    def from_string(cls, value: str) -> 'Region':
        """Accepts a platform id ("euw1") or enum name ("EUW1").

        Raises:
            ValueError: unknown region.
        """
        key = value.strip()
        for region in cls:
            if region.value == key.lower() or region.name == key.upper():
                return region
        raise ValueError(f"Unknown region: {value!r}")
