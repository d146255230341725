"""
Tests for the Riot-backed repositories against a mocked transport.
"""
import asyncio

import httpx
import pytest

from domain.entities import RankPoint
from domain.enums import Division, Region, Tier
from domain.exceptions import HistoryFetchError
from infrastructure.api import RiotAPIClient
from infrastructure.repositories import MatchHistoryRepository, RankAnchorRepository

PUUID = "p1"


def _match(match_id, created, win=True, queue=420, duration=1800, puuid=PUUID):
    participants = [{'puuid': "someone-else", 'win': not win}]
    if puuid is not None:
        participants.append({'puuid': puuid, 'win': win})
    return {
        'metadata': {'matchId': match_id},
        'info': {
            'queueId': queue,
            'gameCreation': created,
            'gameDuration': duration,
            'participants': participants,
        },
    }


def _transport(ids, matches, entries=None, ids_status=200):
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        path = request.url.path
        if path.endswith("/ids"):
            return httpx.Response(ids_status, json=ids if ids_status == 200 else {})
        if "/lol/match/v5/matches/" in path:
            match_id = path.rsplit("/", 1)[-1]
            if match_id not in matches:
                return httpx.Response(404, json={})
            return httpx.Response(200, json=matches[match_id])
        if "/lol/league/v4/entries/by-puuid/" in path:
            if entries is None:
                return httpx.Response(404, json={})
            return httpx.Response(200, json=entries)
        return httpx.Response(404, json={})

    return httpx.MockTransport(handler), requests


async def _history(transport, count=10):
    async with RiotAPIClient("test-key", transport=transport) as client:
        return await MatchHistoryRepository(client).get_recent_ranked_outcomes(Region.EUW1, PUUID, count=count)


async def _anchor(transport):
    async with RiotAPIClient("test-key", transport=transport) as client:
        return await RankAnchorRepository(client).get_anchor(Region.EUW1, PUUID)


class TestMatchHistory:

    def test_newest_first_and_filtered(self):
        matches = {
            "EUW1_1": _match("EUW1_1", 1_000, win=False),
            "EUW1_2": _match("EUW1_2", 3_000, win=True),
            "EUW1_3": _match("EUW1_3", 2_000, win=True, duration=200),
            "EUW1_4": _match("EUW1_4", 4_000, win=True, queue=440),
        }
        transport, _ = _transport(list(matches), matches)

        outcomes = asyncio.run(_history(transport))

        assert [o.match_id for o in outcomes] == ["EUW1_2", "EUW1_1"]
        assert [o.win for o in outcomes] == [True, False]
        assert outcomes[0].played_at == 3_000

    def test_request_shape(self):
        transport, requests = _transport([], {})
        assert asyncio.run(_history(transport, count=7)) == []

        ids_request = requests[0]
        assert ids_request.url.host == "europe.api.riotgames.com"
        assert ids_request.url.path == f"/lol/match/v5/matches/by-puuid/{PUUID}/ids"
        assert ids_request.url.params["queue"] == "420"
        assert ids_request.url.params["count"] == "7"
        assert ids_request.headers["X-Riot-Token"] == "test-key"

    def test_missing_participant_has_no_result(self):
        matches = {"EUW1_1": _match("EUW1_1", 1_000, puuid=None)}
        transport, _ = _transport(list(matches), matches)
        outcomes = asyncio.run(_history(transport))
        assert outcomes[0].win is None

    def test_ids_failure(self):
        transport, _ = _transport([], {}, ids_status=404)
        with pytest.raises(HistoryFetchError):
            asyncio.run(_history(transport))

    def test_detail_failure_fails_window(self):
        matches = {"EUW1_1": _match("EUW1_1", 1_000)}
        transport, _ = _transport(["EUW1_1", "EUW1_GONE"], matches)
        with pytest.raises(HistoryFetchError):
            asyncio.run(_history(transport))


class TestRankAnchor:

    def test_solo_entry(self):
        entries = [
            {'queueType': "RANKED_FLEX_SR", 'tier': "IRON", 'rank': "IV", 'leaguePoints': 0},
            {'queueType': "RANKED_SOLO_5x5", 'tier': "GOLD", 'rank': "II", 'leaguePoints': 40},
        ]
        transport, requests = _transport([], {}, entries=entries)

        anchor = asyncio.run(_anchor(transport))

        assert anchor.puuid == PUUID
        assert anchor.current == RankPoint(Tier.GOLD, Division.II, 40)
        assert requests[0].url.host == "euw1.api.riotgames.com"

    def test_unranked(self):
        transport, _ = _transport([], {}, entries=[])
        assert asyncio.run(_anchor(transport)) is None

    def test_unavailable(self):
        transport, _ = _transport([], {}, entries=None)
        with pytest.raises(HistoryFetchError):
            asyncio.run(_anchor(transport))

    def test_malformed_entry(self):
        entries = [{'queueType': "RANKED_SOLO_5x5", 'tier': "GOLD", 'rank': "II"}]
        transport, _ = _transport([], {}, entries=entries)
        with pytest.raises(HistoryFetchError):
            asyncio.run(_anchor(transport))


def test_client_requires_context_manager():
    client = RiotAPIClient("test-key")
    with pytest.raises(RuntimeError):
        asyncio.run(client.get_match_by_id(Region.EUW1, "EUW1_1"))
