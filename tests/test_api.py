import pytest
from httpx import ASGITransport, AsyncClient

from rosterslots.api import create_app

from .helpers import DK_NFL_POSITIONS


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
async def client():
    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client


def _sample_roster() -> str:
    return """Id,Pos,Entry
1,QB,A
2,RB,A
3,RB,A
4,RB,A
5,WR,A
6,WR,A
7,WR,A
8,WR,A
9,TE,A
"""


def _entries(positions, lineup_id=1):
    return [
        {"player_id": f"p{idx}", "position": position, "lineup_id": lineup_id}
        for idx, position in enumerate(positions, start=1)
    ]


@pytest.mark.anyio
async def test_health(client: AsyncClient):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


@pytest.mark.anyio
async def test_profiles_listing(client: AsyncClient):
    resp = await client.get("/profiles")
    assert resp.status_code == 200
    body = resp.json()
    assert len(body) == 8
    nba = next(item for item in body if item["key"] == "draftkings_nba")
    assert [phase["wildcard"] for phase in nba["phases"]] == ["G", "F", "UTIL"]


@pytest.mark.anyio
async def test_profile_detail_by_key(client: AsyncClient):
    resp = await client.get("/profiles/fanduel_mlb")
    assert resp.status_code == 200
    body = resp.json()
    assert body["slot_order"][:2] == ["P", "C/1B"]
    assert body["phases"][0]["capacities"]["OF"] == 3


@pytest.mark.anyio
async def test_profile_detail_not_found(client: AsyncClient):
    resp = await client.get("/profiles/draftkings_nfl2")
    assert resp.status_code == 404


@pytest.mark.anyio
async def test_normalize_endpoint(client: AsyncClient):
    payload = {
        "site": "draftkings",
        "sport": "nfl",
        "entries": _entries(DK_NFL_POSITIONS, 1) + _entries(DK_NFL_POSITIONS, 2),
    }
    resp = await client.post("/normalize", json=payload)
    assert resp.status_code == 200
    body = resp.json()
    assert body["submission"]["headers"] == ["QB", "RB", "RB", "WR", "WR", "WR", "TE", "FLEX", "FLEX"]
    assert body["submission"]["lineup_ids"] == [1, 2]
    assert body["submission"]["rows"][0][-2:] == ["p4", "p8"]
    assert len(body["entries"]) == 18


@pytest.mark.anyio
async def test_normalize_rejects_wrong_roster_size(client: AsyncClient):
    payload = {"site": "draftkings", "sport": "nba", "entries": _entries(["PG", "SG"])}
    resp = await client.post("/normalize", json=payload)
    assert resp.status_code == 400
    assert "exactly 8" in resp.json()["detail"]


@pytest.mark.anyio
async def test_export_endpoint(client: AsyncClient):
    files = {"roster": ("roster.csv", _sample_roster(), "text/csv")}
    data = {
        "site": "dk",
        "sport": "nfl",
        "roster_mapping": "{\"player_id\": \"Id\", \"position\": \"Pos\", \"lineup_id\": \"Entry\"}",
    }
    resp = await client.post("/export", files=files, data=data)
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/csv")
    lines = resp.text.splitlines()
    assert lines == ["QB,RB,RB,WR,WR,WR,TE,FLEX,FLEX", "1,2,3,5,6,7,9,4,8"]


@pytest.mark.anyio
async def test_export_unknown_profile(client: AsyncClient):
    files = {"roster": ("roster.csv", _sample_roster(), "text/csv")}
    resp = await client.post("/export", files=files, data={"site": "draftkings", "sport": "nfl2"})
    assert resp.status_code == 400


@pytest.mark.anyio
async def test_export_invalid_mapping(client: AsyncClient):
    files = {"roster": ("roster.csv", _sample_roster(), "text/csv")}
    resp = await client.post("/export", files=files, data={"roster_mapping": "{not json"})
    assert resp.status_code == 400
    assert "Invalid mapping JSON" in resp.json()["detail"]
