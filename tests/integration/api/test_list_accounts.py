import pytest
import pytest_asyncio
from httpx import AsyncClient


@pytest_asyncio.fixture
async def seeded(client: AsyncClient, test_data):
    usernames = []
    for key in ("agent", "second_agent", "supervisor", "admin"):
        response = await client.post("/api/users", json=test_data.get_copy(key))
        assert response.status_code == 201
        usernames.append(response.json()["username"])
    return usernames


@pytest.mark.asyncio
async def test_list_newest_first(client: AsyncClient, seeded):
    response = await client.get("/api/users")

    assert response.status_code == 200
    data = response.json()
    assert data["count"] == 4
    assert [account["username"] for account in data["data"]] == list(reversed(seeded))


@pytest.mark.asyncio
async def test_list_includes_team_name(client: AsyncClient, seeded):
    data = (await client.get("/api/users")).json()

    team_names = {account["username"]: account["team_name"] for account in data["data"]}
    assert team_names == {
        "AG001": "Alpha",
        "AG002": "Bravo",
        "SP001": "Alpha",
        "AD001": None,
    }


@pytest.mark.asyncio
async def test_get_includes_team_name(client: AsyncClient, seeded):
    listing = (await client.get("/api/users")).json()
    agent_id = next(a["id"] for a in listing["data"] if a["username"] == "AG002")

    response = await client.get(f"/api/users/{agent_id}")

    assert response.status_code == 200
    assert response.json()["team_name"] == "Bravo"


@pytest.mark.asyncio
async def test_filter_by_role(client: AsyncClient, seeded):
    data = (await client.get("/api/users", params={"role": "Agent"})).json()

    assert {account["username"] for account in data["data"]} == {"AG001", "AG002"}


@pytest.mark.asyncio
async def test_filter_by_team(client: AsyncClient, seeded):
    data = (await client.get("/api/users", params={"team_id": 1})).json()

    assert {account["username"] for account in data["data"]} == {"AG001", "SP001"}


@pytest.mark.asyncio
async def test_filter_by_status(client: AsyncClient, seeded):
    listing = (await client.get("/api/users")).json()
    admin_id = next(a["id"] for a in listing["data"] if a["username"] == "AD001")
    await client.put(f"/api/users/{admin_id}", json={"status": "Inactive"})

    data = (await client.get("/api/users", params={"status": "Inactive"})).json()

    assert [account["username"] for account in data["data"]] == ["AD001"]


@pytest.mark.asyncio
async def test_unknown_filter_value(client: AsyncClient):
    response = await client.get("/api/users", params={"role": "Manager"})

    assert response.status_code == 422
