"""
WEB 420 API: Team Endpoint Tests
================================

What:  Teams and the players embedded in them.
"""

from uuid import uuid4

import pytest


async def _create_team(client, name="Ravens", mascot="Raven"):
    response = await client.post("/api/teams", json={"name": name, "mascot": mascot})
    assert response.status_code == 200
    return response.json()


class TestTeamsApi:

    @pytest.mark.asyncio
    async def test_new_team_has_no_players(self, test_client):
        team = await _create_team(test_client)
        assert team["players"] == []

        listed = await test_client.get("/api/teams")
        assert [t["id"] for t in listed.json()] == [team["id"]]

    @pytest.mark.asyncio
    async def test_assign_player_returns_player(self, test_client):
        team = await _create_team(test_client)
        player = {"firstName": "Lamar", "lastName": "Jackson", "salary": 52000000.0}

        response = await test_client.post(f"/api/teams/{team['id']}/players", json=player)

        assert response.status_code == 200
        assert response.json() == player

    @pytest.mark.asyncio
    async def test_players_accumulate_in_order(self, test_client):
        team = await _create_team(test_client)
        for first in ("Ray", "Ed", "Joe"):
            await test_client.post(
                f"/api/teams/{team['id']}/players",
                json={"firstName": first, "lastName": "Smith", "salary": 1.0},
            )

        response = await test_client.get(f"/api/teams/{team['id']}/players")

        assert response.status_code == 200
        assert [p["firstName"] for p in response.json()] == ["Ray", "Ed", "Joe"]

    @pytest.mark.asyncio
    async def test_players_of_unknown_team_is_404(self, test_client):
        response = await test_client.get(f"/api/teams/{uuid4()}/players")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_assign_player_to_unknown_team_is_404(self, test_client):
        response = await test_client.post(
            f"/api/teams/{uuid4()}/players", json={"firstName": "Nobody"}
        )
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_team(self, test_client):
        team = await _create_team(test_client)

        response = await test_client.delete(f"/api/teams/{team['id']}")
        assert response.status_code == 200
        assert response.json()["name"] == "Ravens"

        listed = await test_client.get("/api/teams")
        assert listed.json() == []

        again = await test_client.delete(f"/api/teams/{team['id']}")
        assert again.status_code == 404
