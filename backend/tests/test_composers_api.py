"""
WEB 420 API: Composer Endpoint Tests
====================================

What:  CRUD on /api/composers through the ASGI app.
"""

from uuid import uuid4

import pytest


async def _create(client, first="Ludwig", last="van Beethoven"):
    response = await client.post("/api/composers", json={"firstName": first, "lastName": last})
    assert response.status_code == 200
    return response.json()


class TestComposersApi:

    @pytest.mark.asyncio
    async def test_list_is_empty_initially(self, test_client):
        response = await test_client.get("/api/composers")
        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_create_and_find_by_id(self, test_client):
        created = await _create(test_client)
        assert created["firstName"] == "Ludwig"
        assert created["lastName"] == "van Beethoven"

        response = await test_client.get(f"/api/composers/{created['id']}")
        assert response.status_code == 200
        assert response.json() == created

    @pytest.mark.asyncio
    async def test_list_returns_composers_in_creation_order(self, test_client):
        await _create(test_client, "Johann", "Bach")
        await _create(test_client, "Clara", "Schumann")

        response = await test_client.get("/api/composers")
        names = [c["firstName"] for c in response.json()]
        assert names == ["Johann", "Clara"]

    @pytest.mark.asyncio
    async def test_update_replaces_names(self, test_client):
        created = await _create(test_client)

        response = await test_client.put(
            f"/api/composers/{created['id']}",
            json={"firstName": "Wolfgang", "lastName": "Mozart"},
        )

        assert response.status_code == 200
        assert response.json()["firstName"] == "Wolfgang"
        fetched = await test_client.get(f"/api/composers/{created['id']}")
        assert fetched.json()["lastName"] == "Mozart"

    @pytest.mark.asyncio
    async def test_delete_returns_composer_and_removes_it(self, test_client):
        created = await _create(test_client)

        response = await test_client.delete(f"/api/composers/{created['id']}")
        assert response.status_code == 200
        assert response.json()["id"] == created["id"]

        missing = await test_client.get(f"/api/composers/{created['id']}")
        assert missing.status_code == 404

    @pytest.mark.asyncio
    async def test_unknown_id_is_404(self, test_client):
        response = await test_client.get(f"/api/composers/{uuid4()}")
        assert response.status_code == 404
        assert response.json()["error"] == "not_found"

    @pytest.mark.asyncio
    async def test_update_unknown_id_is_404(self, test_client):
        response = await test_client.put(f"/api/composers/{uuid4()}", json={"firstName": "X"})
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_malformed_id_is_422(self, test_client):
        response = await test_client.get("/api/composers/not-a-uuid")
        assert response.status_code == 422
