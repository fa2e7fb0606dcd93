"""HTTP tests for the notes endpoints."""

import uuid

import pytest


async def create(client, headers, title="Groceries", description="milk, eggs"):
    return await client.post("/notes", json={"title": title, "description": description}, headers=headers)


@pytest.mark.notes
@pytest.mark.asyncio
class TestNotesApi:
    async def test_crud_cycle(self, client, alice, auth_headers):
        headers = auth_headers(alice)

        created = await create(client, headers)
        assert created.status_code == 201
        note = created.json()
        assert note["username"] == "alice"
        assert note["user_id"] == str(alice.uuid)

        response = await client.put(
            f"/notes/{note['uuid']}", json={"title": "Shopping", "description": "bread"}, headers=headers
        )
        assert response.status_code == 200
        assert response.json()["title"] == "Shopping"

        assert (await client.get(f"/notes/{note['uuid']}", headers=headers)).json()["description"] == "bread"
        assert (await client.get("/notes/count", headers=headers)).json() == {"count": 1}

        response = await client.delete(f"/notes/{note['uuid']}", headers=headers)
        assert response.status_code == 200
        assert response.json()["deleted_id"] == note["uuid"]
        assert (await client.get("/notes", headers=headers)).json() == []

    async def test_validation_errors_are_400(self, client, alice, auth_headers):
        headers = auth_headers(alice)

        assert (await create(client, headers, title="t" * 201)).status_code == 400
        assert (await create(client, headers, description="d" * 5001)).status_code == 400
        assert (await create(client, headers, title="   ")).status_code == 400
        assert (await client.get("/notes/count", headers=headers)).json() == {"count": 0}

    async def test_other_users_notes_are_404(self, client, alice, bob, admin, auth_headers):
        note = (await create(client, auth_headers(alice))).json()

        for other in (bob, admin):
            headers = auth_headers(other)
            response = await client.get(f"/notes/{note['uuid']}", headers=headers)
            assert response.status_code == 404
            assert "permission" in response.json()["detail"]
            response = await client.put(
                f"/notes/{note['uuid']}", json={"title": "x", "description": "y"}, headers=headers
            )
            assert response.status_code == 404
            assert (await client.delete(f"/notes/{note['uuid']}", headers=headers)).status_code == 404
            assert (await client.get("/notes", headers=headers)).json() == []

    async def test_unknown_note_is_404(self, client, alice, auth_headers):
        response = await client.get(f"/notes/{uuid.uuid4()}", headers=auth_headers(alice))
        assert response.status_code == 404

    async def test_requires_auth(self, client):
        assert (await client.get("/notes")).status_code == 401
