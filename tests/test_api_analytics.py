"""HTTP tests for analytics, recent activity and health."""

import pytest


async def upload(client, headers, filename, data):
    response = await client.post("/documents/upload", files={"file": (filename, data)}, headers=headers)
    assert response.status_code == 201
    return response.json()


@pytest.mark.analytics
@pytest.mark.asyncio
class TestAnalyticsApi:
    async def test_user_stats(self, client, alice, auth_headers):
        headers = auth_headers(alice)
        await upload(client, headers, "a.pdf", b"a" * 10)
        await upload(client, headers, "b.png", b"b" * 20)

        response = await client.get("/analytics/user-stats", headers=headers)

        assert response.status_code == 200
        stats = response.json()
        assert stats["total_documents"] == 2
        assert stats["total_storage"] == 30
        assert {f["file_type"] for f in stats["file_types"]} == {"pdf", "png"}
        assert sum(d["count"] for d in stats["upload_timeline"]) == 2
        assert [a["action"] for a in stats["recent_activity"]] == ["upload", "upload"]

    async def test_dashboard_is_admin_only(self, client, alice, admin, auth_headers):
        await upload(client, auth_headers(alice), "a.pdf", b"a" * 10)

        assert (await client.get("/analytics/dashboard", headers=auth_headers(alice))).status_code == 403

        response = await client.get("/analytics/dashboard", headers=auth_headers(admin))
        assert response.status_code == 200
        body = response.json()
        assert body["total_stats"] == {"documents": 1, "users": 2, "storage": 10}
        assert body["storage_per_user"][0]["username"] == "alice"


@pytest.mark.asyncio
class TestRecentsApi:
    async def test_recents_include_document_summary(self, client, alice, auth_headers):
        headers = auth_headers(alice)
        doc = await upload(client, headers, "plan.txt", b"step one")
        await client.get(f"/documents/{doc['uuid']}", headers=headers)

        response = await client.get("/recents", headers=headers)

        assert response.status_code == 200
        entries = response.json()
        assert [e["action"] for e in entries] == ["view", "upload"]
        assert entries[0]["document"] == {"title": "plan", "file_type": "txt"}

    async def test_limit_bounds(self, client, alice, auth_headers):
        headers = auth_headers(alice)
        assert (await client.get("/recents?limit=0", headers=headers)).status_code == 400
        assert (await client.get("/recents?limit=101", headers=headers)).status_code == 400
        assert (await client.get("/recents?limit=5", headers=headers)).json() == []


@pytest.mark.asyncio
async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "OK"
    assert response.json()["database"] == "up"
