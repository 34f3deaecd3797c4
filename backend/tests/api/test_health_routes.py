"""Health probes, root banner and routing-level error envelope."""

import zenstudent.infrastructure.database as db_module


async def test_liveness(client):
    res = await client.get("/api/health")
    assert res.status_code == 200
    assert res.json() == {
        "status": "healthy", "service": "zenstudent-api", "version": "1.0.0",
    }


async def test_readiness_checks_database(client):
    res = await client.get("/api/health/ready")
    assert res.status_code == 200
    assert res.json() == {"status": "ready", "checks": {"database": "healthy"}}


async def test_readiness_is_503_before_database_init(client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    res = await client.get("/api/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"


async def test_root_banner(client):
    res = await client.get("/")
    assert res.status_code == 200
    assert "ZenStudent Backend is running" in res.text


async def test_unknown_route_uses_message_envelope(client):
    res = await client.get("/api/nope")
    assert res.status_code == 404
    assert res.json()["message"] == "Not Found"
    assert res.json()["error"]["code"] == "HTTP_ERROR"
