"""Health Probes — liveness always 200; readiness follows database connectivity."""

from unittest.mock import AsyncMock, MagicMock

import app.infrastructure.database as db_module
from app.core.errors import DatabaseError
from app.infrastructure.database import MongoConnectionProvider


async def test_liveness(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_without_provider_is_503(client, monkeypatch):
    monkeypatch.setattr(db_module, "db_provider", None)
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"


async def test_readiness_when_database_reachable(client, monkeypatch):
    mongo = MagicMock()
    mongo.admin.command = AsyncMock(return_value={"ok": 1})
    provider = MongoConnectionProvider(
        "mongodb://h/db", connect=AsyncMock(return_value=mongo),
    )
    monkeypatch.setattr(db_module, "db_provider", provider)

    res = await client.get("/api/v1/health/ready")

    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"


async def test_readiness_when_connect_fails(client, monkeypatch):
    provider = MongoConnectionProvider(
        "mongodb://h/db",
        connect=AsyncMock(side_effect=DatabaseError("refused", "connect")),
    )
    monkeypatch.setattr(db_module, "db_provider", provider)

    res = await client.get("/api/v1/health/ready")

    assert res.status_code == 503
