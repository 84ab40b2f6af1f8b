"""
Tests for health check endpoints.

System role: Verification of liveness and database checks
"""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from mangaverse.api.main import create_app
from mangaverse.boundary.db import get_async_db


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app):
    return TestClient(app)


def _db_override(session):
    async def override():
        yield session

    return override


def test_health(client):
    response = client.get("/api/v1/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Server Healthy"}
    assert "X-Correlation-ID" in response.headers


def test_correlation_id_is_echoed(client):
    response = client.get("/api/v1/health", headers={"X-Correlation-ID": "abc-123"})
    assert response.headers["X-Correlation-ID"] == "abc-123"


def test_health_db_ok(app, client):
    session = AsyncMock()
    app.dependency_overrides[get_async_db] = _db_override(session)

    response = client.get("/api/v1/health/db")

    assert response.status_code == 200
    session.execute.assert_awaited_once()


def test_health_db_unavailable(app, client):
    session = AsyncMock()
    session.execute.side_effect = ConnectionError("db down")
    app.dependency_overrides[get_async_db] = _db_override(session)

    response = client.get("/api/v1/health/db")

    assert response.status_code == 503


def test_health_catalog(client):
    assert client.get("/api/v1/health/catalog").status_code == 200


def test_openapi_documents_auth_errors(client):
    schema = client.get("/openapi.json").json()

    responses = schema["paths"]["/api/v1/favorites"]["get"]["responses"]
    assert {"401", "403"} <= set(responses)
    assert "/api/v1/admin/backup" in schema["paths"]
