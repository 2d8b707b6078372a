from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from solarchat.boundary.db import get_async_db
from solarchat.main import create_app


@pytest.fixture
def mock_db():
    db = AsyncMock()
    db.execute = AsyncMock()
    return db


@pytest.fixture
def client(mock_db):
    app = create_app()
    app.dependency_overrides[get_async_db] = lambda: mock_db
    return TestClient(app)


def test_health_check(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Server Healthy"}


def test_health_check_db(client, mock_db):
    response = client.get("/api/health/db")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Database connection OK"}
    mock_db.execute.assert_awaited_once()


def test_health_check_db_unreachable(client, mock_db):
    mock_db.execute.side_effect = OperationalError("SELECT 1", {}, Exception("refused"))
    response = client.get("/api/health/db")
    assert response.status_code == 200
    assert response.json() == {"status": "unhealthy", "message": "Database connection failed"}


def test_response_should_echo_correlation_id(client):
    response = client.get("/api/health", headers={"X-Correlation-ID": "req-123"})
    assert response.headers["X-Correlation-ID"] == "req-123"


def test_response_should_generate_correlation_id(client):
    response = client.get("/api/health")
    assert response.headers["X-Correlation-ID"]
