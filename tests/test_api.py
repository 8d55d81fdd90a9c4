"""API tests for the local demo data service."""

import pytest
from fastapi.testclient import TestClient

from api.main import app


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_data(client):
    r = client.get("/data")
    assert r.status_code == 200
    assert r.json() == {"source": "data", "items": [1, 2, 3, 4, 5], "total": 15}


@pytest.mark.parametrize("source", ["data1", "data2"])
def test_batch_sources(client, source):
    r = client.get(f"/{source}")
    assert r.status_code == 200
    body = r.json()
    assert body["source"] == source
    assert body["total"] == sum(body["items"])


def test_unknown_path(client):
    assert client.get("/data3").status_code == 404
