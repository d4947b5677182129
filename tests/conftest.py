"""Pytest configuration and fixtures"""

import pytest
from fastapi.testclient import TestClient
from app.main import app
from app.database.json_store import JsonStore, get_store
from app.services.event_service import now_ms

DAY_MS = 24 * 60 * 60 * 1000


@pytest.fixture(scope="function")
def store(tmp_path):
    """Document store on a throwaway data directory"""
    return JsonStore(str(tmp_path / "data"))


@pytest.fixture(scope="function")
def client(store):
    """Test client fixture"""
    app.dependency_overrides[get_store] = lambda: store

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def now():
    """Fixed reference time (noon UTC) so day boundaries are predictable"""
    ts = now_ms()
    return ts - ts % DAY_MS + DAY_MS // 2
