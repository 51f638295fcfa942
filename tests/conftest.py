"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from src.main import app


@pytest.fixture()
def client() -> TestClient:
    """FastAPI TestClient with the application lifespan started."""
    with TestClient(app) as test_client:
        yield test_client
