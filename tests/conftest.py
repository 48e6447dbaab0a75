"""Pytest configuration for CodeChat Reviewer."""

import pytest
from fastapi.testclient import TestClient

from codechat.main import app


@pytest.fixture
def client():
    """Get a test client for the FastAPI application."""
    with TestClient(app) as c:
        yield c
