"""Pytest configuration and fixtures."""

import os

# Required settings must exist BEFORE any app imports
os.environ.setdefault("SECOP_BASE_URL", "https://www.datos.gov.co/resource/p6dx-8zbt.json")
os.environ.setdefault("OPENAI_API_KEY", "sk-test")

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from app.deps import get_analyzer, get_secop_client
from app.main import app
from app.services.secop_client import FetchResult


@pytest.fixture
def mock_secop():
    """Create a mock SECOP client returning no records."""
    secop = MagicMock()
    secop.fetch = AsyncMock(return_value=FetchResult(records=[]))
    return secop


@pytest.fixture
def mock_analyzer():
    """Create a mock relevance analyzer."""
    analyzer = MagicMock()
    analyzer.analyze = AsyncMock(return_value={"procesos": []})
    return analyzer


@pytest.fixture
def client(mock_secop, mock_analyzer):
    """Test client with outbound clients replaced by mocks."""
    app.dependency_overrides[get_secop_client] = lambda: mock_secop
    app.dependency_overrides[get_analyzer] = lambda: mock_analyzer
    try:
        with TestClient(app, raise_server_exceptions=False) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()
