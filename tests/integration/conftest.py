"""
Fixtures for integration tests
"""

import httpx
import pytest

from app.main import app
from app.core.config import get_settings
from app.datasource import DataSource


@pytest.fixture
async def client(data_client, settings):
    """
    HTTP client for testing API endpoints.

    Points the data source at the fake data host and pins the settings.
    """
    original_client = DataSource.client
    DataSource.client = data_client
    app.dependency_overrides[get_settings] = lambda: settings

    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
    DataSource.client = original_client
