"""
Pytest fixtures and configuration for all tests.
"""

import json
from typing import AsyncGenerator, Optional

import httpx
import pytest

from app.core.config import Settings

TEST_DATA_URL = "http://data.test/data/"


def make_data_transport(files: dict) -> httpx.MockTransport:
    """
    Fake data host serving `files` ({filename: json_value}).

    A value of None answers 500; a missing file answers 404; a str value is
    served raw (useful for invalid JSON).
    """
    def handler(request: httpx.Request) -> httpx.Response:
        filename = request.url.path.removeprefix("/data/")
        if filename not in files:
            return httpx.Response(404, text="Not Found")
        content = files[filename]
        if content is None:
            return httpx.Response(500, text="Internal Server Error")
        if isinstance(content, str):
            return httpx.Response(200, text=content)
        return httpx.Response(200, content=json.dumps(content).encode(), headers={"content-type": "application/json"})

    return httpx.MockTransport(handler)


def level_data(name: str, verifier: str, records: Optional[list] = None) -> dict:
    """Level JSON as stored in <path>.json"""
    return {
        "id": 1000,
        "name": name,
        "author": "Creator",
        "creators": [],
        "verifier": verifier,
        "verification": f"https://youtu.be/{name.lower().replace(' ', '-')}",
        "percentToQualify": 60,
        "password": "Free to Copy",
        "records": records or [],
    }


def record_data(user: str, percent: int = 100) -> dict:
    return {
        "user": user,
        "link": f"https://youtu.be/{user.lower()}",
        "percent": percent,
        "hz": 60,
    }


@pytest.fixture
def settings() -> Settings:
    """Settings with fixed scoring values, independent of the environment."""
    return Settings(
        data_url=TEST_DATA_URL,
        pack_multiplier=1.5,
        score_max=250.0,
        score_min=15.0,
    )


@pytest.fixture
def sample_files() -> dict:
    """A small list: 3 levels, 2 packs, editors and supporters."""
    return {
        "_list.json": ["bloodbath", "sonic-wave", "cataclysm"],
        "_packlist.json": [
            {"name": "Classics", "levels": ["bloodbath", "cataclysm"], "colour": "#ff0000"},
            {"name": "Waves", "levels": ["sonic-wave"]},
        ],
        "bloodbath.json": level_data("Bloodbath", "Riot", [
            record_data("Alice", 100),
            record_data("Bob", 45),
        ]),
        "sonic-wave.json": level_data("Sonic Wave", "Cyclic", [
            record_data("alice", 70),
            record_data("Bob", 100),
        ]),
        "cataclysm.json": level_data("Cataclysm", "Ggb0y", [
            record_data("ALICE", 100),
        ]),
        "_editors.json": [
            {"role": "owner", "members": [{"name": "Admin", "link": "https://example.com"}]},
        ],
        "_supporters.json": ["Patron"],
    }


@pytest.fixture
def make_transport():
    """Factory for fake data hosts with custom files."""
    return make_data_transport


@pytest.fixture
async def data_client(sample_files) -> AsyncGenerator[httpx.AsyncClient, None]:
    """HTTP client pointed at the fake data host."""
    async with httpx.AsyncClient(
        transport=make_data_transport(sample_files),
        base_url=TEST_DATA_URL
    ) as client:
        yield client
