"""Shared test fixtures and configuration."""

import os

import pytest


TEST_ENV = {
    "TYPES_SEARCH_INDEX_URL": "https://index.example.com/search-index-min.json",
    "TYPES_SEARCH_HTTP_TIMEOUT": "5",
    "TYPES_SEARCH_CASE_SENSITIVE": "true",
    "TYPES_SEARCH_NAMESPACE": "@types/",
    "TYPES_SEARCH_LOG_LEVEL": "warning",
    "TYPES_SEARCH_JSON_LOGS": "false",
    # Proxy settings - ensure they're cleared for tests
    "http_proxy": "",
    "https_proxy": "",
    "all_proxy": "",
    "no_proxy": "",
}

# Set environment variables immediately when conftest.py is loaded
for key, value in TEST_ENV.items():
    os.environ[key] = value

from types_search.domain.model import SearchRecord


# Shape of search-index-min.json entries
SAMPLE_PAYLOAD = [
    {
        "t": "lodash",
        "g": ["_"],
        "m": ["lodash"],
        "p": "https://lodash.com",
        "l": "Lodash",
        "d": 48_000_000,
    },
    {
        "t": "lodash.debounce",
        "g": [],
        "m": ["lodash.debounce"],
        "p": "https://lodash.com",
        "l": "lodash.debounce",
        "d": 9_000_000,
    },
    {
        "t": "jquery",
        "g": ["$", "jQuery"],
        "m": ["jquery"],
        "p": "https://jquery.com",
        "l": "jQuery",
        "d": 5_000_000,
    },
    {
        "t": "react",
        "g": ["React"],
        "m": ["react"],
        "p": "https://react.dev",
        "l": "React",
        "d": 70_000_000,
    },
    {
        "t": "react-dom",
        "g": ["ReactDOM"],
        "m": ["react-dom", "react-dom/client"],
        "p": "https://react.dev",
        "l": "React DOM",
        "d": 65_000_000,
    },
    {
        "t": "express",
        "g": [],
        "m": ["express"],
        "p": "https://expressjs.com",
        "l": "Express",
        "d": 30_000_000,
    },
]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Pin TYPES_SEARCH_* variables and keep stray .env files out of Settings."""
    for key, value in TEST_ENV.items():
        monkeypatch.setenv(key, value)
    monkeypatch.delenv("TYPES_SEARCH_MAX_RESULTS", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def sample_payload() -> list[dict]:
    return [dict(entry) for entry in SAMPLE_PAYLOAD]


@pytest.fixture
def sample_records(sample_payload) -> list[SearchRecord]:
    return [SearchRecord.from_payload(entry) for entry in sample_payload]


def make_record(name: str, downloads: int = 0, **fields) -> SearchRecord:
    """Build a record with sensible defaults for ranking tests."""
    return SearchRecord(
        types_package_name=name,
        globals=fields.get("globals", ()),
        modules=fields.get("modules", (name,)),
        project_url=fields.get("project_url", f"https://example.com/{name}"),
        library_name=fields.get("library_name", name),
        monthly_downloads=downloads,
    )


@pytest.fixture
def record_factory():
    return make_record
