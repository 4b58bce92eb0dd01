"""Shared pytest fixtures.

Every test gets its own application instance bound to a fresh SQLite file,
so rows written by one test never leak into another.
"""

import pytest
from fastapi.testclient import TestClient

from culture_app.main import create_app


@pytest.fixture
def static_dir(tmp_path):
    directory = tmp_path / "static"
    directory.mkdir()
    (directory / "index.html").write_text("<h1>Home</h1>", encoding="utf-8")
    (directory / "levels.html").write_text("<h1>Levels</h1>", encoding="utf-8")
    (directory / "admin.html").write_text("<h1>Admin</h1>", encoding="utf-8")
    (directory / "styles.css").write_text("body { margin: 0; }", encoding="utf-8")
    return directory


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite:///{tmp_path / 'test.db'}"


@pytest.fixture
def app(database_url, static_dir):
    return create_app(
        database_url=database_url,
        static_dir=str(static_dir),
        max_body_bytes=1024 * 1024,
        seed_sample_data=True,
    )


@pytest.fixture
def client(app):
    """Test client with startup/shutdown events run around the test."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def level_payload():
    return {
        "number": 4,
        "title": "Dance Forms",
        "description": "Classical and folk dances",
        "icon": "💃",
        "points": 120,
    }
