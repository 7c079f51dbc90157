"""
Portfolio Backend — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
Why:   Provides reusable test infrastructure (SQLite store, temp upload
       directory, API client, mocked store).
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── test_settings: Settings pointing at a temp SQLite file + upload dir
    ├── app: Application built from test_settings, tables created
    ├── test_client: HTTPX AsyncClient talking to `app` in-process
    ├── upload_dir: The app's upload directory (Path)
    ├── mock_store: AsyncMock stand-in for PortfolioStore
    └── sample_image_bytes: Tiny PNG for upload tests
"""

import os
import tempfile
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport


# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

# Set BEFORE any portfolio_api import: the module-level app in main.py is
# built from the process-wide settings when the module is first imported
_session_dir = tempfile.mkdtemp(prefix="portfolio_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_session_dir}/module_app.db"
os.environ["UPLOAD_DIR"] = os.path.join(_session_dir, "uploads")
os.environ["LOG_LEVEL"] = "WARNING"

from portfolio_api.config import Settings  # noqa: E402
from portfolio_api.database import Base  # noqa: E402
from portfolio_api.main import create_app  # noqa: E402
from portfolio_api.store import PortfolioStore  # noqa: E402


@pytest.fixture
def test_settings(tmp_path):
    """Settings isolated to this test's temporary directory."""
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'portfolio.db'}",
        upload_dir=str(tmp_path / "uploads"),
        log_level="WARNING",
    )


@pytest_asyncio.fixture
async def app(test_settings):
    """
    Application with an initialized schema.

    The service itself never creates tables; tests create them from the
    ORM metadata so each test starts from an empty store.
    """
    application = create_app(test_settings)
    async with application.state.store.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield application
    await application.state.store.dispose()


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient routed directly into the ASGI app (no server).

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/api/skills")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def store(app) -> PortfolioStore:
    return app.state.store


@pytest.fixture
def upload_dir(app) -> Path:
    return app.state.file_service.upload_dir


@pytest.fixture
def mock_store():
    """
    Mock PortfolioStore with every statement method as an AsyncMock.

    Usage:
        mock_store.insert_skill.return_value = 7
        mock_store.list_skills.side_effect = RuntimeError("gone")
    """
    store = MagicMock(spec=PortfolioStore)
    for name in (
        "ping",
        "dispose",
        "insert_skill",
        "list_skills",
        "update_skill",
        "get_skill_image_path",
        "delete_skill",
        "insert_project",
        "list_projects",
        "update_project",
        "delete_project",
        "insert_message",
    ):
        setattr(store, name, AsyncMock())
    return store


@pytest.fixture
def sample_image_bytes():
    """
    Minimal PNG bytes (signature + IHDR chunk header).

    Not a decodable image; nothing in the service inspects image content.
    """
    return (
        b"\x89PNG\r\n\x1a\n"
        b"\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01\x08\x02\x00\x00\x00"
        b"\x90wS\xde"
    )
