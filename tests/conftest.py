"""Global test configuration and fixtures."""

import os
from typing import AsyncGenerator, List, Optional
from unittest.mock import AsyncMock, Mock

import httpx
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

# Set test environment
os.environ["ENVIRONMENT"] = "testing"
os.environ["LOG_FORMAT"] = "console"
os.environ["LOG_LEVEL"] = "WARNING"

from arkfolio.api.schemas.theme import ThemeDetail
from arkfolio.application.ports import ThemeSourcePort
from arkfolio.domain.entities import Slide
from arkfolio.infra.config.database import dispose_engine, init_database
from arkfolio.infra.config.settings import reset_settings
from arkfolio.infra.document.dom import Document
from arkfolio.infra.http.portfolio_client import PortfolioApiClient
from arkfolio.infra.scheduling.timers import VirtualTimerScheduler
from arkfolio.infra.storage.preferences import InMemoryPreferenceStore
from arkfolio.main import create_app


# Environment fixtures
@pytest.fixture
def test_env(tmp_path, monkeypatch):
    """Point settings at a throwaway database and preference file."""
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    monkeypatch.setenv("SEED_ON_STARTUP", "true")
    monkeypatch.setenv("PREFERENCES_PATH", str(tmp_path / "preferences.json"))
    reset_settings()
    yield tmp_path
    reset_settings()


# API fixtures
@pytest.fixture
def app(test_env):
    return create_app()


@pytest.fixture
def client(app):
    """TestClient running the app lifespan (tables + seed data)."""
    with TestClient(app) as test_client:
        yield test_client


@pytest_asyncio.fixture
async def seeded_app(test_env):
    """App with a seeded database, for in-process HTTP via ASGITransport."""
    await init_database()
    yield create_app()
    await dispose_engine()


@pytest_asyncio.fixture
async def api_client(seeded_app) -> AsyncGenerator[PortfolioApiClient, None]:
    """PortfolioApiClient wired to the in-process app."""
    transport = httpx.ASGITransport(app=seeded_app)
    async with httpx.AsyncClient(
        transport=transport, base_url="http://testserver/api/v1"
    ) as http_client:
        yield PortfolioApiClient(client=http_client)


# Client environment fixtures
@pytest.fixture
def scheduler() -> VirtualTimerScheduler:
    return VirtualTimerScheduler()


@pytest.fixture
def document() -> Document:
    return Document()


@pytest.fixture
def store() -> InMemoryPreferenceStore:
    return InMemoryPreferenceStore()


@pytest.fixture
def sample_slides() -> List[Slide]:
    """Three slides A, B, C."""
    return [
        Slide(id="a", title="A", cta_label="Learn More", cta_link="/projects"),
        Slide(id="b", title="B", cta_label="Learn More", cta_link="/projects"),
        Slide(id="c", title="C", cta_label="Learn More", cta_link="/projects"),
    ]


def make_theme(slug: str, css: Optional[str] = None, is_default: bool = False) -> ThemeDetail:
    return ThemeDetail(
        id=1,
        name=slug.title(),
        slug=slug,
        is_default=is_default,
        css_content=f"/* {slug} */" if css is None else css,
    )


@pytest.fixture
def theme_factory():
    return make_theme


@pytest.fixture
def theme_source():
    """Mock theme source answering every slug with a one-line stylesheet."""
    mock = Mock(spec=ThemeSourcePort)
    mock.fetch_themes = AsyncMock(return_value=[])
    mock.fetch_theme_by_slug = AsyncMock(side_effect=lambda slug: make_theme(slug))
    mock.fetch_default_theme = AsyncMock(
        return_value=make_theme("normal", is_default=True)
    )
    return mock
