"""
End-to-end tests: API client against the in-process app, feeding the theme
pipeline and the carousel engine.
"""

import httpx
import pytest

from arkfolio.application.carousel import CarouselEngine
from arkfolio.application.theming import CyberThemeController
from arkfolio.domain.value_objects import (
    CYBER_THEME_ATTRIBUTE,
    DYNAMIC_THEME_STYLE_ID,
    CyberThemeMode,
    LayoutVariant,
)
from arkfolio.infra.config.settings import reset_settings
from arkfolio.infra.http import PortfolioApiClient, PortfolioApiError
from arkfolio.infra.scheduling import VirtualTimerScheduler
from arkfolio.infra.storage import JsonFilePreferenceStore
from arkfolio.site import PortfolioSite


pytestmark = [pytest.mark.asyncio, pytest.mark.integration]


def refuse(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("connection refused", request=request)


def offline_http_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(
        transport=httpx.MockTransport(refuse), base_url="http://offline/api/v1"
    )


class TestPortfolioApiClient:
    """Test cases for the HTTP client against the real routes."""

    async def test_fetch_themes(self, api_client):
        themes = await api_client.fetch_themes()

        assert [t.slug for t in themes][:2] == ["professional", "normal"]

    async def test_fetch_default_and_by_slug(self, api_client):
        default = await api_client.fetch_default_theme()
        neon = await api_client.fetch_theme_by_slug("neon")

        assert default.slug == "normal"
        assert default.css_content
        assert neon.css_content.startswith(":root[data-cyber-theme='neon']")

    async def test_unknown_slug_is_none(self, api_client):
        assert await api_client.fetch_theme_by_slug("retro") is None

    async def test_fetch_carousel_returns_slides(self, api_client):
        slides = await api_client.fetch_carousel()

        assert len(slides) == 3
        assert slides[2].cta_link == "/projects"

    async def test_transport_failure(self):
        async with offline_http_client() as http_client:
            client = PortfolioApiClient(client=http_client)
            assert await client.fetch_themes() == []
            with pytest.raises(PortfolioApiError):
                await client.fetch_default_theme()
            with pytest.raises(PortfolioApiError):
                await client.fetch_carousel()

    async def test_server_error_status(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(500))
        async with httpx.AsyncClient(
            transport=transport, base_url="http://broken/api/v1"
        ) as http_client:
            client = PortfolioApiClient(client=http_client)

            with pytest.raises(PortfolioApiError) as exc_info:
                await client.fetch_theme_by_slug("neon")

        assert exc_info.value.status_code == 500


class TestPipeline:
    """Test cases driving the controllers from live API data."""

    async def test_first_visit_then_reload(self, api_client, test_env, document):
        store = JsonFilePreferenceStore(test_env / "prefs.json")
        first = CyberThemeController(api_client, store, document)

        assert await first.initialize() == CyberThemeMode.NORMAL
        await first.set_cyber_theme("glass")
        first.close()

        reloaded = CyberThemeController(api_client, JsonFilePreferenceStore(store.path), document)
        assert await reloaded.initialize() == CyberThemeMode.GLASS
        assert document.get_attribute(CYBER_THEME_ATTRIBUTE) == "glass"
        sheets = document.elements_with_id(DYNAMIC_THEME_STYLE_ID)
        assert len(sheets) == 1
        assert "glass" in sheets[0].text_content

    async def test_carousel_from_api(self, api_client):
        scheduler = VirtualTimerScheduler()
        engine = CarouselEngine(
            await api_client.fetch_carousel(), scheduler, autoplay_interval=1000
        )

        scheduler.advance(3000)

        assert engine.current_index == 0
        assert engine.current_slide.title == "Ark.Alliance Trading Platform"


class TestPortfolioSite:
    """Test cases for the page session wiring."""

    async def test_site_session(self, api_client, test_env, monkeypatch):
        monkeypatch.setenv("CAROUSEL_AUTOPLAY_INTERVAL_MS", "1000")
        monkeypatch.setenv("DEFAULT_LAYOUT_THEME", "aloevera")
        reset_settings()
        scheduler = VirtualTimerScheduler()

        async with PortfolioSite(client=api_client, scheduler=scheduler) as site:
            assert site.cyber_theme.cyber_theme == CyberThemeMode.NORMAL
            assert site.layout_theme.theme == LayoutVariant.ALOEVERA

            carousel = await site.load_carousel()
            scheduler.advance(1000)
            assert carousel.current_index == 1
            assert await site.load_carousel() is carousel

        assert (test_env / "preferences.json").exists()
        assert scheduler.pending_deadlines == []

    async def test_render_shell_reflects_themes(self, api_client, test_env):
        async with PortfolioSite(client=api_client, scheduler=VirtualTimerScheduler()) as site:
            site.layout_theme.set_theme("default")
            await site.cyber_theme.set_cyber_theme("neon")

            shell = site.render_shell()

        lines = shell.splitlines()
        assert lines[0] == '<html class="theme-default" data-cyber-theme="neon">'
        assert lines[1] == "<head>"
        assert lines[2].startswith(f'<style id="{DYNAMIC_THEME_STYLE_ID}">')
        assert "[data-cyber-theme='neon'] h1" in shell
        assert lines[-1] == "</head>"

    async def test_invalid_slides_leave_carousel_unchanged(self, test_env):
        payloads = [
            [{"id": 1, "title": "Ark", "ctaLabel": "Learn More", "ctaLink": "/projects"}],
            [{"id": 2, "title": "", "ctaLabel": "x", "ctaLink": "/y"}],
            [{"id": 3}],
        ]

        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path.endswith("/carousel"):
                return httpx.Response(200, json=payloads.pop(0))
            return httpx.Response(404)

        async with httpx.AsyncClient(
            transport=httpx.MockTransport(handler), base_url="http://cms/api/v1"
        ) as http_client:
            client = PortfolioApiClient(client=http_client)
            async with PortfolioSite(
                client=client, scheduler=VirtualTimerScheduler()
            ) as site:
                carousel = await site.load_carousel()
                assert carousel.total_slides == 1

                assert await site.load_carousel() is carousel
                assert await site.load_carousel() is carousel
                assert carousel.current_slide.title == "Ark"

    async def test_invalid_slides_raise_api_error(self):
        transport = httpx.MockTransport(
            lambda request: httpx.Response(
                200, json=[{"id": 1, "title": "", "ctaLabel": "x", "ctaLink": "/y"}]
            )
        )
        async with httpx.AsyncClient(
            transport=transport, base_url="http://cms/api/v1"
        ) as http_client:
            with pytest.raises(PortfolioApiError, match="invalid slides"):
                await PortfolioApiClient(client=http_client).fetch_carousel()

    async def test_site_offline(self, test_env):
        scheduler = VirtualTimerScheduler()

        async with offline_http_client() as http_client:
            client = PortfolioApiClient(client=http_client)
            async with PortfolioSite(client=client, scheduler=scheduler) as site:
                assert site.cyber_theme.cyber_theme == CyberThemeMode.PROFESSIONAL
                assert site.document.get_element_by_id(DYNAMIC_THEME_STYLE_ID) is None

                carousel = await site.load_carousel()
                assert carousel.total_slides == 0
                assert scheduler.pending_deadlines == []
