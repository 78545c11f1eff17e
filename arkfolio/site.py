"""
Client-side composition root.

Builds one page session: API client, preference store, document, both theme
controllers and, on demand, the homepage carousel.
"""

from __future__ import annotations

from typing import Optional

from arkfolio.application.carousel.engine import CarouselEngine
from arkfolio.application.ports import PreferenceStorePort, SchedulerPort
from arkfolio.application.theming.effect_mode import CyberThemeController
from arkfolio.application.theming.layout import LayoutThemeController
from arkfolio.infra.config.logging_config import get_logger
from arkfolio.infra.config.settings import Settings, get_settings
from arkfolio.infra.document.dom import Document
from arkfolio.infra.http.portfolio_client import PortfolioApiClient, PortfolioApiError
from arkfolio.infra.scheduling.timers import AsyncioTimerScheduler
from arkfolio.infra.storage.preferences import JsonFilePreferenceStore


class PortfolioSite:
    """
    Owns every client-side collaborator of a single page.

    Use as ``async with PortfolioSite() as site:``; entering runs the theme
    pipeline, leaving stops autoplay, cancels CSS loads and closes the client.
    """

    def __init__(
        self,
        client: Optional[PortfolioApiClient] = None,
        store: Optional[PreferenceStorePort] = None,
        scheduler: Optional[SchedulerPort] = None,
        document: Optional[Document] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        self.client = client or PortfolioApiClient()
        self.store = store or JsonFilePreferenceStore(self.settings.preferences_path)
        self.scheduler = scheduler or AsyncioTimerScheduler()
        self.document = document or Document()
        self.cyber_theme = CyberThemeController(
            self.client,
            self.store,
            self.document,
            default_mode=self.settings.default_cyber_theme,
        )
        self.layout_theme = LayoutThemeController(
            self.store,
            self.document,
            default_theme=self.settings.default_layout_theme,
        )
        self.carousel: Optional[CarouselEngine] = None
        self._log = get_logger("site")

    async def __aenter__(self) -> "PortfolioSite":
        await self.start()
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def start(self) -> None:
        mode = await self.cyber_theme.initialize()
        self._log.info(
            "site.started", cyber_theme=mode.value, layout_theme=self.layout_theme.theme.value
        )

    async def load_carousel(self, pause_on_interaction: bool = True) -> CarouselEngine:
        """
        Fetch the public slides and (re)build the homepage carousel.

        An unreachable API leaves an existing carousel untouched, or yields an
        empty one that never autoplays.
        """
        try:
            slides = await self.client.fetch_carousel()
        except PortfolioApiError as e:
            self._log.warning("site.carousel.unavailable", error=str(e))
            if self.carousel is not None:
                return self.carousel
            slides = []

        if self.carousel is not None:
            self.carousel.update_slides(slides)
        else:
            self.carousel = CarouselEngine(
                slides,
                self.scheduler,
                autoplay_interval=self.settings.carousel_autoplay_interval_ms,
                pause_on_interaction=pause_on_interaction,
            )
        self._log.info("site.carousel.loaded", count=len(slides))
        return self.carousel

    def render_shell(self) -> str:
        """Opening ``<html>`` tag and head styles reflecting the current themes."""
        return "\n".join(
            [
                self.document.render_root_open_tag(),
                "<head>",
                self.document.render_head_styles(),
                "</head>",
            ]
        )

    async def close(self) -> None:
        if self.carousel is not None:
            self.carousel.close()
        self.cyber_theme.close()
        await self.client.aclose()
