"""
HTTP client for the Arkfolio API.

Implements the theme data source used by the theme pipeline and the slide
data source used to feed carousels.
"""

from __future__ import annotations

from typing import Any, List, Optional

import httpx
from pydantic import ValidationError

from arkfolio.api.schemas.carousel import CarouselSlideDto
from arkfolio.api.schemas.theme import ThemeDetail, ThemeListItem
from arkfolio.application.ports import ThemeSourcePort
from arkfolio.domain.entities.slide import Slide
from arkfolio.infra.config.logging_config import get_logger
from arkfolio.infra.config.settings import get_settings


class PortfolioApiError(Exception):
    """Raised when the API cannot be reached or answers with an error."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class PortfolioApiClient(ThemeSourcePort):
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        settings = get_settings()
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout if timeout is not None else settings.http_timeout_seconds,
        )
        self._log = get_logger("http.portfolio")

    async def __aenter__(self) -> "PortfolioApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def _get_json(self, path: str, allow_not_found: bool = False) -> Any:
        try:
            response = await self._client.get(path)
        except httpx.HTTPError as e:
            self._log.warning("api.request.failed", path=path, error=str(e))
            raise PortfolioApiError(f"GET {path} failed: {e}") from e

        if response.status_code == 404 and allow_not_found:
            self._log.info("api.request.not_found", path=path)
            return None
        if response.is_error:
            self._log.warning(
                "api.request.error_status", path=path, status_code=response.status_code
            )
            raise PortfolioApiError(
                f"GET {path} returned {response.status_code}",
                status_code=response.status_code,
            )
        try:
            return response.json()
        except ValueError as e:
            raise PortfolioApiError(f"GET {path} returned invalid JSON") from e

    async def fetch_themes(self) -> List[ThemeListItem]:
        """Active themes; an empty list when the API is unavailable."""
        try:
            data = await self._get_json("/themes")
            return [ThemeListItem.model_validate(item) for item in data]
        except (PortfolioApiError, ValidationError) as e:
            self._log.warning("api.themes.unavailable", error=str(e))
            return []

    async def fetch_theme_by_slug(self, slug: str) -> Optional[ThemeDetail]:
        data = await self._get_json(f"/themes/{slug}", allow_not_found=True)
        return ThemeDetail.model_validate(data) if data is not None else None

    async def fetch_default_theme(self) -> Optional[ThemeDetail]:
        data = await self._get_json("/themes/default", allow_not_found=True)
        return ThemeDetail.model_validate(data) if data is not None else None

    async def fetch_carousel(self) -> List[Slide]:
        """
        Public slides in display order.

        Raises:
            PortfolioApiError: Transport failure, error status, or a payload
                that does not describe valid slides
        """
        data = await self._get_json("/carousel")
        try:
            return [CarouselSlideDto.model_validate(item).to_slide() for item in data]
        except (ValueError, TypeError) as e:
            # pydantic's ValidationError is a ValueError, as is an empty slide title
            self._log.warning("api.carousel.invalid_payload", error=str(e))
            raise PortfolioApiError(f"GET /carousel returned invalid slides: {e}") from e
