"""
Read-side theme operations for the public API.
"""

from typing import List

from arkfolio.api.errors import DefaultThemeNotConfiguredError, ThemeNotFoundError
from arkfolio.api.schemas.theme import ThemeDetail, ThemeListItem
from arkfolio.data.repositories.theme_repository import ThemeRepository


class ThemeService:
    def __init__(self, repository: ThemeRepository):
        self.repository = repository

    async def list_themes(self) -> List[ThemeListItem]:
        """Active themes for the selector; CSS is left out of list payloads."""
        themes = await self.repository.find_all_active()
        return [ThemeListItem.from_entity(theme) for theme in themes]

    async def get_theme_by_slug(self, slug: str) -> ThemeDetail:
        """
        Raises:
            ThemeNotFoundError: If no active theme has this slug
        """
        theme = await self.repository.find_by_slug(slug)
        if theme is None:
            raise ThemeNotFoundError(slug)
        return ThemeDetail.from_entity(theme)

    async def get_default_theme(self) -> ThemeDetail:
        """
        Raises:
            DefaultThemeNotConfiguredError: If no active theme is flagged default
        """
        theme = await self.repository.find_default()
        if theme is None:
            raise DefaultThemeNotConfiguredError()
        return ThemeDetail.from_entity(theme)
