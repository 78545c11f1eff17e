"""
Theme read endpoints consumed by the theme pipeline.
"""

from typing import List

from fastapi import APIRouter, Depends, Path

from arkfolio.api.dependencies import get_theme_service
from arkfolio.api.schemas.theme import ThemeDetail, ThemeListItem
from arkfolio.application.services.theme_service import ThemeService
from arkfolio.infra.config.logging_config import bind_context, get_logger

router = APIRouter(prefix="/themes", tags=["themes"])
SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"
log = get_logger("api.themes")


@router.get("", response_model=List[ThemeListItem])
async def list_themes(
    service: ThemeService = Depends(get_theme_service),
) -> List[ThemeListItem]:
    """All active themes, without CSS content."""
    themes = await service.list_themes()
    log.info("themes.list.success", count=len(themes))
    return themes


# Declared before /{slug} so "default" is not read as a slug
@router.get("/default", response_model=ThemeDetail)
async def get_default_theme(
    service: ThemeService = Depends(get_theme_service),
) -> ThemeDetail:
    """The default theme with full CSS content."""
    theme = await service.get_default_theme()
    log.info("themes.default.success", slug=theme.slug)
    return theme


@router.get("/{slug}", response_model=ThemeDetail)
async def get_theme_by_slug(
    slug: str = Path(..., max_length=100, pattern=SLUG_PATTERN),
    service: ThemeService = Depends(get_theme_service),
) -> ThemeDetail:
    """A specific theme with full CSS content."""
    bind_context(slug=slug)
    theme = await service.get_theme_by_slug(slug)
    log.info("themes.get.success")
    return theme
