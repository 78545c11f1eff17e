"""
FastAPI dependency wiring for the read services.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from arkfolio.application.services.carousel_service import CarouselService
from arkfolio.application.services.theme_service import ThemeService
from arkfolio.data.repositories.carousel_repository import CarouselRepository
from arkfolio.data.repositories.theme_repository import ThemeRepository
from arkfolio.infra.config.database import get_db_session


def get_theme_service(
    db_session: AsyncSession = Depends(get_db_session),
) -> ThemeService:
    return ThemeService(ThemeRepository(db_session))


def get_carousel_service(
    db_session: AsyncSession = Depends(get_db_session),
) -> CarouselService:
    return CarouselService(CarouselRepository(db_session))
