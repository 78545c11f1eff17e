"""
Theme repository for data access operations.
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from arkfolio.data.models.theme_model import ThemeModel
from arkfolio.domain.entities.theme import Theme
from arkfolio.infra.config.logging_config import get_logger


class ThemeRepository:
    def __init__(self, session: AsyncSession):
        self.session = session
        self._log = get_logger("repo.theme")

    async def find_all_active(self) -> List[Theme]:
        """Active themes in selector order."""
        result = await self.session.execute(
            select(ThemeModel)
            .where(ThemeModel.is_active.is_(True))
            .order_by(ThemeModel.order.asc(), ThemeModel.name.asc())
        )
        items = [self._to_entity(model) for model in result.scalars().all()]
        self._log.info("theme.list", count=len(items))
        return items

    async def find_by_slug(self, slug: str) -> Optional[Theme]:
        result = await self.session.execute(
            select(ThemeModel).where(
                ThemeModel.slug == slug, ThemeModel.is_active.is_(True)
            )
        )
        model = result.scalar_one_or_none()
        if not model:
            self._log.info("theme.get.not_found", slug=slug)
            return None
        return self._to_entity(model)

    async def find_default(self) -> Optional[Theme]:
        result = await self.session.execute(
            select(ThemeModel)
            .where(ThemeModel.is_default.is_(True), ThemeModel.is_active.is_(True))
            .order_by(ThemeModel.order.asc())
            .limit(1)
        )
        model = result.scalar_one_or_none()
        if not model:
            self._log.info("theme.default.not_found")
            return None
        return self._to_entity(model)

    async def exists_by_slug(self, slug: str) -> bool:
        result = await self.session.execute(
            select(ThemeModel.id).where(ThemeModel.slug == slug)
        )
        return result.first() is not None

    async def create(self, theme: Theme) -> Theme:
        model = ThemeModel(
            name=theme.name,
            slug=theme.slug,
            description=theme.description,
            css_content=theme.css_content,
            preview_color=theme.preview_color,
            icon=theme.icon,
            is_default=theme.is_default,
            order=theme.order,
            is_active=theme.is_active,
        )
        self.session.add(model)
        await self.session.flush()

        theme.id = model.id
        self._log.info("theme.create", slug=theme.slug, theme_id=theme.id)
        return theme

    def _to_entity(self, model: ThemeModel) -> Theme:
        """Convert SQLAlchemy model to domain entity."""
        return Theme(
            id=model.id,
            name=model.name,
            slug=model.slug,
            css_content=model.css_content or "",
            description=model.description,
            preview_color=model.preview_color,
            icon=model.icon,
            is_default=model.is_default,
            order=model.order,
            is_active=model.is_active,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
