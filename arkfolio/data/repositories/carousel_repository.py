"""
Carousel repository for data access operations.
"""

from typing import List

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from arkfolio.data.models.carousel_item_model import CarouselItemModel
from arkfolio.domain.entities.carousel_item import CarouselItem
from arkfolio.infra.config.logging_config import get_logger


class CarouselRepository:
    def __init__(self, session: AsyncSession):
        self.session = session
        self._log = get_logger("repo.carousel")

    async def find_active(self) -> List[CarouselItem]:
        """Active items in display order."""
        result = await self.session.execute(
            select(CarouselItemModel)
            .where(CarouselItemModel.is_active.is_(True))
            .order_by(CarouselItemModel.order.asc(), CarouselItemModel.id.asc())
        )
        items = [self._to_entity(model) for model in result.scalars().all()]
        self._log.info("carousel.list", count=len(items))
        return items

    async def count(self) -> int:
        result = await self.session.execute(
            select(func.count()).select_from(CarouselItemModel)
        )
        return result.scalar_one()

    async def create(self, item: CarouselItem) -> CarouselItem:
        model = CarouselItemModel(
            title=item.title,
            subtitle=item.subtitle,
            description=item.description,
            image_url=item.image_url,
            link_url=item.link_url,
            link_text=item.link_text,
            order=item.order,
            is_active=item.is_active,
            project_id=item.project_id,
        )
        self.session.add(model)
        await self.session.flush()

        item.id = model.id
        self._log.info("carousel.create", item_id=item.id, title=item.title)
        return item

    def _to_entity(self, model: CarouselItemModel) -> CarouselItem:
        """Convert SQLAlchemy model to domain entity."""
        return CarouselItem(
            id=model.id,
            title=model.title,
            image_url=model.image_url,
            subtitle=model.subtitle,
            description=model.description,
            link_url=model.link_url,
            link_text=model.link_text,
            order=model.order,
            is_active=model.is_active,
            project_id=model.project_id,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
