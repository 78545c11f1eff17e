"""
Public carousel read operations.
"""

from typing import List

from arkfolio.api.schemas.carousel import CarouselSlideDto
from arkfolio.data.repositories.carousel_repository import CarouselRepository


class CarouselService:
    def __init__(self, repository: CarouselRepository):
        self.repository = repository

    async def get_public_slides(self) -> List[CarouselSlideDto]:
        items = await self.repository.find_active()
        items.sort(key=lambda item: item.order)
        return [CarouselSlideDto.from_entity(item) for item in items]
