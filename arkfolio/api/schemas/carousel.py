"""
Public carousel schemas.
"""

from __future__ import annotations

from typing import Optional, Union

from arkfolio.api.schemas.base import CamelModel
from arkfolio.domain.entities.carousel_item import CarouselItem
from arkfolio.domain.entities.slide import Slide


class CarouselSlideDto(CamelModel):
    id: Union[int, str]
    title: str
    subtitle: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    cta_label: str
    cta_link: str

    @classmethod
    def from_entity(cls, item: CarouselItem) -> "CarouselSlideDto":
        return cls(
            id=item.id,
            title=item.title,
            subtitle=item.subtitle,
            description=item.description,
            image_url=item.image_url,
            cta_label=item.cta_label(),
            cta_link=item.cta_link(),
        )

    def to_slide(self) -> Slide:
        return Slide(
            id=self.id,
            title=self.title,
            subtitle=self.subtitle,
            description=self.description,
            image_url=self.image_url,
            cta_label=self.cta_label,
            cta_link=self.cta_link,
        )
