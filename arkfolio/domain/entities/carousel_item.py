"""
Carousel item domain entity with public-mapping rules.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


DEFAULT_CTA_LABEL = "Learn More"
DEFAULT_CTA_LINK = "/projects"


@dataclass
class CarouselItem:
    id: Optional[int]
    title: str
    image_url: str
    subtitle: Optional[str] = None
    description: Optional[str] = None
    link_url: Optional[str] = None
    link_text: Optional[str] = None
    order: int = 0
    is_active: bool = True
    project_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def cta_label(self) -> str:
        """Business rule: items without link text get a generic call to action."""
        return self.link_text or DEFAULT_CTA_LABEL

    def cta_link(self) -> str:
        """
        Business rule: explicit link first, then the linked project page,
        then the project index.
        """
        if self.link_url:
            return self.link_url
        if self.project_id:
            return f"{DEFAULT_CTA_LINK}/{self.project_id}"
        return DEFAULT_CTA_LINK
