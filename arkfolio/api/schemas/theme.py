"""
Theme request/response schemas.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from arkfolio.api.schemas.base import CamelModel
from arkfolio.domain.entities.theme import Theme


class ThemeListItem(CamelModel):
    """Theme list item, without CSS content to keep the selector payload small."""

    id: int
    name: str
    slug: str
    description: Optional[str] = None
    preview_color: Optional[str] = Field(None, description="Hex swatch for the selector")
    icon: Optional[str] = None
    is_default: bool = False
    order: int = 0

    @classmethod
    def from_entity(cls, theme: Theme) -> "ThemeListItem":
        return cls(
            id=theme.id,
            name=theme.name,
            slug=theme.slug,
            description=theme.description,
            preview_color=theme.preview_color,
            icon=theme.icon,
            is_default=theme.is_default,
            order=theme.order,
        )


class ThemeDetail(ThemeListItem):
    """Theme with its full CSS content."""

    css_content: str = ""

    @classmethod
    def from_entity(cls, theme: Theme) -> "ThemeDetail":
        item = ThemeListItem.from_entity(theme)
        return cls(**item.model_dump(), css_content=theme.css_content or "")
