"""
Theme domain entity.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Theme:
    """A visual theme stored with its full CSS so it can be injected at runtime."""

    id: Optional[int]
    name: str
    slug: str
    css_content: str
    description: Optional[str] = None
    preview_color: Optional[str] = None
    icon: Optional[str] = None
    is_default: bool = False
    order: int = 0
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def has_css(self) -> bool:
        return bool(self.css_content and self.css_content.strip())
