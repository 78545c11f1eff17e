"""
SQLAlchemy model for Theme entity.
"""

from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text

from arkfolio.data.models.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ThemeModel(Base):
    __tablename__ = "themes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    slug = Column(String(100), nullable=False, unique=True, index=True)
    description = Column(Text, nullable=True)
    css_content = Column(Text, nullable=False, default="")
    preview_color = Column(String(20), nullable=True)
    icon = Column(String(10), nullable=True)
    is_default = Column(Boolean, nullable=False, default=False)
    order = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, default=_utcnow, nullable=False)
    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow)
