"""
API schemas for Arkfolio.
"""

from .base import CamelModel, ErrorResponse, HealthResponse
from .carousel import CarouselSlideDto
from .theme import ThemeDetail, ThemeListItem

__all__ = [
    "CamelModel",
    "ErrorResponse",
    "HealthResponse",
    "CarouselSlideDto",
    "ThemeDetail",
    "ThemeListItem",
]
