"""
Domain layer - Core entities and value objects.

Pure business rules for slides, carousel items and themes, independent of
HTTP, storage or the client environment.
"""

from .entities import CarouselItem, Slide, Theme
from .value_objects import CyberThemeMode, Direction, LayoutVariant, ThemePhase

__all__ = [
    "CarouselItem",
    "Slide",
    "Theme",
    "CyberThemeMode",
    "Direction",
    "LayoutVariant",
    "ThemePhase",
]
