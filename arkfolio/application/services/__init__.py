from .carousel_service import CarouselService
from .theme_service import ThemeService

__all__ = ["CarouselService", "ThemeService"]
