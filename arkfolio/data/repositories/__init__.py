from .carousel_repository import CarouselRepository
from .theme_repository import ThemeRepository

__all__ = ["CarouselRepository", "ThemeRepository"]
