from .base import Base
from .carousel_item_model import CarouselItemModel
from .theme_model import ThemeModel

__all__ = ["Base", "CarouselItemModel", "ThemeModel"]
