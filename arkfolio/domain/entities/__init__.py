from .carousel_item import CarouselItem
from .slide import Slide
from .theme import Theme

__all__ = ["CarouselItem", "Slide", "Theme"]
