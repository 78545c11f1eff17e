"""Carousel interaction engine."""

from .engine import (
    DEFAULT_AUTOPLAY_INTERVAL_MS,
    SWIPE_THRESHOLD,
    CarouselEngine,
    CarouselState,
)
from .events import KeyEvent, TouchEvent, TouchPoint

__all__ = [
    "CarouselEngine",
    "CarouselState",
    "DEFAULT_AUTOPLAY_INTERVAL_MS",
    "SWIPE_THRESHOLD",
    "KeyEvent",
    "TouchEvent",
    "TouchPoint",
]
