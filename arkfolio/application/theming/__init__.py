"""Theme resolution and dynamic CSS injection."""

from .effect_mode import CyberThemeController
from .layout import LayoutThemeController
from .stylesheet import inject_theme_css

__all__ = ["CyberThemeController", "LayoutThemeController", "inject_theme_css"]
