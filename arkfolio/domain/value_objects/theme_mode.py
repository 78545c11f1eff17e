"""
Effect-mode theme value objects.
"""

from enum import Enum
from typing import Optional


class CyberThemeMode(str, Enum):
    """
    Visual effect intensity applied on top of the layout theme.

    The member order is the cycling order used by the theme switcher.
    """

    PROFESSIONAL = "professional"
    NORMAL = "normal"
    NEON = "neon"
    MINIMAL = "minimal"
    GLASS = "glass"

    @classmethod
    def parse(cls, value: object) -> Optional["CyberThemeMode"]:
        """
        Business rule: only members of the closed set are valid modes.

        Returns:
            The matching mode, or None for anything else (including None).
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None

    def next(self) -> "CyberThemeMode":
        """Next mode in cycling order, wrapping around."""
        modes = list(type(self))
        return modes[(modes.index(self) + 1) % len(modes)]


class ThemePhase(str, Enum):
    """Lifecycle of the effect-mode resolution."""

    UNINITIALIZED = "uninitialized"
    RESOLVING = "resolving"
    READY = "ready"


CYBER_THEME_STORAGE_KEY = "ark-portfolio-cyber-theme"
CYBER_THEME_ATTRIBUTE = "data-cyber-theme"
DYNAMIC_THEME_STYLE_ID = "ark-dynamic-theme-css"
