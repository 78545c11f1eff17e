"""
Layout theme value objects and static configuration.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional


class LayoutVariant(str, Enum):
    """Structural page-layout variant, independent from the effect mode."""

    DEFAULT = "default"  # Dark cyberpunk theme with sidebar navigation
    ARCHITECTURAL = "architectural"  # Light minimalist theme with radial navigation
    ALOEVERA = "aloevera"  # Purple gradient theme with modern typography

    @classmethod
    def parse(cls, value: object) -> Optional["LayoutVariant"]:
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None

    @property
    def css_class(self) -> str:
        return f"theme-{self.value}"


@dataclass(frozen=True)
class LayoutThemeConfig:
    variant: LayoutVariant
    display_name: str
    description: str
    # Full-screen layouts have no sidebar
    is_full_screen: bool


LAYOUT_THEME_CONFIGS: Dict[LayoutVariant, LayoutThemeConfig] = {
    LayoutVariant.DEFAULT: LayoutThemeConfig(
        variant=LayoutVariant.DEFAULT,
        display_name="Cyberpunk",
        description="Dark theme with sidebar navigation",
        is_full_screen=False,
    ),
    LayoutVariant.ARCHITECTURAL: LayoutThemeConfig(
        variant=LayoutVariant.ARCHITECTURAL,
        display_name="Architectural",
        description="Light minimalist theme with radial navigation",
        is_full_screen=True,
    ),
    LayoutVariant.ALOEVERA: LayoutThemeConfig(
        variant=LayoutVariant.ALOEVERA,
        display_name="Aloe Vera",
        description="Purple gradient theme with modern typography",
        is_full_screen=False,
    ),
}

DEFAULT_LAYOUT_VARIANT = LayoutVariant.ARCHITECTURAL
LAYOUT_THEME_STORAGE_KEY = "ark-portfolio-theme"
