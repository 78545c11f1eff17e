from .direction import Direction
from .layout_variant import (
    DEFAULT_LAYOUT_VARIANT,
    LAYOUT_THEME_CONFIGS,
    LAYOUT_THEME_STORAGE_KEY,
    LayoutThemeConfig,
    LayoutVariant,
)
from .theme_mode import (
    CYBER_THEME_ATTRIBUTE,
    CYBER_THEME_STORAGE_KEY,
    DYNAMIC_THEME_STYLE_ID,
    CyberThemeMode,
    ThemePhase,
)

__all__ = [
    "Direction",
    "CyberThemeMode",
    "ThemePhase",
    "LayoutVariant",
    "LayoutThemeConfig",
    "LAYOUT_THEME_CONFIGS",
    "DEFAULT_LAYOUT_VARIANT",
    "LAYOUT_THEME_STORAGE_KEY",
    "CYBER_THEME_STORAGE_KEY",
    "CYBER_THEME_ATTRIBUTE",
    "DYNAMIC_THEME_STYLE_ID",
]
