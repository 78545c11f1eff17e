"""
Layout theme controller.
"""

from __future__ import annotations

from typing import Optional, Union

from arkfolio.application.ports import PreferenceStoreError, PreferenceStorePort
from arkfolio.domain.value_objects.layout_variant import (
    DEFAULT_LAYOUT_VARIANT,
    LAYOUT_THEME_CONFIGS,
    LAYOUT_THEME_STORAGE_KEY,
    LayoutThemeConfig,
    LayoutVariant,
)
from arkfolio.infra.config.logging_config import get_logger
from arkfolio.infra.document.dom import Document


class LayoutThemeController:
    """Keeps exactly one ``theme-<variant>`` class on the document root."""

    def __init__(
        self,
        store: PreferenceStorePort,
        document: Document,
        initial_theme: Optional[Union[LayoutVariant, str]] = None,
        default_theme: Union[LayoutVariant, str] = DEFAULT_LAYOUT_VARIANT,
    ):
        self._store = store
        self._document = document
        self._log = get_logger("theming.layout")
        self._default = LayoutVariant.parse(default_theme) or DEFAULT_LAYOUT_VARIANT
        self._theme = LayoutVariant.parse(initial_theme) or self._read_stored()
        self._apply()

    @property
    def theme(self) -> LayoutVariant:
        return self._theme

    @property
    def config(self) -> LayoutThemeConfig:
        return LAYOUT_THEME_CONFIGS[self._theme]

    def set_theme(self, theme: Union[LayoutVariant, str]) -> bool:
        """
        Switch layout theme and persist the choice.

        Returns:
            bool: False when ``theme`` is not a known variant.
        """
        variant = LayoutVariant.parse(theme)
        if variant is None:
            self._log.warning("layout.theme.invalid", theme=str(theme))
            return False

        self._theme = variant
        try:
            self._store.set_item(LAYOUT_THEME_STORAGE_KEY, variant.value)
        except PreferenceStoreError as e:
            self._log.warning("layout.storage.write_failed", error=str(e))
        self._apply()
        self._log.info("layout.theme.selected", theme=variant.value)
        return True

    def toggle_theme(self) -> LayoutVariant:
        variants = list(LAYOUT_THEME_CONFIGS)
        next_variant = variants[(variants.index(self._theme) + 1) % len(variants)]
        self.set_theme(next_variant)
        return next_variant

    def _read_stored(self) -> LayoutVariant:
        try:
            stored = self._store.get_item(LAYOUT_THEME_STORAGE_KEY)
        except PreferenceStoreError as e:
            self._log.warning("layout.storage.read_failed", error=str(e))
            return self._default
        return LayoutVariant.parse(stored) or self._default

    def _apply(self) -> None:
        for variant in LayoutVariant:
            self._document.root_classes.discard(variant.css_class)
        self._document.root_classes.add(self._theme.css_class)
