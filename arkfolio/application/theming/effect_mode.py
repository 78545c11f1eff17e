"""
Effect-mode theme controller.

Resolves the active effect mode from the persisted preference or the backend
default, persists explicit choices, and keeps the single dynamic stylesheet in
sync with the active mode's CSS.
"""

from __future__ import annotations

import asyncio
from typing import Coroutine, Optional, Set, Union

from arkfolio.application.ports import (
    PreferenceStoreError,
    PreferenceStorePort,
    ThemeSourcePort,
)
from arkfolio.application.theming.stylesheet import inject_theme_css
from arkfolio.domain.value_objects.theme_mode import (
    CYBER_THEME_ATTRIBUTE,
    CYBER_THEME_STORAGE_KEY,
    CyberThemeMode,
    ThemePhase,
)
from arkfolio.infra.config.logging_config import get_logger
from arkfolio.infra.document.dom import Document


class CyberThemeController:
    """
    Owns the effect-mode axis for one document.

    Lifecycle: construct, ``await initialize()``, then ``set_cyber_theme`` /
    ``cycle_cyber_theme`` on user action, and ``close()`` when the document
    goes away. CSS fetches never raise to the caller; failures are logged
    and the page keeps its static styling.
    """

    def __init__(
        self,
        source: ThemeSourcePort,
        store: PreferenceStorePort,
        document: Document,
        default_mode: Union[CyberThemeMode, str] = CyberThemeMode.PROFESSIONAL,
    ):
        self._source = source
        self._store = store
        self._document = document
        self._default_mode = CyberThemeMode.parse(default_mode) or CyberThemeMode.PROFESSIONAL
        self._mode = self._default_mode
        self._phase = ThemePhase.UNINITIALIZED
        self._loading = 0
        self._pending: Set[asyncio.Task] = set()
        self._load_seq = 0
        self._selected_while_resolving = False
        self._log = get_logger("theming.cyber")

    @property
    def cyber_theme(self) -> CyberThemeMode:
        return self._mode

    @property
    def phase(self) -> ThemePhase:
        return self._phase

    @property
    def is_loading_theme(self) -> bool:
        return self._loading > 0

    async def initialize(self) -> CyberThemeMode:
        """
        Resolve the starting mode.

        A valid persisted preference wins and no backend default is consulted.
        Otherwise the backend default is fetched; an unknown slug or a failed
        request falls back to the configured default mode.
        """
        if self._phase is not ThemePhase.UNINITIALIZED:
            return self._mode

        stored = self._read_stored()
        if stored is not None:
            self._mode = stored
            self._phase = ThemePhase.READY
            self._log.info("theme.init.stored", mode=stored.value)
            self._apply_side_effects()
            await self._load_for_mode(stored)
            return self._mode

        self._phase = ThemePhase.RESOLVING
        self._selected_while_resolving = False
        try:
            theme = await self._source.fetch_default_theme()
        except Exception as e:
            self._log.warning("theme.init.default_failed", error=str(e))
            theme = None

        if self._selected_while_resolving:
            # An explicit choice arrived while the default was in flight.
            self._phase = ThemePhase.READY
            self._log.info("theme.init.default_superseded", mode=self._mode.value)
            return self._mode

        mode = CyberThemeMode.parse(theme.slug) if theme else None
        if theme is not None and mode is None:
            self._log.warning("theme.init.default_unknown_slug", slug=theme.slug)

        self._phase = ThemePhase.READY
        if mode is not None:
            self._mode = mode
            inject_theme_css(self._document, theme.css_content)
            self._apply_side_effects()
        else:
            self._mode = self._default_mode
            self._apply_side_effects()
            await self._load_for_mode(self._mode)

        self._log.info("theme.init.ready", mode=self._mode.value)
        return self._mode

    def set_cyber_theme(self, mode: Union[CyberThemeMode, str]) -> Optional[asyncio.Task]:
        """
        Make ``mode`` the active effect mode.

        Invalid modes are ignored with a warning. For a valid change the root
        attribute and the stored preference are written immediately, then the
        CSS fetch is started in the background.

        Returns:
            The CSS load task, or None when nothing was fetched.
        """
        target = CyberThemeMode.parse(mode)
        if target is None:
            self._log.warning("theme.mode.invalid", mode=str(mode))
            return None
        if target is self._mode and self._phase is ThemePhase.READY:
            return None

        self._mode = target
        if self._phase is ThemePhase.RESOLVING:
            self._selected_while_resolving = True
        self._log.info("theme.mode.selected", mode=target.value, phase=self._phase.value)
        self._apply_side_effects()

        if self._phase is ThemePhase.UNINITIALIZED:
            # initialize() will pick the stored choice up and load its CSS
            return None
        return self._spawn(self._load_for_mode(target))

    def cycle_cyber_theme(self) -> Optional[asyncio.Task]:
        return self.set_cyber_theme(self._mode.next())

    async def load_theme_css(self, slug: str) -> None:
        """Fetch a theme by slug and inject its CSS, whatever the active mode."""
        await self._fetch_and_inject(slug, expected=None)

    async def wait_for_pending(self) -> None:
        """Wait until every background CSS load has finished."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    def close(self) -> None:
        for task in list(self._pending):
            task.cancel()
        self._pending.clear()

    def _spawn(self, coro: Coroutine) -> asyncio.Task:
        task = asyncio.get_running_loop().create_task(coro)
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    def _load_for_mode(self, mode: CyberThemeMode) -> Coroutine:
        # Numbered when requested, not when the task starts running
        self._load_seq += 1
        return self._fetch_and_inject(mode.value, expected=mode, seq=self._load_seq)

    async def _fetch_and_inject(
        self, slug: str, expected: Optional[CyberThemeMode], seq: int = 0
    ) -> None:
        self._loading += 1
        try:
            try:
                theme = await self._source.fetch_theme_by_slug(slug)
            except Exception as e:
                self._log.warning("theme.css.fetch_failed", slug=slug, error=str(e))
                theme = None

            if expected is not None and (
                expected is not self._mode or seq != self._load_seq
            ):
                # A newer mode load owns the sheet
                self._log.info(
                    "theme.css.stale", slug=slug, seq=seq, active=self._mode.value
                )
                return

            if theme is None:
                self._log.warning("theme.css.unavailable", slug=slug)
            inject_theme_css(self._document, theme.css_content if theme else None)
        finally:
            self._loading -= 1

    def _read_stored(self) -> Optional[CyberThemeMode]:
        try:
            stored = self._store.get_item(CYBER_THEME_STORAGE_KEY)
        except PreferenceStoreError as e:
            self._log.warning("theme.storage.read_failed", error=str(e))
            return None

        mode = CyberThemeMode.parse(stored)
        if stored is not None and mode is None:
            self._log.warning("theme.storage.invalid", value=stored)
        return mode

    def _apply_side_effects(self) -> None:
        self._document.set_attribute(CYBER_THEME_ATTRIBUTE, self._mode.value)
        try:
            self._store.set_item(CYBER_THEME_STORAGE_KEY, self._mode.value)
        except PreferenceStoreError as e:
            self._log.warning("theme.storage.write_failed", error=str(e))
