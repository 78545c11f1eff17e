"""
Application ports - abstract interfaces for external dependencies.

These interfaces define the contracts that the carousel engine and the theme
pipeline need from their environment (timers, durable storage, the theme
backend), following the Dependency Inversion Principle.
"""

from abc import ABC, abstractmethod
from typing import Callable, List, Optional

from arkfolio.api.schemas.theme import ThemeDetail, ThemeListItem


class PreferenceStoreError(Exception):
    """Raised when preference storage cannot be read or written."""


class TimerHandle(ABC):
    """A pending one-shot timer."""

    @abstractmethod
    def cancel(self) -> None:
        """Cancel the timer. Cancelling twice or after firing is harmless."""
        pass


class SchedulerPort(ABC):
    """Abstract single-threaded timer source."""

    @abstractmethod
    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle:
        """Run callback once after delay_ms milliseconds."""
        pass

    @abstractmethod
    def now_ms(self) -> float:
        """Current time of this scheduler's clock, in milliseconds."""
        pass


class PreferenceStorePort(ABC):
    """Durable key-value storage for client preferences."""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Read a stored value, None if missing."""
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Persist a value."""
        pass

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Delete a value if present."""
        pass


class ThemeSourcePort(ABC):
    """Backend collaborator providing theme rows and their CSS."""

    @abstractmethod
    async def fetch_themes(self) -> List[ThemeListItem]:
        """List active themes without CSS."""
        pass

    @abstractmethod
    async def fetch_theme_by_slug(self, slug: str) -> Optional[ThemeDetail]:
        """Get a theme with CSS, None if unknown."""
        pass

    @abstractmethod
    async def fetch_default_theme(self) -> Optional[ThemeDetail]:
        """Get the default theme with CSS, None if none is configured."""
        pass
