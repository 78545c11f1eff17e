"""
Carousel slide domain entity.
"""

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Slide:
    """One entry of a carousel. Read-only to the carousel engine."""

    id: Union[int, str]
    title: str
    subtitle: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    cta_label: Optional[str] = None
    cta_link: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.title:
            raise ValueError("Slide title cannot be empty")
