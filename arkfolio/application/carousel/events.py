"""
Input events consumed by the carousel engine.
"""

from dataclasses import dataclass, field
from typing import List


@dataclass
class KeyEvent:
    key: str
    default_prevented: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True


@dataclass(frozen=True)
class TouchPoint:
    client_x: float
    client_y: float = 0.0


@dataclass
class TouchEvent:
    touches: List[TouchPoint] = field(default_factory=list)
    changed_touches: List[TouchPoint] = field(default_factory=list)
