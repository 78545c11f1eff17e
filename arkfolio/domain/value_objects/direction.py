"""
Slide transition direction.
"""

from enum import Enum


class Direction(str, Enum):
    """Direction of the last carousel navigation, used as an animation hint."""

    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def between(cls, previous_index: int, new_index: int) -> "Direction":
        """Moving to a higher index goes right; anything else goes left."""
        return cls.RIGHT if new_index > previous_index else cls.LEFT
