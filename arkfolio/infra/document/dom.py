"""
Minimal document model: head stylesheets plus root element attributes and
classes. Mirrors the parts of a browser document the theme pipeline touches.
"""

from __future__ import annotations

from dataclasses import dataclass
from html import escape
from typing import Dict, List, Optional, Set


@dataclass
class StyleElement:
    id: Optional[str]
    text_content: str


class Document:
    def __init__(self) -> None:
        self.head: List[StyleElement] = []
        self.root_attributes: Dict[str, str] = {}
        self.root_classes: Set[str] = set()

    # Head
    def get_element_by_id(self, element_id: str) -> Optional[StyleElement]:
        for element in self.head:
            if element.id == element_id:
                return element
        return None

    def elements_with_id(self, element_id: str) -> List[StyleElement]:
        return [el for el in self.head if el.id == element_id]

    def append_style(self, element: StyleElement) -> StyleElement:
        self.head.append(element)
        return element

    def remove_element(self, element: StyleElement) -> None:
        self.head = [el for el in self.head if el is not element]

    # Root element
    def set_attribute(self, name: str, value: str) -> None:
        self.root_attributes[name] = value

    def get_attribute(self, name: str) -> Optional[str]:
        return self.root_attributes.get(name)

    def render_root_open_tag(self) -> str:
        """Opening <html> tag carrying the current attributes and classes."""
        parts = ["<html"]
        if self.root_classes:
            parts.append(f' class="{escape(" ".join(sorted(self.root_classes)))}"')
        for name in sorted(self.root_attributes):
            parts.append(f' {name}="{escape(self.root_attributes[name])}"')
        parts.append(">")
        return "".join(parts)

    def render_head_styles(self) -> str:
        out = []
        for element in self.head:
            id_attr = f' id="{escape(element.id)}"' if element.id else ""
            out.append(f"<style{id_attr}>{element.text_content}</style>")
        return "\n".join(out)
