from .dom import Document, StyleElement

__all__ = ["Document", "StyleElement"]
