"""
Dynamic theme stylesheet injection.
"""

from typing import Optional

from arkfolio.domain.value_objects.theme_mode import DYNAMIC_THEME_STYLE_ID
from arkfolio.infra.config.logging_config import get_logger
from arkfolio.infra.document.dom import Document, StyleElement

log = get_logger("theming.stylesheet")


def inject_theme_css(
    document: Document, css_content: Optional[str], style_id: str = DYNAMIC_THEME_STYLE_ID
) -> Optional[StyleElement]:
    """
    Replace the dynamic theme stylesheet.

    Every element carrying ``style_id`` is removed first. A new element is
    created only for non-empty content, so empty content leaves the page on
    its static rules.

    Returns:
        The new element, or None when nothing was injected.
    """
    for existing in document.elements_with_id(style_id):
        document.remove_element(existing)

    if not css_content:
        log.info("theme.css.cleared", style_id=style_id)
        return None

    element = document.append_style(StyleElement(id=style_id, text_content=css_content))
    log.info("theme.css.injected", style_id=style_id, length=len(css_content))
    return element
