"""HTML sanitization with per-element style filtering.

bleach removes disallowed tags, attributes and URL schemes; afterwards every
remaining ``style`` attribute is run through a `Policy` with the name of the
element it sits on, which bleach's own CSS hook does not know.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict, Iterable, List, Mapping, Optional

import bleach
from bleach.css_sanitizer import CSSSanitizer
from bs4 import BeautifulSoup

if TYPE_CHECKING:
    from ..policy import Policy

logger = logging.getLogger(__name__)


# Tags that may carry inline styles in user supplied rich text
ALLOWED_TAGS = [
    'p', 'br', 'div', 'span', 'a', 'img',
    'b', 'i', 'u', 'strong', 'em', 'mark', 'small', 'del', 'ins', 'sub', 'sup', 's',
    'h1', 'h2', 'h3', 'h4', 'h5', 'h6',
    'ul', 'ol', 'li', 'dl', 'dt', 'dd',
    'blockquote', 'pre', 'code',
    'table', 'thead', 'tbody', 'tfoot', 'tr', 'td', 'th', 'caption', 'colgroup', 'col',
    'hr', 'abbr', 'cite', 'q', 'time',
    'font', 'center', 'article', 'section', 'header', 'footer', 'figure', 'figcaption',
]

# `style` on every tag; its value is decided by the style policy
ALLOWED_ATTRIBUTES: Dict[str, List[str]] = {
    '*': ['class', 'id', 'dir', 'lang', 'title', 'style'],
    'a': ['href', 'target', 'rel', 'name'],
    'img': ['src', 'alt', 'width', 'height'],
    'td': ['colspan', 'rowspan'],
    'th': ['colspan', 'rowspan'],
    'ol': ['type', 'start'],
    'li': ['value'],
    'time': ['datetime'],
    'abbr': ['title'],
    'blockquote': ['cite'],
}

ALLOWED_PROTOCOLS = ['http', 'https', 'mailto']


class _DeferredStyles(CSSSanitizer):
    """Keeps style attributes intact through bleach.

    bleach only sees the attribute value, not the element; the policy pass
    that follows does the filtering.
    """

    def sanitize_css(self, style):
        return style


def apply_style_policy(soup: BeautifulSoup, policy: "Policy") -> int:
    """Rewrite every ``style`` attribute in `soup` through `policy`.

    Attributes that sanitize to nothing are removed. Returns the number of
    style attributes removed.
    """
    removed = 0
    for tag in soup.find_all(style=True):
        sanitized = policy.sanitize(tag.name, tag['style'])
        if sanitized:
            tag['style'] = sanitized
        else:
            del tag['style']
            removed += 1
    return removed


def sanitize_html(
    html: str,
    style_policy: "Policy",
    tags: Optional[Iterable[str]] = None,
    attributes: Optional[Mapping[str, List[str]]] = None,
) -> str:
    """Sanitize an HTML fragment, filtering inline styles per element.

    Args:
        html: Untrusted HTML fragment
        style_policy: Policy deciding which declarations survive on which element
        tags: Allowed tags (defaults to ALLOWED_TAGS)
        attributes: Allowed attributes per tag (defaults to ALLOWED_ATTRIBUTES);
            include 'style' for any tag whose styles should be kept

    Returns:
        Sanitized HTML, or an empty string if sanitization failed
    """
    if not html:
        return ''

    try:
        cleaned = bleach.clean(
            html,
            tags=set(tags if tags is not None else ALLOWED_TAGS),
            attributes=dict(attributes if attributes is not None else ALLOWED_ATTRIBUTES),
            protocols=ALLOWED_PROTOCOLS,
            strip=True,
            strip_comments=True,
            css_sanitizer=_DeferredStyles(),
        )

        soup = BeautifulSoup(cleaned, 'html.parser')
        removed = apply_style_policy(soup, style_policy)
        result = str(soup)

        logger.info(
            f"[HTML SANITIZER] Sanitized {len(html)} -> {len(result)} chars, "
            f"removed {removed} style attributes"
        )
        return result

    except Exception as e:
        logger.error(f"[HTML SANITIZER] Error sanitizing HTML: {e}", exc_info=True)
        return ''
