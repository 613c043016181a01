# club/markdown/postprocessors/sanitizer.py

import logging
from functools import lru_cache

import bleach
from bleach.css_sanitizer import ALLOWED_CSS_PROPERTIES, CSSSanitizer

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _get_bleach_config():
    """Cache bleach configuration for better performance."""
    allowed_tags = set(bleach.sanitizer.ALLOWED_TAGS).union(
        {
            # text
            "p",
            "br",
            "wbr",
            "div",
            "span",
            "section",
            "article",
            "aside",
            "header",
            "footer",
            "center",
            "font",
            "mark",
            "ins",
            "del",
            "s",
            "strike",
            "u",
            "small",
            "big",
            "tt",
            "q",
            "cite",
            "dfn",
            "time",
            "sup",
            "sub",
            # headings
            "h1",
            "h2",
            "h3",
            "h4",
            "h5",
            "h6",
            # lists
            "ul",
            "ol",
            "li",
            "hr",
            "blockquote",
            "dl",
            "dt",
            "dd",
            # code
            "pre",
            "code",
            "kbd",
            "samp",
            "var",
            # tables
            "table",
            "thead",
            "tbody",
            "tfoot",
            "tr",
            "th",
            "td",
            "caption",
            "colgroup",
            "col",
            # media
            "img",
            "figure",
            "figcaption",
            # collapsible sections
            "details",
            "summary",
            # task lists
            "input",
            "label",
        }
    )

    allowed_attrs = {
        "*": ["class", "id", "title", "style", "align", "lang", "dir"],
        "a": ["href", "title", "rel", "target"],
        "img": ["src", "alt", "title", "width", "height", "loading"],
        "font": ["color", "face", "size"],
        "th": ["colspan", "rowspan", "scope"],
        "td": ["colspan", "rowspan"],
        "col": ["span"],
        "ol": ["start", "type", "reversed"],
        "q": ["cite"],
        "blockquote": ["cite"],
        "time": ["datetime"],
        "input": ["type", "checked", "disabled"],
        "details": ["open"],
        "code": ["data-highlighted"],
    }

    allowed_protocols = ["http", "https", "mailto"]

    css_sanitizer = CSSSanitizer(
        allowed_css_properties=ALLOWED_CSS_PROPERTIES
        | {"margin", "padding", "max-width", "display", "text-decoration", "font-family"}
    )

    return allowed_tags, allowed_attrs, allowed_protocols, css_sanitizer


def sanitize_html(html, context):
    """
    Sanitize HTML output using bleach.
    This is the FIRST post-processor: styles and classes added later survive.
    Raw markup in a note passes through as long as it is on the allow-list;
    inline ``style`` keeps only safe CSS properties. Anything else (script,
    iframe, form controls) is escaped and shows up as literal text.
    """
    allowed_tags, allowed_attrs, allowed_protocols, css_sanitizer = _get_bleach_config()

    try:
        return bleach.clean(
            html,
            tags=allowed_tags,
            attributes=allowed_attrs,
            protocols=allowed_protocols,
            css_sanitizer=css_sanitizer,
            strip=False,
        )
    except Exception as e:
        logger.error(f"Bleach sanitization failed: {e}", exc_info=True)
        raise
