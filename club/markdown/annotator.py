# club/markdown/annotator.py
"""
Post-render pass over converted note HTML.

Runs after the converter output for an update has been stored:

1. Every ``pre > code`` block is tokenized with Pygments. The language is
   read from a ``language-xxx`` or bare ``xxx`` class on the ``code`` or the
   enclosing ``pre`` (Pandoc puts it on ``pre``). Tags missing from the
   registry render as plain text.
2. If a math engine is available, ``span.math`` nodes are typeset. Without
   one the ``\\(...\\)``/``\\[...\\]`` source stays in place for MathJax.
"""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup

from .highlighting import HighlightRegistry
from .math_engine import MathEngine

logger = logging.getLogger(__name__)

_IGNORED_CLASSES = {"sourceCode", "highlight", "hljs", "numberLines"}
_LANGUAGE_PREFIXES = ("language-", "lang-")

_MATH_DELIMITERS = (("\\(", "\\)"), ("\\[", "\\]"), ("$$", "$$"), ("$", "$"))


def _language_tag(code) -> str | None:
    candidates = list(code.get("class", []))
    if code.parent is not None and code.parent.name == "pre":
        candidates += code.parent.get("class", [])

    for cls in candidates:
        if cls in _IGNORED_CLASSES:
            continue
        for prefix in _LANGUAGE_PREFIXES:
            if cls.startswith(prefix):
                return cls[len(prefix):]
        return cls
    return None


def highlight_code_blocks(soup: BeautifulSoup, registry: HighlightRegistry) -> int:
    count = 0
    for code in soup.select("pre > code"):
        if code.get("data-highlighted") == "yes":
            continue

        tag = _language_tag(code)
        language = registry.language_for(tag)
        if tag and tag not in registry:
            logger.debug("No grammar registered for '%s', rendering as plain text", tag)

        markup = registry.highlight(code.get_text(), tag)

        # Parsed inside <pre> so whitespace-only indentation survives
        fragment = BeautifulSoup(f"<pre>{markup}</pre>", "html.parser").pre
        code.clear()
        code.extend(list(fragment.contents))

        classes = [c for c in code.get("class", []) if not c.startswith(_LANGUAGE_PREFIXES)]
        classes += ["highlight", f"language-{language}"]
        code["class"] = classes
        code["data-highlighted"] = "yes"
        count += 1
    return count


def _strip_delimiters(text: str) -> str:
    text = text.strip()
    for opening, closing in _MATH_DELIMITERS:
        if text.startswith(opening) and text.endswith(closing) and len(text) >= len(opening) + len(closing):
            return text[len(opening):-len(closing)].strip()
    return text


def typeset_math(soup: BeautifulSoup, engine: MathEngine) -> int:
    count = 0
    for span in soup.find_all("span", class_="math"):
        classes = span.get("class", [])
        if "typeset" in classes:
            continue

        tex = _strip_delimiters(span.get_text())
        if not tex:
            continue

        try:
            markup = engine.typeset(tex, display="display" in classes)
        except Exception as exc:
            # Rejected expressions keep their TeX source
            logger.debug("Math engine %s rejected %r: %s", engine.name, tex, exc)
            continue

        span.clear()
        span.append(BeautifulSoup(markup, "html.parser"))
        span["class"] = classes + ["typeset"]
        count += 1
    return count


def annotate(html: str, registry: HighlightRegistry, math_engine: MathEngine | None = None) -> str:
    """Highlight code blocks, then typeset math if an engine is present."""
    soup = BeautifulSoup(html, "html.parser")

    highlighted = highlight_code_blocks(soup, registry)

    typeset = 0
    if math_engine is not None:
        typeset = typeset_math(soup, math_engine)

    logger.debug("Annotated note: %d code blocks, %d math nodes", highlighted, typeset)
    return str(soup)
