"""
Closed set of languages the annotator tokenizes.

The registry is built once when the app starts and handed to the annotator;
nothing looks it up globally. A tag it does not know is rendered as plain
text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexer import Lexer
from pygments.lexers import TextLexer, get_lexer_by_name

DEFAULT_LANGUAGES = {
    "cpp": "cpp",
    "c++": "cpp",
    "c": "cpp",
    "python": "python",
    "py": "python",
    "javascript": "javascript",
    "js": "javascript",
}

PLAIN_LANGUAGE = "plaintext"

_LEXER_OPTIONS = {"stripnl": False, "ensurenl": False}


@dataclass(frozen=True)
class HighlightRegistry:
    """Immutable mapping of code-fence tags to Pygments lexer names."""

    languages: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        normalized = {tag.lower(): name for tag, name in self.languages.items()}
        # Fail at startup, not on the first page view
        for name in set(normalized.values()):
            get_lexer_by_name(name)
        object.__setattr__(self, "languages", MappingProxyType(normalized))

    @classmethod
    def from_settings(cls, languages=None):
        return cls(languages if languages is not None else DEFAULT_LANGUAGES)

    def __contains__(self, tag) -> bool:
        return bool(tag) and tag.lower() in self.languages

    def language_for(self, tag: str | None) -> str:
        """Canonical name for ``tag``, or ``plaintext`` if unregistered."""
        if tag in self:
            return self.languages[tag.lower()]
        return PLAIN_LANGUAGE

    def lexer_for(self, tag: str | None) -> Lexer:
        if tag in self:
            return get_lexer_by_name(self.languages[tag.lower()], **_LEXER_OPTIONS)
        return TextLexer(**_LEXER_OPTIONS)

    def highlight(self, code: str, tag: str | None) -> str:
        """Return Pygments token markup for ``code`` (no wrapping element)."""
        markup = highlight(code, self.lexer_for(tag), HtmlFormatter(nowrap=True))
        # The formatter always terminates the last line
        if markup.endswith("\n") and not code.endswith("\n"):
            markup = markup[:-1]
        return markup
