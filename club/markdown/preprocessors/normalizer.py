"""
Preprocessor that canonicalizes line endings and trailing whitespace.

    "a\r\nb  \n"  →  "a\nb\n"

Running it twice gives the same result as running it once.
"""

import re

_LINE_ENDINGS = re.compile(r"\r\n?")
_TRAILING_WHITESPACE = re.compile(r"[ \t]+$", re.MULTILINE)


def normalize_text(text: str) -> str:
    """Turn every CRLF or lone CR into LF and strip spaces/tabs at line ends."""
    text = _LINE_ENDINGS.sub("\n", text)
    return _TRAILING_WHITESPACE.sub("", text)


def normalize_text_default(text: str, context: dict) -> str:
    """
    Default configuration for normalize_text.

    Register this in PREPROCESSORS.
    """
    return normalize_text(text)
