"""
Optional server-side math typesetting.

``get_math_engine`` returns ``None`` when no engine is configured or
installed; callers check for that instead of assuming one exists.
"""

from __future__ import annotations

import importlib
import importlib.util
import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class MathEngine(Protocol):
    name: str

    def typeset(self, tex: str, display: bool = False) -> str:
        """Return markup for ``tex``; raise if the expression is rejected."""


class MathMLEngine:
    """LaTeX → MathML with latex2mathml."""

    name = "mathml"

    def __init__(self):
        self._converter = importlib.import_module("latex2mathml.converter")

    def typeset(self, tex: str, display: bool = False) -> str:
        return self._converter.convert(tex, display="block" if display else "inline")


def get_math_engine(name: str | None = "auto") -> MathEngine | None:
    """
    Resolve the configured engine.

    - ``"none"``/``None``: no engine
    - ``"mathml"``: latex2mathml, warning if it is not installed
    - ``"auto"``: latex2mathml when installed
    """
    if not name or name == "none":
        return None

    if name not in ("auto", "mathml"):
        raise ValueError(f"Unknown CLUB_MATH_ENGINE: {name!r}")

    if importlib.util.find_spec("latex2mathml") is None:
        if name == "mathml":
            logger.warning("latex2mathml not installed - math left for the browser")
        else:
            logger.debug("latex2mathml not installed, no server-side math engine")
        return None

    return MathMLEngine()
