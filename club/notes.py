"""
State of one note view: fetch → normalize → convert → annotate.

Each navigation hands out a Ticket tagged with the reference and a
generation number. Completions carrying an older generation are dropped, so
a slow retrieval for a note the viewer already left never overwrites the
current one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .content import ContentError, ContentFetcher, DocumentReference
from .markdown.annotator import annotate
from .markdown.highlighting import HighlightRegistry
from .markdown.math_engine import MathEngine
from .markdown.renderer import render_markdown

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Ticket:
    reference: DocumentReference
    generation: int


class NotePage:
    """
    Holds what a note view shows: rendered ``html`` or an ``error`` message,
    never both. Both are ``None`` while a retrieval is outstanding.
    """

    def __init__(
        self,
        fetcher: ContentFetcher,
        registry: HighlightRegistry,
        math_engine: MathEngine | None = None,
    ):
        self.fetcher = fetcher
        self.registry = registry
        self.math_engine = math_engine
        self.generation = 0
        self.reference: DocumentReference | None = None
        self.html: str | None = None
        self.error: str | None = None
        self.error_status: int | None = None

    @property
    def status(self) -> str:
        if self.error is not None:
            return "error"
        if self.html is not None:
            return "ready"
        return "loading"

    def is_current(self, ticket: Ticket) -> bool:
        return ticket.generation == self.generation

    def navigate(self, reference: DocumentReference) -> Ticket:
        """Start a retrieval for ``reference``; earlier tickets go stale."""
        self.generation += 1
        self.reference = reference
        self.html = None
        self.error = None
        self.error_status = None
        return Ticket(reference, self.generation)

    def resolve(self, ticket: Ticket, raw_text: str) -> bool:
        """Render ``raw_text`` if ``ticket`` is still current."""
        if not self.is_current(ticket):
            logger.debug("Discarding stale result for '%s'", ticket.reference)
            return False

        self.html = render_markdown(raw_text)
        self.error = None
        self.error_status = None
        # Annotate only what was just stored
        self.html = annotate(self.html, self.registry, self.math_engine)
        return True

    def fail(self, ticket: Ticket, exc: ContentError) -> bool:
        if not self.is_current(ticket):
            logger.debug("Discarding stale failure for '%s'", ticket.reference)
            return False

        self.html = None
        self.error = str(exc)
        self.error_status = exc.status_code
        return True

    def load(self, reference: DocumentReference) -> NotePage:
        """Navigate to ``reference`` and run the whole pipeline synchronously."""
        ticket = self.navigate(reference)
        try:
            raw_text = self.fetcher.fetch(reference)
        except ContentError as exc:
            logger.debug("Loading note '%s' failed: %s", reference, exc)
            self.fail(ticket, exc)
        else:
            self.resolve(ticket, raw_text)
        return self
