"""
Retrieval of Markdown notes.

A note is addressed by a DocumentReference and always lives at
``/content/<name>.md``. Two backends read it:

- StorageContentFetcher reads the file from a Django storage rooted at
  CLUB_CONTENT_ROOT (the same files ``/content/<name>.md`` serves).
- HttpContentFetcher GETs ``<base_url>/content/<name>.md`` with requests.

Either way a failed retrieval raises NotFound or NetworkError and is never
retried.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

import requests
from django.conf import settings
from django.core.files.storage import FileSystemStorage

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Markdown file not found"


class ContentError(Exception):
    """Base class for retrieval failures shown to the viewer."""

    message = "Markdown file could not be loaded"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)

    @property
    def status_code(self) -> int:
        return 500


class NotFound(ContentError):
    message = NOT_FOUND_MESSAGE

    @property
    def status_code(self) -> int:
        return 404


class NetworkError(ContentError):
    message = "Network error while loading the Markdown file"

    @property
    def status_code(self) -> int:
        return 502


@dataclass(frozen=True)
class DocumentReference:
    """A note's file name, e.g. ``graph`` for ``/content/graph.md``."""

    name: str

    @property
    def filename(self) -> str:
        return f"{self.name}.md"

    @property
    def path(self) -> str:
        return f"/content/{self.filename}"

    def __str__(self) -> str:
        return self.name


class ContentFetcher(ABC):
    """Retrieves a note's raw Markdown, raising NotFound or NetworkError."""

    @abstractmethod
    def fetch(self, reference: DocumentReference) -> str:
        """Issue one retrieval for ``reference`` and return its text."""


class StorageContentFetcher(ContentFetcher):
    """Read notes straight from a Django storage backend."""

    def __init__(self, storage=None):
        if storage is None:
            storage = FileSystemStorage(location=settings.CLUB_CONTENT_ROOT)
        self.storage = storage

    def fetch(self, reference: DocumentReference) -> str:
        name = reference.filename
        try:
            if not self.storage.exists(name):
                logger.debug("Note '%s' not in storage", reference)
                raise NotFound()
            with self.storage.open(name, "rb") as fh:
                data = fh.read()
        except NotFound:
            raise
        except OSError as exc:
            logger.debug("Reading note '%s' failed: %s", reference, exc)
            raise NetworkError(str(exc)) from exc
        return data.decode("utf-8", errors="replace")


class HttpContentFetcher(ContentFetcher):
    """GET notes from static hosting."""

    def __init__(self, base_url: str, session: requests.Session | None = None, timeout=None):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def url_for(self, reference: DocumentReference) -> str:
        return f"{self.base_url}{reference.path}"

    def fetch(self, reference: DocumentReference) -> str:
        url = self.url_for(reference)
        try:
            resp = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.debug("GET %s failed: %s", url, exc)
            raise NetworkError(str(exc)) from exc

        if not resp.ok:
            logger.debug("GET %s returned %s", url, resp.status_code)
            raise NotFound()

        return resp.content.decode("utf-8", errors="replace")


def get_content_fetcher() -> ContentFetcher:
    """Build the fetcher selected by CLUB_CONTENT_BACKEND."""
    backend = getattr(settings, "CLUB_CONTENT_BACKEND", "storage")
    if backend == "http":
        return HttpContentFetcher(
            settings.CLUB_CONTENT_BASE_URL,
            timeout=getattr(settings, "CLUB_FETCH_TIMEOUT", None),
        )
    if backend == "storage":
        return StorageContentFetcher()
    raise ValueError(f"Unknown CLUB_CONTENT_BACKEND: {backend!r}")
