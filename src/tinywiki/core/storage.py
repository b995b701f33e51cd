"""Storage abstraction for wiki pages."""

import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path

from tinywiki.core.models import Page
from tinywiki.core.parser import render_links

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Base class for page storage failures."""


class PageNotFoundError(StorageError):
    """Page file is missing or could not be read."""


class PageWriteError(StorageError):
    """Page file could not be written."""


class Storage(ABC):
    """Abstract base class for page storage."""

    @abstractmethod
    async def load_page(self, title: str) -> Page:
        """Load a page by title. Raises PageNotFoundError if unavailable."""
        ...

    @abstractmethod
    async def save_page(self, title: str, body: str) -> Page:
        """Save a page body. Creates the page if it doesn't exist."""
        ...


class FileStorage(Storage):
    """File-based storage implementation.

    Each page is one file, ``<title>.txt``, holding exactly the page body.
    There is no locking: concurrent saves to one title leave whichever
    write landed last.
    """

    FILE_MODE = 0o600

    def __init__(self, base_path: Path, escape_html: bool = True):
        self.base_path = base_path
        self.escape_html = escape_html
        self.base_path.mkdir(parents=True, exist_ok=True)

    def _title_to_filename(self, title: str) -> str:
        """Convert page title to filename."""
        return title + ".txt"

    def _get_path(self, title: str) -> Path:
        """Get full path for a page."""
        return self.base_path / self._title_to_filename(title)

    async def load_page(self, title: str) -> Page:
        """Load a page and render its links."""
        path = self._get_path(title)
        try:
            body = path.read_bytes().decode("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise PageNotFoundError(f"cannot read page {title!r}: {e}") from e

        logger.debug("Loaded page %s (%d bytes)", title, len(body))
        return Page(
            title=title,
            body=body,
            rendered=render_links(body, escape_html=self.escape_html),
            exists=True,
        )

    async def save_page(self, title: str, body: str) -> Page:
        """Write a page body verbatim, owner read/write only."""
        path = self._get_path(title)
        data = body.encode("utf-8")
        try:
            fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, self.FILE_MODE)
            with os.fdopen(fd, "wb") as f:
                f.write(data)
        except OSError as e:
            logger.warning("Failed to save page %s: %s", title, e)
            raise PageWriteError(str(e)) from e

        logger.debug("Saved page %s (%d bytes)", title, len(data))
        return Page(title=title, body=body, exists=True)
