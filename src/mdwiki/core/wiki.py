"""Wiki: the collection of pages under one root directory."""

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from mdwiki.config import settings
from mdwiki.core.exceptions import WikiError
from mdwiki.core.models import PageMetadata
from mdwiki.core.page import Page
from mdwiki.core.paths import is_page_file

logger = logging.getLogger(__name__)


class Wiki:
    """All pages found below a root directory.

    Pages are loaded eagerly on construction. A page that fails to load is
    logged and left out; opening a wiki never fails as a whole.
    Traversal is sorted by name, so the page order is reproducible.
    """

    def __init__(self, path: str | os.PathLike | None = None):
        if path is None:
            path = settings.data_dir
        self.path = os.fspath(path)
        self.pages: list[Page] = []
        self.reload()

    def __len__(self) -> int:
        return len(self.pages)

    def __iter__(self) -> Iterator[Page]:
        return iter(self.pages)

    def __contains__(self, url: object) -> bool:
        return isinstance(url, str) and self.get(url) is not None

    def reload(self) -> None:
        """Discard all pages and load them again from disk."""
        self.pages = []
        failed = 0
        for file_path in self._walk():
            try:
                page = Page.from_file(self.path, file_path)
            except OSError as e:
                logger.warning("Failed loading %s: %s", file_path, e)
                failed += 1
                continue
            self.pages.append(page)
        self._warn_duplicates()
        logger.info(
            "Loaded %d pages from %s (%d failed)",
            len(self.pages),
            self.path,
            failed,
        )

    def get(self, url: str) -> Page | None:
        """Get a page by URL. Returns None if not found.

        Scans ``pages`` in order, so the first page with a duplicate URL
        wins and edits to the list are seen immediately.
        """
        for page in self.pages:
            if page.url == url:
                return page
        return None

    def create_page(
        self,
        url: str,
        markdown: str = "",
        meta: PageMetadata | None = None,
    ) -> Page:
        """Create a page, write it to disk and add it to the wiki.

        Raises:
            WikiError: If a page with this URL already exists.
            OSError: If the file cannot be written.
        """
        if url in self:
            raise WikiError(f"Page already exists: {url}")

        page = Page.for_url(self.path, url)
        page.meta = meta
        page.update_markdown(markdown)
        Path(page.path).parent.mkdir(parents=True, exist_ok=True)
        page.save()

        self.pages.append(page)
        return page

    def _walk(self) -> Iterator[str]:
        """Yield paths of page files below the root, sorted per directory."""
        for dirpath, dirnames, filenames in os.walk(self.path, onerror=self._walk_error):
            dirnames.sort()
            for filename in sorted(filenames):
                if not is_page_file(filename):
                    continue
                file_path = os.path.join(dirpath, filename)
                if os.path.isfile(file_path):
                    yield file_path

    @staticmethod
    def _walk_error(error: OSError) -> None:
        logger.warning("Failed walking %s: %s", error.filename, error)

    def _warn_duplicates(self) -> None:
        seen: dict[str, Page] = {}
        for page in self.pages:
            shadowing = seen.get(page.url)
            if shadowing is not None:
                logger.warning(
                    "Duplicate URL %s: %s is shadowed by %s",
                    page.url,
                    page.path,
                    shadowing.path,
                )
                continue
            seen[page.url] = page
