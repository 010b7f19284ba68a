"""A single wiki page backed by a markdown file."""

import logging
import os

from pydantic import BaseModel

from mdwiki.config import settings
from mdwiki.core.exceptions import PageIOError
from mdwiki.core.frontmatter import dump_frontmatter, split_frontmatter
from mdwiki.core.models import MetaState, PageMetadata
from mdwiki.core.paths import path_to_url, url_to_path
from mdwiki.core.renderer import render_markdown

logger = logging.getLogger(__name__)


class Page(BaseModel):
    """A wiki page.

    ``meta`` and ``markdown_raw`` are the source of truth while the page is
    in memory. ``raw`` holds the text last read from or written to disk;
    ``save()`` builds it with ``serialize()`` and stores it after the write.
    ``html`` always follows ``markdown_raw`` through ``update_markdown()``.
    """

    base_path: str
    path: str
    url: str
    raw: str = ""
    meta: PageMetadata | None = None
    meta_state: MetaState = MetaState.MISSING
    meta_error: str | None = None
    markdown_raw: str = ""
    html: str = ""

    @classmethod
    def from_file(
        cls, base_path: str | os.PathLike, file_path: str | os.PathLike
    ) -> "Page":
        """Load a page from an existing file.

        The content is decoded with ``settings.encoding``. The path is
        always checked against UTF-8 instead: file names the filesystem
        could not decode arrive as lone surrogates, which cannot be stored
        in a page.

        Raises:
            OSError: If the file cannot be opened or read.
            PageIOError: If the path or the content is not valid text.
        """
        base_path = os.fspath(base_path)
        file_path = os.fspath(file_path)
        try:
            file_path.encode("utf-8")
        except UnicodeEncodeError as e:
            raise PageIOError(repr(file_path), "path is not valid UTF-8") from e
        page = cls(
            base_path=base_path,
            path=file_path,
            url=path_to_url(base_path, file_path),
        )
        page._read()
        page._interpret()
        return page

    @classmethod
    def for_url(cls, base_path: str | os.PathLike, url: str) -> "Page":
        """Create an empty page for a file that does not exist yet."""
        base_path = os.fspath(base_path)
        file_path = url_to_path(base_path, url)
        return cls(
            base_path=base_path,
            path=file_path,
            url=path_to_url(base_path, file_path),
        )

    @property
    def title(self) -> str:
        """Return title from metadata or derive it from the URL."""
        if self.meta is not None and self.meta.title:
            return str(self.meta.title)
        return self.url.rsplit("/", 1)[-1].replace("_", " ")

    def _read(self) -> None:
        try:
            with open(self.path, encoding=settings.encoding, newline="") as f:
                self.raw = f.read()
        except UnicodeDecodeError as e:
            raise PageIOError(self.path, f"not valid {settings.encoding} text") from e

    def _interpret(self) -> None:
        result = split_frontmatter(self.raw)
        self.meta_state = result.state
        self.meta_error = result.error
        if not result.ok:
            # Soft failure: the page stays without metadata, body and html.
            logger.debug(
                "No usable frontmatter in %s (%s): %s",
                self.path,
                result.state.value,
                result.error or "no delimiters",
            )
            return
        self.meta = result.meta
        self.update_markdown(result.body)

    def update_markdown(self, markdown: str) -> None:
        """Replace the markdown body and re-render the HTML."""
        self.markdown_raw = markdown
        self.html = render_markdown(markdown)

    def serialize(self) -> str:
        """Build the on-disk text of the page from ``meta`` and the body."""
        return dump_frontmatter(self.meta) + self.markdown_raw

    def save(self) -> None:
        """Write the page to its file and sync it to stable storage.

        ``raw`` only changes once the text is on stable storage.

        Raises:
            OSError: If the file cannot be created, written or flushed.
            PageIOError: If the content cannot be encoded.
        """
        raw = self.serialize()
        try:
            with open(self.path, "w", encoding=settings.encoding, newline="") as f:
                f.write(raw)
                f.flush()
                os.fsync(f.fileno())
        except UnicodeEncodeError as e:
            raise PageIOError(self.path, f"cannot encode as {settings.encoding}") from e
        self.raw = raw
        logger.debug("Saved %s", self.path)
