"""Mapping between page file paths and page URLs.

Both directions work on plain strings: no separator normalization and no
percent-encoding. A URL is the file path relative to the wiki root, minus
the ``.md`` suffix::

    path_to_url("/wiki", "/wiki/notes/todo.md") == "/notes/todo"
    url_to_path("/wiki", "/notes/todo") == "/wiki/notes/todo.md"
"""

import os

PAGE_SUFFIX = ".md"


def is_page_file(name: str | os.PathLike) -> bool:
    """Check whether a file name carries the page suffix."""
    return os.fspath(name).endswith(PAGE_SUFFIX)


def path_to_url(base_path: str | os.PathLike, file_path: str | os.PathLike) -> str:
    """Convert a page file path to its URL.

    If ``file_path`` does not start with ``base_path`` it is passed through
    unchanged apart from the suffix.
    """
    url = os.fspath(file_path).removeprefix(os.fspath(base_path))
    return url.removesuffix(PAGE_SUFFIX)


def url_to_path(base_path: str | os.PathLike, url: str) -> str:
    """Convert a page URL to the path of its backing file."""
    return os.fspath(base_path) + url + PAGE_SUFFIX
