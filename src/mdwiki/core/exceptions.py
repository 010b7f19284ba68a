"""Exceptions raised by mdwiki."""


class WikiError(Exception):
    """Base class for wiki errors."""


class PageIOError(WikiError, OSError):
    """A page file could not be read or written as text."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")
