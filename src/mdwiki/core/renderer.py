"""Markdown to HTML rendering."""

from markdown import Markdown
from markdown.extensions import Extension
from markdown.inlinepatterns import SimpleTagInlineProcessor

from mdwiki.config import settings


# Pattern for strikethrough: ~~text~~
# Group 2 must contain the text (SimpleTagInlineProcessor expectation)
STRIKETHROUGH_PATTERN = r"(~~)(.*?)~~"


class StrikethroughExtension(Extension):
    """Markdown extension for ~~strikethrough~~ text.

    Neither Python-Markdown's ``extra`` nor the configured pymdownx
    extensions render ``~~``, so every page parser gets this one added.
    """

    def extendMarkdown(self, md: Markdown) -> None:
        """Add strikethrough pattern to markdown parser."""
        md.inlinePatterns.register(
            SimpleTagInlineProcessor(STRIKETHROUGH_PATTERN, "del"),
            "strikethrough",
            50,
        )


def create_parser(extensions: list[str] | None = None) -> Markdown:
    """Create a configured Markdown parser.

    Args:
        extensions: Names of Python-Markdown extensions to load.
                    Defaults to ``settings.markdown_extensions``.

    Returns:
        Markdown parser instance with strikethrough support added.
    """
    if extensions is None:
        extensions = settings.markdown_extensions
    return Markdown(extensions=[*extensions, StrikethroughExtension()])


def render_markdown(content: str, extensions: list[str] | None = None) -> str:
    """Render a markdown body to HTML.

    A fresh parser is used for every call, so the output depends only on
    ``content`` and the extension list.
    """
    parser = create_parser(extensions)
    return parser.convert(content)
