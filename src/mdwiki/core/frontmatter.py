"""YAML frontmatter splitting and encoding."""

import re
from datetime import datetime

import yaml
from pydantic import ValidationError

from mdwiki.core.models import FrontmatterResult, MetaState, PageMetadata


DELIMITER = "---\n"

# Opening line, optional YAML block, closing line. The block is matched
# lazily so the first closing delimiter wins, and an empty block
# ("---\n---\n") is tried before any content.
FRONTMATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(?:(.*?)\r?\n)??---[ \t]*(?:\r?\n|\Z)",
    re.DOTALL,
)


def split_frontmatter(raw: str) -> FrontmatterResult:
    """Split raw page text into metadata and markdown body.

    Returns a ``FrontmatterResult`` tagged with the outcome. When there is
    no block, or the block is not a YAML mapping, the body is left empty.
    """
    match = FRONTMATTER_PATTERN.match(raw)
    if not match:
        return FrontmatterResult(state=MetaState.MISSING)

    body = raw[match.end() :]
    try:
        data = yaml.safe_load(match.group(1) or "")
    except yaml.YAMLError as e:
        return FrontmatterResult(state=MetaState.INVALID, error=str(e))

    if data is None:
        return FrontmatterResult(state=MetaState.ABSENT, body=body)
    if not isinstance(data, dict):
        return FrontmatterResult(
            state=MetaState.INVALID,
            error=f"frontmatter is not a mapping: {type(data).__name__}",
        )

    try:
        meta = PageMetadata.model_validate(data)
    except (ValidationError, TypeError) as e:
        # Valid YAML that does not fit the schema still counts as metadata.
        fields = {str(key): value for key, value in data.items()}
        return FrontmatterResult(
            state=MetaState.PRESENT,
            meta=PageMetadata.model_construct(**fields),
            body=body,
            error=str(e),
        )

    return FrontmatterResult(state=MetaState.PRESENT, meta=meta, body=body)


def dump_frontmatter(meta: PageMetadata | None) -> str:
    """Encode metadata as a delimited YAML block.

    The delimiters are always written, so a page without metadata gets an
    empty block.
    """
    if meta is None:
        return DELIMITER + DELIMITER

    data = meta.model_dump(exclude_defaults=True, warnings=False)
    # Convert datetime to ISO format string
    for key in ("created", "modified"):
        if isinstance(data.get(key), datetime):
            data[key] = data[key].isoformat()
    encoded = yaml.safe_dump(
        data,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )
    return DELIMITER + encoded + DELIMITER
