"""Data models for mdwiki."""

from datetime import date, datetime, time
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PageMetadata(BaseModel):
    """Metadata extracted from page frontmatter.

    Values are coerced leniently, since frontmatter is written by hand: a
    scalar title becomes a string, a single tag becomes a one-item list and a
    date that does not parse is kept as the original string.
    """

    model_config = ConfigDict(extra="allow")

    title: str | None = None
    tags: list[str] = Field(default_factory=list)
    created: datetime | str | None = Field(default=None, union_mode="left_to_right")
    modified: datetime | str | None = Field(default=None, union_mode="left_to_right")

    @field_validator("title", mode="before")
    @classmethod
    def _title_to_str(cls, value: Any) -> Any:
        if value is None or isinstance(value, str):
            return value
        return str(value)

    @field_validator("tags", mode="before")
    @classmethod
    def _tags_to_list(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, (list, tuple)):
            return [str(tag) for tag in value if tag is not None]
        if isinstance(value, dict):
            return value
        return [str(value)]

    @field_validator("created", "modified", mode="before")
    @classmethod
    def _date_to_datetime(cls, value: Any) -> Any:
        if isinstance(value, datetime) or value is None or isinstance(value, str):
            return value
        if isinstance(value, date):
            return datetime.combine(value, time())
        return str(value)


class MetaState(str, Enum):
    """Outcome of splitting the frontmatter block off a page."""

    PRESENT = "present"
    ABSENT = "absent"
    MISSING = "missing"
    INVALID = "invalid"


class FrontmatterResult(BaseModel):
    """Tagged result of a frontmatter split.

    ``meta`` is only set for ``PRESENT``. ``error`` is set for ``INVALID``,
    and for ``PRESENT`` when some values did not fit ``PageMetadata`` and
    were kept unvalidated. ``body`` is empty whenever the split failed.
    """

    state: MetaState
    meta: PageMetadata | None = None
    body: str = ""
    error: str | None = None

    @property
    def ok(self) -> bool:
        """True when the text had a usable frontmatter block."""
        return self.state in (MetaState.PRESENT, MetaState.ABSENT)
