"""Post models — validated front-matter and the published Post record.

Field names are snake_case in Python and camelCase on the wire
(``createdAt``, ``updatedAt``), matching the front-matter keys authors
write. ``slug`` and ``category`` never come from front-matter: they are
derived from where the file sits under the content root.
"""

from __future__ import annotations

from datetime import UTC, date, datetime
from typing import Any

from pydantic import BaseModel, Field, StrictBool, field_validator


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO date or datetime string into an aware datetime.

    Date-only values become midnight UTC; naive datetimes are taken as UTC.

    Examples:
        >>> parse_timestamp("2024-01-03").isoformat()
        '2024-01-03T00:00:00+00:00'
        >>> parse_timestamp("2024-01-03T10:30:00+09:00").hour
        10

    Raises:
        ValueError: *value* is not an ISO 8601 date or datetime.
    """
    parsed = datetime.fromisoformat(value.strip())
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def _normalize_timestamp(value: Any) -> Any:
    """Turn YAML date/datetime scalars into ISO strings and check strings parse."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, str):
        parse_timestamp(value)
        return value.strip()
    msg = f"expected a date string, got {type(value).__name__}"
    raise ValueError(msg)


class PostFrontmatter(BaseModel):
    """Front-matter fields an author writes at the top of a post file.

    Unknown keys are ignored, which includes any ``slug`` or ``category``
    key: those are path-derived.
    """

    model_config = {"frozen": True, "populate_by_name": True, "extra": "ignore"}

    title: str
    description: str = ""
    created_at: str = Field(alias="createdAt")
    updated_at: str | None = Field(default=None, alias="updatedAt")
    tags: list[str] = Field(default_factory=list)
    published: StrictBool

    @field_validator("created_at", "updated_at", mode="before")
    @classmethod
    def _check_timestamp(cls, value: Any) -> Any:
        return _normalize_timestamp(value)

    @field_validator("description", mode="before")
    @classmethod
    def _empty_description(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("tags", mode="before")
    @classmethod
    def _empty_tags(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return list(value)


class Post(BaseModel):
    """A post surfaced to presentation layers.

    Built fresh on every collection pass and never mutated.
    """

    model_config = {"frozen": True, "populate_by_name": True}

    title: str
    slug: str
    description: str = ""
    created_at: str = Field(alias="createdAt")
    updated_at: str | None = Field(default=None, alias="updatedAt")
    category: str
    tags: list[str] = Field(default_factory=list)
    published: bool

    @classmethod
    def from_frontmatter(cls, fm: PostFrontmatter, *, category: str, slug: str) -> Post:
        """Combine validated front-matter with path-derived identity."""
        return cls(
            title=fm.title,
            slug=slug,
            description=fm.description,
            created_at=fm.created_at,
            updated_at=fm.updated_at,
            category=category,
            tags=list(fm.tags),
            published=fm.published,
        )

    @property
    def created(self) -> datetime:
        """``createdAt`` as an aware datetime (the primary sort key)."""
        return parse_timestamp(self.created_at)

    @property
    def updated(self) -> datetime | None:
        if self.updated_at is None:
            return None
        return parse_timestamp(self.updated_at)

    @property
    def url_path(self) -> str:
        return f"/blog/{self.category}/{self.slug}/"

    def to_wire(self) -> dict[str, Any]:
        """Serialize with camelCase keys, as the JSON surfaces expose it."""
        return self.model_dump(by_alias=True)
