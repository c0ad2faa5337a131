"""Document, author and search request value objects"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator


def as_utc(value: datetime | None) -> datetime | None:
    """Treat naive datetimes as UTC so every stored timestamp is comparable."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class Author(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str


class Document(BaseModel):
    """A stored record; id and created stay None until the first save."""
    model_config = ConfigDict(validate_assignment=True)

    id: str | None = None
    title: str
    content: str
    author: Author
    created: datetime | None = None

    @field_validator("created")
    @classmethod
    def created_as_utc(cls, value: datetime | None) -> datetime | None:
        return as_utc(value)


class SearchRequest(BaseModel):
    """All-optional filter; None imposes no constraint, an empty list matches nothing."""
    model_config = ConfigDict(validate_assignment=True)

    title_prefixes:   list[str] | None = Field(default=None, description="Title starts with any of these")
    contains_contents: list[str] | None = Field(default=None, description="Content contains any of these")
    author_ids:        list[str] | None = Field(default=None, description="Author id is one of these")
    created_from:      datetime | None  = Field(default=None, description="Inclusive lower bound on created")
    created_to:        datetime | None  = Field(default=None, description="Inclusive upper bound on created")

    @field_validator("created_from", "created_to")
    @classmethod
    def bounds_as_utc(cls, value: datetime | None) -> datetime | None:
        return as_utc(value)
