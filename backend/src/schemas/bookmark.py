"""Pydantic schemas and input helpers for bookmark endpoints."""
import re
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Maximum bookmark text length in characters
MAX_TEXT_LENGTH = 5000

DEFAULT_LIMIT = 50
MAX_LIMIT = 100

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_BOOKMARK_ID_PATTERN = re.compile(r"[0-9]+")


def validate_text(text: str) -> str:
    """Validate that bookmark text is non-empty and within MAX_TEXT_LENGTH."""
    if not text:
        raise ValueError("Invalid `text` field: must be a non-empty string")
    if len(text) > MAX_TEXT_LENGTH:
        raise ValueError(
            f"Invalid `text` field: exceeds maximum length of {MAX_TEXT_LENGTH:,} characters "
            f"(got {len(text):,} characters)",
        )
    return text


def _parse_int(value: str | int | None) -> int | None:
    """Parse an integer from a query value. Returns None for anything malformed."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    stripped = value.strip()
    if not _INTEGER_PATTERN.fullmatch(stripped):
        return None
    return int(stripped)


def normalize_limit(value: str | int | None) -> int:
    """
    Normalize a page size.

    Absent or non-positive/malformed values fall back to DEFAULT_LIMIT. Values
    above MAX_LIMIT are capped, never rejected.
    """
    limit = _parse_int(value)
    if limit is None or limit < 1:
        return DEFAULT_LIMIT
    return min(limit, MAX_LIMIT)


def normalize_offset(value: str | int | None) -> int:
    """Normalize a page offset. Absent, negative or malformed values fall back to 0."""
    offset = _parse_int(value)
    if offset is None or offset < 0:
        return 0
    return offset


def parse_bookmark_id(value: str) -> int:
    """
    Parse a bookmark id from a path segment.

    Only ASCII decimal digits are accepted.

    Raises:
        ValueError: If the value contains anything other than digits.
    """
    if not _BOOKMARK_ID_PATTERN.fullmatch(value):
        raise ValueError(f"Invalid bookmark id: '{value}'")
    return int(value)


class BookmarkCreate(BaseModel):
    """Schema for creating a new bookmark."""

    model_config = ConfigDict(strict=True)

    text: str

    @field_validator("text")
    @classmethod
    def check_text(cls, v: str) -> str:
        """Validate text presence and length."""
        return validate_text(v)


class BookmarkCreatedResponse(BaseModel):
    """Schema returned by POST /bookmarks (only the server-generated fields)."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    created_at: datetime = Field(alias="createdAt")


class BookmarkResponse(BaseModel):
    """
    Schema for bookmark responses in lists and GET /bookmarks/:id.

    user_agent and ip_address are stored but never exposed.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int
    text: str
    created_at: datetime
    device_hash: str


class PaginationInfo(BaseModel):
    """Pagination metadata for list responses."""

    model_config = ConfigDict(populate_by_name=True)

    total: int  # Total count of bookmarks matching the query (before pagination)
    limit: int  # Effective (normalized) page size
    offset: int  # Effective (normalized) offset
    has_more: bool = Field(alias="hasMore")


class BookmarkListResponse(BaseModel):
    """Schema for paginated bookmark list responses."""

    bookmarks: list[BookmarkResponse]
    pagination: PaginationInfo


class BookmarkDeleteResponse(BaseModel):
    """Schema returned by DELETE /bookmarks/:id."""

    success: bool = True
    id: int
