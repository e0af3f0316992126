"""Stored object models and object path parsing.

Object paths follow the convention ``<owner-id>/<rest-of-path>``: the first
folder segment marks the owner of the object and is what the owner-scoped
access rules compare against the requester identifier.
"""

import unicodedata

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr

from core.models.errors import ValidationError
from core.utils.constants import (
    ERROR_CODE_INVALID_OBJECT_PATH,
    MAX_PATH_LENGTH,
    PATH_SEPARATOR,
    RESERVED_PATH_SEGMENTS,
)


class ObjectPath(BaseModel):
    """Parsed, validated object path within a bucket."""

    model_config = ConfigDict(frozen=True)

    value: StrictStr

    @property
    def segments(self) -> tuple[str, ...]:
        return tuple(self.value.split(PATH_SEPARATOR))

    @property
    def folders(self) -> tuple[str, ...]:
        """All segments except the final file name."""
        return self.segments[:-1]

    @property
    def owner_id(self) -> str | None:
        """First folder segment, or None for a path without folders."""
        folders = self.folders
        return folders[0] if folders else None

    @property
    def name(self) -> str:
        return self.segments[-1]

    @property
    def extension(self) -> str:
        _, dot, suffix = self.name.rpartition(".")
        return suffix.lower() if dot else ""

    def __str__(self) -> str:
        return self.value


def _invalid_path(raw: str, reason: str) -> ValidationError:
    return ValidationError(
        message=f"Invalid object path: {reason}",
        error_code=ERROR_CODE_INVALID_OBJECT_PATH,
        details={"path": raw},
    )


def parse_object_path(raw: str | None) -> ObjectPath:
    """Validate a raw object path and return its parsed form.

    Raises:
        ValidationError: If the path is empty, too long, absolute, contains
            empty or reserved segments, or contains control characters
    """
    if raw is None or not raw.strip():
        raise _invalid_path(raw or "", "path must not be empty")

    if len(raw) > MAX_PATH_LENGTH:
        raise _invalid_path(raw, f"path must not exceed {MAX_PATH_LENGTH} characters")

    if raw.startswith(PATH_SEPARATOR):
        raise _invalid_path(raw, "path must be relative to the bucket root")

    if any(unicodedata.category(ch) == "Cc" for ch in raw):
        raise _invalid_path(raw, "path contains control characters")

    segments = raw.split(PATH_SEPARATOR)

    if any(not segment for segment in segments):
        raise _invalid_path(raw, "path contains empty segments")

    if any(segment in RESERVED_PATH_SEGMENTS for segment in segments):
        raise _invalid_path(raw, "path contains relative segments")

    return ObjectPath(value=raw)


class ObjectInfo(BaseModel):
    """Attributes of a stored object."""

    path: StrictStr = Field(..., description="Object path within the bucket")
    owner_id: StrictStr | None = Field(None, description="First folder segment of the path")
    mime_type: StrictStr = Field(..., description="MIME type of the object (e.g. image/png)")
    size: StrictInt = Field(..., description="Object size in bytes")
    etag: StrictStr | None = Field(None, description="Entity tag reported by storage")
    updated_at: StrictStr | None = Field(None, description="ISO-8601 last modification timestamp (UTC)")
    metadata: dict[str, str] = Field(default_factory=dict, description="User metadata stored with the object")


class ObjectSummary(BaseModel):
    """Listing entry for a stored object."""

    path: StrictStr
    name: StrictStr
    size: StrictInt
    etag: StrictStr | None = None
    updated_at: StrictStr | None = None


class PaginationInfo(BaseModel):
    """Pagination metadata for list responses."""

    limit: StrictInt = Field(..., description="Maximum number of items requested")
    offset: StrictInt = Field(..., description="Current offset in the result set")
    has_more: StrictBool = Field(..., description="Whether more items are available after this page")
    next_offset: StrictInt | None = Field(
        None,
        description="Offset to use for the next page, if available",
    )


class ListObjectsResponse(BaseModel):
    """Paginated response for listing objects."""

    objects: list[ObjectSummary] = Field(..., description="Objects on this page")
    total_count: StrictInt = Field(..., description="Total number of objects matching the query")
    returned_count: StrictInt = Field(..., description="Number of objects returned in this response")
    pagination: PaginationInfo = Field(..., description="Pagination metadata")
