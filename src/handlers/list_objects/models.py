"""
Pydantic models for list objects request.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.utils.constants import (
    DEFAULT_LIMIT,
    DEFAULT_OFFSET,
    MAX_LIMIT,
    MIN_LIMIT,
    PATH_SEPARATOR,
)
from core.utils.validators import validate_object_path_value


class ListObjectsRequest(BaseModel):
    """
    Validation model for list objects API.

    Supports two filters:
    - Path prefix (prefix) → storage-level
    - Object name substring (name_contains) → in-memory
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    # Filter 1: Prefix (storage-level filtering)
    prefix: str = Field(
        default="",
        description="Path prefix, e.g. '<user-id>/'",
    )

    # Filter 2: Name-based (in-memory filtering)
    name_contains: str | None = Field(
        None,
        description="Substring match on object name",
    )

    # Pagination
    limit: int = Field(
        default=DEFAULT_LIMIT,
        ge=MIN_LIMIT,
        le=MAX_LIMIT,
        description="Results per page (1-100)",
    )
    offset: int = Field(
        default=DEFAULT_OFFSET,
        ge=0,
        description="Pagination offset",
    )

    # Sorting
    sort_by: Literal["name", "updated_at"] = Field(
        default="name",
        description="Sort field",
    )
    sort_order: Literal["asc", "desc"] = Field(
        default="asc",
        description="Sort order",
    )

    @field_validator("prefix")
    @classmethod
    def validate_prefix(cls, value: str) -> str:
        """A prefix is a path, optionally ending with a separator."""
        if not value:
            return value

        validate_object_path_value(value.removesuffix(PATH_SEPARATOR))
        return value
