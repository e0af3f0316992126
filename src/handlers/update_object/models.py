"""Pydantic models for object update request/response."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.utils.validators import validate_base64_file, validate_object_path_value


class ObjectUpdateRequest(BaseModel):
    """Validation model for replacing an existing object's content."""

    model_config = ConfigDict(str_strip_whitespace=True)

    path: str = Field(..., min_length=1, description="Path of the object to replace")
    file: str = Field(..., description="Base64 encoded replacement image")
    content_type: str | None = Field(None, description="Declared MIME type")

    @field_validator("path")
    @classmethod
    def validate_path(cls, value: str) -> str:
        return validate_object_path_value(value)

    @field_validator("file")
    @classmethod
    def validate_file(cls, value: str) -> str:
        return validate_base64_file(value)


class ObjectUpdateResponse(BaseModel):
    """Response model for successful object update."""

    path: str
    owner_id: str | None = None
    mime_type: str
    size: int
    updated_at: str
    message: str
