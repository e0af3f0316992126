"""Pydantic models for object upload request/response."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.utils.constants import MAX_PATH_LENGTH
from core.utils.validators import validate_base64_file, validate_object_path_value


class ObjectUploadRequest(BaseModel):
    """Validation model for object upload request."""

    model_config = ConfigDict(str_strip_whitespace=True)

    file: str = Field(..., description="Base64 encoded image file")
    path: str = Field(
        ...,
        min_length=1,
        max_length=MAX_PATH_LENGTH,
        description="Object path, '<user-id>/<rest-of-path>'",
    )
    content_type: str | None = Field(
        None,
        description="Declared MIME type; must match the file content when given",
    )

    @field_validator("file")
    @classmethod
    def validate_file(cls, value: str) -> str:
        return validate_base64_file(value)

    @field_validator("path")
    @classmethod
    def validate_path(cls, value: str) -> str:
        return validate_object_path_value(value)


class ObjectUploadResponse(BaseModel):
    """Response model for successful object upload."""

    path: str = Field(..., description="Object path within the bucket")
    bucket: str = Field(..., description="Bucket identifier")
    owner_id: str | None = Field(None, description="Owning user identifier")
    mime_type: str = Field(..., description="Detected MIME type")
    size: int = Field(..., description="Object size in bytes")
    public_url: str | None = Field(None, description="Public URL for publicly readable buckets")
    uploaded_at: str = Field(..., description="Upload timestamp")
    message: str = Field(..., description="Success message")
