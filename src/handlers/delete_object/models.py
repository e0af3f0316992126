from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator

from core.utils.validators import validate_object_path_value


class DeleteObjectRequest(BaseModel):
    """Validation model for delete object request."""

    model_config = ConfigDict(str_strip_whitespace=True)

    path: StrictStr = Field(
        ...,
        min_length=1,
        description="Path of the object to delete",
    )

    @field_validator("path")
    @classmethod
    def validate_path(cls, value: str) -> str:
        return validate_object_path_value(value)


class DeleteObjectResponse(BaseModel):
    """Response model for successful object deletion."""

    path: str = Field(..., description="Deleted object path")
    message: str = Field(..., description="Success message")
    deleted_at: str = Field(..., description="Deletion timestamp")
