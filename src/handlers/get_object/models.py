from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictStr,
    field_validator,
)

from core.utils.validators import validate_object_path_value


class GetObjectRequest(BaseModel):
    """Validation model for get object request."""

    model_config = ConfigDict(str_strip_whitespace=True)

    path: StrictStr = Field(
        ...,
        min_length=1,
        description="Object path to retrieve",
    )

    metadata: StrictBool = Field(
        default=False,
        description="Include object attributes in the response",
    )

    download: StrictBool = Field(
        default=False,
        description=(
            "If true, forces object download "
            "(Content-Disposition: attachment). "
            "If false, displays the image inline."
        ),
    )

    @field_validator("path")
    @classmethod
    def validate_path(cls, value: str) -> str:
        return validate_object_path_value(value)


class ObjectAttributes(BaseModel):
    """Object attributes included on request."""

    path: str
    owner_id: str | None = None
    mime_type: str
    size: int
    etag: str | None = None
    updated_at: str | None = None
