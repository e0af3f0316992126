"""Storage bucket declaration."""

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr

from core.models.errors import FileSizeError, MIMETypeError, ValidationError
from core.utils.constants import (
    ALLOWED_MIME_TYPES,
    MAX_FILE_SIZE,
    SALVAGE_PARTS_BUCKET_ID,
    SALVAGE_PARTS_BUCKET_PUBLIC,
    format_file_size,
)


class BucketConfig(BaseModel):
    """Declared properties of a storage bucket.

    The size limit and MIME allow-list apply to every stored object,
    independent of who uploads it.
    """

    model_config = ConfigDict(frozen=True)

    id: StrictStr = Field(..., min_length=3, max_length=63, description="Bucket identifier")
    name: StrictStr = Field(..., description="Display name")
    public: StrictBool = Field(False, description="Whether objects are publicly readable")
    file_size_limit: StrictInt = Field(..., gt=0, description="Maximum object size in bytes")
    allowed_mime_types: frozenset[str] = Field(..., description="Accepted content types")

    def check_object(self, *, mime_type: str | None, size: int) -> None:
        """Reject objects violating the bucket's content type or size limits.

        Raises:
            ValidationError: If the object is empty
            MIMETypeError: If the content type is not accepted
            FileSizeError: If the object exceeds the size limit
        """
        if size <= 0:
            raise ValidationError(
                message="File must not be empty",
                details={"size": size},
            )

        if mime_type not in self.allowed_mime_types:
            raise MIMETypeError(
                message="Unsupported image type",
                details={
                    "mime_type": mime_type,
                    "allowed_mime_types": sorted(self.allowed_mime_types),
                },
            )

        if size > self.file_size_limit:
            raise FileSizeError(
                message=(
                    f"File size {format_file_size(size)} exceeds limit of "
                    f"{format_file_size(self.file_size_limit)}"
                ),
                details={"size": size, "file_size_limit": self.file_size_limit},
            )


SALVAGE_PARTS_BUCKET = BucketConfig(
    id=SALVAGE_PARTS_BUCKET_ID,
    name=SALVAGE_PARTS_BUCKET_ID,
    public=SALVAGE_PARTS_BUCKET_PUBLIC,
    file_size_limit=MAX_FILE_SIZE,
    allowed_mime_types=ALLOWED_MIME_TYPES,
)
