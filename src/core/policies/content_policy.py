"""Content checks applied to every object written to the bucket."""

import base64
import binascii

from aws_lambda_powertools import Logger

from core.models.bucket import BucketConfig
from core.models.errors import MIMETypeError, ValidationError
from core.utils.mime import detect_mime_type

logger = Logger(UTC=True)


def decode_file(encoded: str) -> bytes:
    """Decode base64-encoded file data.

    Raises:
        ValidationError: If decoding fails
    """
    try:
        return base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as exc:
        logger.warning("Failed to decode base64 file data")
        raise ValidationError(
            message="Invalid file data",
            details={"encoding": "base64"},
        ) from exc


def inspect_content(
    bucket: BucketConfig,
    *,
    file_data: bytes,
    declared_mime_type: str | None = None,
) -> str:
    """Return the MIME type of ``file_data`` once it satisfies the bucket limits.

    The type is detected from the file signature. A declared type must agree
    with the detected one.

    Raises:
        ValidationError: If the file is empty
        MIMETypeError: If the type is unknown, not accepted, or mismatched
        FileSizeError: If the file exceeds the bucket size limit
    """
    if not file_data:
        raise ValidationError(message="File must not be empty")

    try:
        mime_type = detect_mime_type(file_data)
    except ValueError as exc:
        logger.warning(
            "File signature not recognized",
            extra={"declared_mime_type": declared_mime_type},
        )
        raise MIMETypeError(
            message="File content is not a recognized image",
            details={
                "declared_mime_type": declared_mime_type,
                "allowed_mime_types": sorted(bucket.allowed_mime_types),
            },
        ) from exc

    if declared_mime_type and declared_mime_type.lower() != mime_type:
        logger.warning(
            "Declared content type does not match file content",
            extra={"declared_mime_type": declared_mime_type, "mime_type": mime_type},
        )
        raise MIMETypeError(
            message="Declared content type does not match file content",
            details={"declared_mime_type": declared_mime_type, "mime_type": mime_type},
        )

    bucket.check_object(mime_type=mime_type, size=len(file_data))
    return mime_type
