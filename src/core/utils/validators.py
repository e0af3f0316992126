"""Request validation utilities."""

import base64
import binascii
from typing import Any, TypeVar

from pydantic import BaseModel

from core.models.errors import ValidationError as ServiceValidationError
from core.models.storage_object import parse_object_path

ModelT = TypeVar("ModelT", bound=BaseModel)


def sanitize_validation_errors(errors: list[Any]) -> list[dict[str, str]]:
    """Sanitize Pydantic validation errors for API responses.

    Removes sensitive/internal fields like:
    - url
    - ctx
    - input
    - internal exception details
    """
    sanitized: list[dict[str, str]] = []

    for err in errors:
        field = ".".join(str(x) for x in err.get("loc", [])) or "body"
        raw_msg = err.get("msg", "Invalid value")

        # Remove noisy prefixes
        msg = raw_msg.replace("Value error,", "").strip()

        msg_lower = msg.lower()
        if "base64" in msg_lower:
            msg = "File must be a valid Base64-encoded string"
        elif "field required" in msg_lower:
            msg = "This field is required"
        elif "valid string" in msg_lower or "valid integer" in msg_lower:
            msg = "Invalid value type"

        sanitized.append({"field": field, "message": msg})

    return sanitized


def validate_request(model: type[ModelT], data: dict[str, Any]) -> ModelT:
    """Validate request data against a Pydantic model.

    Raises:
        pydantic.ValidationError: If the data does not satisfy the model
    """
    return model.model_validate(data)


def validate_object_path_value(value: str) -> str:
    """Field-level object path check for request models.

    Raises:
        ValueError: If the path is malformed
    """
    try:
        parse_object_path(value)
    except ServiceValidationError as exc:
        raise ValueError(exc.message) from exc

    return value


def validate_base64_file(value: str) -> str:
    """Shared validator for base64 file payloads."""
    if not value or not value.strip():
        raise ValueError("file must not be empty")

    try:
        file_data = base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ValueError("Invalid base64 encoded file") from exc

    if not file_data:
        raise ValueError("Decoded file is empty")

    return value
