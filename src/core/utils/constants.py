"""Global constants used throughout the application.

This module centralizes all magic numbers, string literals, and configuration
values that are used across multiple modules. Using constants prevents hardcoding
values and makes it easy to change them globally.
"""

from typing import Final

# ============================================================================
# Error Codes
# ============================================================================


# Validation Errors
ERROR_CODE_VALIDATION_FAILED = "VALIDATION_FAILED"
ERROR_CODE_INVALID_OBJECT_PATH = "INVALID_OBJECT_PATH"
ERROR_CODE_INVALID_FILTER = "INVALID_FILTER"
ERROR_CODE_UNSUPPORTED_MIME_TYPE = "UNSUPPORTED_MIME_TYPE"
ERROR_CODE_FILE_SIZE_EXCEEDED = "FILE_SIZE_EXCEEDED"

# Authentication / Authorization Errors
ERROR_CODE_UNAUTHENTICATED = "UNAUTHENTICATED"
ERROR_CODE_ACCESS_DENIED = "ACCESS_DENIED"

# Not Found Errors
ERROR_CODE_RESOURCE_NOT_FOUND = "NOT_FOUND"
ERROR_CODE_OBJECT_NOT_FOUND = "OBJECT_NOT_FOUND"

# Storage Errors
ERROR_CODE_STORAGE = "STORAGE_ERROR"
ERROR_CODE_OBJECT_UPLOAD_FAILED = "OBJECT_UPLOAD_FAILED"
ERROR_CODE_OBJECT_DELETE_FAILED = "OBJECT_DELETE_FAILED"
ERROR_CODE_OBJECT_FETCH_FAILED = "OBJECT_FETCH_FAILED"
ERROR_CODE_OBJECT_LIST_FAILED = "OBJECT_LIST_FAILED"
ERROR_CODE_DUPLICATE_OBJECT = "DUPLICATE_OBJECT"
ERROR_CODE_PRESIGNED_URL_FAILED = "PRESIGNED_URL_FAILED"
ERROR_CODE_BUCKET_PROVISIONING_FAILED = "BUCKET_PROVISIONING_FAILED"


# ============================================================================
# Bucket Declaration
# ============================================================================

SALVAGE_PARTS_BUCKET_ID: Final[str] = "salvage-parts"
SALVAGE_PARTS_BUCKET_PUBLIC: Final[bool] = True

MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB in bytes (10485760)


MIME_TYPE_EXTENSION_MAP: Final[dict[str, tuple[str, ...]]] = {
    "image/jpeg": ("jpg", "jpeg"),
    "image/png": ("png",),
    "image/webp": ("webp",),
    "image/gif": ("gif",),
}

ALLOWED_MIME_TYPES: Final[frozenset[str]] = frozenset(MIME_TYPE_EXTENSION_MAP.keys())


# ============================================================================
# Object Path Constraints
# ============================================================================

PATH_SEPARATOR = "/"
MAX_PATH_LENGTH = 1024
RESERVED_PATH_SEGMENTS = frozenset({".", ".."})

# ============================================================================
# Pagination Constraints
# ============================================================================

DEFAULT_LIMIT = 20
MIN_LIMIT = 1
MAX_LIMIT = 100
DEFAULT_OFFSET = 0

# ============================================================================
# Filter Constraints
# ============================================================================

ALLOWED_SORT_FIELDS = {"name", "updated_at"}
ALLOWED_SORT_ORDERS = {"asc", "desc"}

# ============================================================================
# Pre-signed URLs
# ============================================================================

DEFAULT_PRESIGNED_URL_EXPIRES_IN = 300

# ============================================================================
# API Gateway Configuration
# ============================================================================

CORS_ORIGIN = "*"
CORS_METHODS = "GET,POST,PUT,DELETE,OPTIONS"
CORS_HEADERS = "Content-Type,Authorization,X-Api-Key"
EXPOSE_HEADERS = "Content-Type,Content-Length"
DEFAULT_CONTENT_TYPE = "application/json"

# ============================================================================
# Environment Variable Names
# ============================================================================

ENV_AWS_ENDPOINT_URL = "AWS_ENDPOINT_URL"
ENV_AWS_REGION = "AWS_REGION"
ENV_STORAGE_BUCKET_NAME = "STORAGE_BUCKET_NAME"
ENV_PRESIGNED_URL_EXPIRES_IN = "PRESIGNED_URL_EXPIRES_IN"
ENV_APP_RUNTIME = "APP_RUNTIME"
LOCALSTACK_URL = "http://localstack"
LOCALHOST_URL = "http://localhost"

# ============================================================================
# Helper Functions
# ============================================================================


def format_file_size(size_bytes: int) -> str:
    """Format file size in human-readable format.

    Args:
        size_bytes: Size in bytes

    Returns:
        Formatted file size string
    """
    size: float = float(size_bytes)

    for unit in ("B", "KB", "MB", "GB"):
        if size < 1024.0:
            return f"{size:.1f} {unit}"
        size /= 1024.0

    return f"{size:.1f} TB"
