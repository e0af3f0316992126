"""
Unit tests for core.models.errors
"""

import pytest

from core.models.errors import (
    AccessDeniedError,
    BucketProvisioningError,
    DuplicateObjectError,
    FileSizeError,
    FilterError,
    MIMETypeError,
    NotFoundError,
    ObjectDeletionFailedError,
    ObjectUploadFailedError,
    StorageError,
    StorageServiceError,
    UnauthenticatedError,
    ValidationError,
)


class TestStorageServiceError:
    def test_base_error(self) -> None:
        err = StorageServiceError(
            message="Something went wrong",
            error_code="TEST_ERROR",
            details={"foo": "bar"},
        )

        assert err.message == "Something went wrong"
        assert err.error_code == "TEST_ERROR"
        assert err.details == {"foo": "bar"}
        assert str(err) == "Something went wrong"


@pytest.mark.parametrize(
    "error_type,code",
    [
        (ValidationError, "VALIDATION_FAILED"),
        (NotFoundError, "NOT_FOUND"),
        (DuplicateObjectError, "DUPLICATE_OBJECT"),
        (UnauthenticatedError, "UNAUTHENTICATED"),
        (AccessDeniedError, "ACCESS_DENIED"),
        (StorageError, "STORAGE_ERROR"),
        (FilterError, "INVALID_FILTER"),
        (MIMETypeError, "UNSUPPORTED_MIME_TYPE"),
        (FileSizeError, "FILE_SIZE_EXCEEDED"),
        (ObjectUploadFailedError, "OBJECT_UPLOAD_FAILED"),
        (ObjectDeletionFailedError, "OBJECT_DELETE_FAILED"),
        (BucketProvisioningError, "BUCKET_PROVISIONING_FAILED"),
    ],
)
def test_default_error_codes(error_type: type[StorageServiceError], code: str) -> None:
    err = error_type(message="x")

    assert err.error_code == code
    assert err.details == {}
    assert isinstance(err, StorageServiceError)


@pytest.mark.parametrize(
    "error_type",
    [ObjectUploadFailedError, ObjectDeletionFailedError, BucketProvisioningError],
)
def test_storage_failures_share_base(error_type: type[StorageServiceError]) -> None:
    assert issubclass(error_type, StorageError)
