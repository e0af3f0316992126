"""
Business logic for replacing the content of an existing object.
"""

from typing import Any

from aws_lambda_powertools import Logger

from core.auth.requester import Requester
from core.infrastructure.aws.s3_object_storage import S3ObjectStorage
from core.models.bucket import SALVAGE_PARTS_BUCKET, BucketConfig
from core.models.errors import NotFoundError
from core.models.storage_object import parse_object_path
from core.policies.access_policy import (
    BucketAccessPolicy,
    StorageOperation,
    default_bucket_policy,
)
from core.policies.content_policy import inspect_content
from core.repositories.storage_repository import ObjectStorageRepository
from core.utils.constants import ERROR_CODE_OBJECT_NOT_FOUND
from core.utils.time import utc_now_iso

Metadata = dict[str, Any]

logger = Logger(UTC=True)


class UpdateService:
    """Application service responsible for object updates."""

    def __init__(
        self,
        storage: ObjectStorageRepository | None = None,
        policy: BucketAccessPolicy | None = None,
        bucket: BucketConfig = SALVAGE_PARTS_BUCKET,
    ) -> None:
        self.bucket = bucket
        self.storage = storage or S3ObjectStorage()
        self.policy = policy or default_bucket_policy(bucket.id)

    def update_object(
        self,
        *,
        requester: Requester,
        path: str,
        file_data: bytes,
        content_type: str | None = None,
    ) -> Metadata:
        """Replace the content of the object at ``path``.

        The new content goes through the same bucket checks as an upload.

        Raises:
            UnauthenticatedError: If the requester is anonymous
            AccessDeniedError: If the path is outside the requester's folder
            MIMETypeError: If the file type is not accepted
            FileSizeError: If the file exceeds the bucket limit
            NotFoundError: If no object exists at the path
            ObjectUploadFailedError: If the storage write fails
        """
        object_path = parse_object_path(path)

        self.policy.authorize(StorageOperation.UPDATE, requester, object_path)

        mime_type = inspect_content(
            self.bucket,
            file_data=file_data,
            declared_mime_type=content_type,
        )

        existing = self.storage.head_object(path=object_path)
        if existing is None:
            logger.warning("Object not found for update", extra={"path": path})
            raise NotFoundError(
                message="Object not found",
                error_code=ERROR_CODE_OBJECT_NOT_FOUND,
                details={"path": path},
            )

        updated_at = utc_now_iso()
        metadata = dict(existing.metadata)
        metadata["updated-at"] = updated_at

        info = self.storage.put_object(
            path=object_path,
            file_data=file_data,
            mime_type=mime_type,
            metadata=metadata,
        )

        logger.info(
            "Object updated successfully",
            extra={
                "path": path,
                "user_id": requester.user_id,
                "previous_size": existing.size,
                "size": info.size,
            },
        )

        result: Metadata = info.model_dump()
        result["updated_at"] = updated_at
        return result
