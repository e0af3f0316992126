"""Business logic for object upload operations.

This module coordinates authorization, content validation and storage for
new objects while translating failures into domain-specific errors.
"""

from typing import Any

from aws_lambda_powertools import Logger

from core.auth.requester import Requester
from core.infrastructure.aws.s3_object_storage import S3ObjectStorage
from core.models.bucket import SALVAGE_PARTS_BUCKET, BucketConfig
from core.models.errors import DuplicateObjectError
from core.models.storage_object import parse_object_path
from core.policies.access_policy import (
    BucketAccessPolicy,
    StorageOperation,
    default_bucket_policy,
)
from core.policies.content_policy import inspect_content
from core.repositories.storage_repository import ObjectStorageRepository
from core.utils.time import utc_now_iso

Metadata = dict[str, Any]

logger = Logger(UTC=True)


class UploadService:
    """Application service responsible for object uploads.

    This service orchestrates:
    - Path parsing and the insert rule
    - Content type and size checks against the bucket
    - Conflict detection for occupied paths
    - Writing object content to storage
    """

    def __init__(
        self,
        storage: ObjectStorageRepository | None = None,
        policy: BucketAccessPolicy | None = None,
        bucket: BucketConfig = SALVAGE_PARTS_BUCKET,
    ) -> None:
        self.bucket = bucket
        self.storage = storage or S3ObjectStorage()
        self.policy = policy or default_bucket_policy(bucket.id)

    def upload_object(
        self,
        *,
        requester: Requester,
        path: str,
        file_data: bytes,
        content_type: str | None = None,
    ) -> Metadata:
        """Store a new object at ``path``.

        The upload flow is:
        1. Parse the path and apply the insert rule
        2. Detect and validate MIME type and size
        3. Reject paths that already hold an object
        4. Write the object to storage

        Returns:
            Stored object attributes

        Raises:
            ValidationError: If the path is invalid or the file is empty
            UnauthenticatedError: If the requester is anonymous
            AccessDeniedError: If the path is outside the requester's folder
            MIMETypeError: If the file type is not accepted
            FileSizeError: If the file exceeds the bucket limit
            DuplicateObjectError: If an object already exists at the path
            ObjectUploadFailedError: If the storage write fails
        """
        object_path = parse_object_path(path)

        logger.debug(
            "Starting object upload",
            extra={"user_id": requester.user_id, "path": path},
        )

        # Step 1: Insert rule
        self.policy.authorize(StorageOperation.INSERT, requester, object_path)

        # Step 2: Bucket content limits
        mime_type = inspect_content(
            self.bucket,
            file_data=file_data,
            declared_mime_type=content_type,
        )

        # Step 3: Uploads never overwrite (the write below is also conditional)
        if self.storage.head_object(path=object_path) is not None:
            logger.info("Object already exists", extra={"path": path})
            raise DuplicateObjectError(
                message="An object already exists at this path",
                details={"path": path},
            )

        # Step 4: Write to storage
        uploaded_at = utc_now_iso()
        info = self.storage.put_object(
            path=object_path,
            file_data=file_data,
            mime_type=mime_type,
            metadata={"uploaded-at": uploaded_at},
            overwrite=False,
        )

        logger.info(
            "Object uploaded successfully",
            extra={"path": path, "user_id": requester.user_id, "size": info.size},
        )

        result: Metadata = info.model_dump()
        result["uploaded_at"] = uploaded_at
        result["public_url"] = (
            self.storage.public_url(path=object_path) if self.bucket.public else None
        )
        return result
