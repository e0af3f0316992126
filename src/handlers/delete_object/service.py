"""
Business logic for object deletion.
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
from core.repositories.storage_repository import ObjectStorageRepository
from core.utils.constants import ERROR_CODE_OBJECT_NOT_FOUND
from core.utils.time import utc_now_iso

logger = Logger(UTC=True)


class DeleteService:
    """Application service responsible for deleting objects.

    Ensures:
    - Only the owner of the folder deletes
    - Missing objects are reported, not silently ignored
    """

    def __init__(
        self,
        storage: ObjectStorageRepository | None = None,
        policy: BucketAccessPolicy | None = None,
        bucket: BucketConfig = SALVAGE_PARTS_BUCKET,
    ) -> None:
        self.storage = storage or S3ObjectStorage()
        self.policy = policy or default_bucket_policy(bucket.id)

    def delete_object(self, *, requester: Requester, path: str) -> dict[str, Any]:
        """
        Delete the object at ``path``.

        Returns:
            Deletion result containing path and deleted_at timestamp

        Raises:
            UnauthenticatedError: If the requester is anonymous
            AccessDeniedError: If the path is outside the requester's folder
            NotFoundError: If no object exists at the path
            ObjectDeletionFailedError: If storage deletion fails
        """
        object_path = parse_object_path(path)

        logger.debug("Starting object deletion", extra={"path": path})

        self.policy.authorize(StorageOperation.DELETE, requester, object_path)

        if self.storage.head_object(path=object_path) is None:
            logger.warning("Object not found for deletion", extra={"path": path})
            raise NotFoundError(
                message="Object not found",
                error_code=ERROR_CODE_OBJECT_NOT_FOUND,
                details={"path": path},
            )

        self.storage.remove_object(path=object_path)

        deleted_at = utc_now_iso()

        logger.info(
            "Object deleted successfully",
            extra={"path": path, "user_id": requester.user_id},
        )

        return {"path": path, "deleted_at": deleted_at}
