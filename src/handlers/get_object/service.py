"""
Business logic for object retrieval.

This module applies the read rule to a requested object and generates
access URLs for viewing or downloading it.
"""

import os
from typing import Literal

from aws_lambda_powertools import Logger

from core.auth.requester import Requester
from core.infrastructure.aws.s3_object_storage import S3ObjectStorage
from core.models.bucket import SALVAGE_PARTS_BUCKET, BucketConfig
from core.models.errors import NotFoundError
from core.models.storage_object import ObjectInfo, parse_object_path
from core.policies.access_policy import (
    BucketAccessPolicy,
    StorageOperation,
    default_bucket_policy,
)
from core.repositories.storage_repository import ObjectStorageRepository
from core.utils.constants import (
    DEFAULT_PRESIGNED_URL_EXPIRES_IN,
    ENV_APP_RUNTIME,
    ENV_PRESIGNED_URL_EXPIRES_IN,
    ERROR_CODE_OBJECT_NOT_FOUND,
    LOCALHOST_URL,
    LOCALSTACK_URL,
)

logger = Logger(UTC=True)


def _default_expires_in() -> int:
    return int(os.getenv(ENV_PRESIGNED_URL_EXPIRES_IN) or DEFAULT_PRESIGNED_URL_EXPIRES_IN)


class GetService:
    """Application service responsible for object access URLs.

    This service orchestrates:
    - Applying the select rule
    - Confirming the object exists
    - Generating pre-signed and public URLs
    """

    def __init__(
        self,
        storage: ObjectStorageRepository | None = None,
        policy: BucketAccessPolicy | None = None,
        bucket: BucketConfig = SALVAGE_PARTS_BUCKET,
        expires_in: int | None = None,
    ) -> None:
        self.bucket = bucket
        self.storage = storage or S3ObjectStorage()
        self.policy = policy or default_bucket_policy(bucket.id)
        self.expires_in = expires_in or _default_expires_in()

    @staticmethod
    def _rewrite_localstack_url(url: str) -> str:
        """
        Replace internal LocalStack hostname with localhost
        so URLs are accessible from the host machine.
        """
        if os.getenv(ENV_APP_RUNTIME) != "localstack":
            return url
        return url.replace(LOCALSTACK_URL, LOCALHOST_URL, 1)

    def generate_object_url(
        self,
        *,
        requester: Requester,
        path: str,
        mode: Literal["view", "download"] = "view",
    ) -> tuple[str, str | None, ObjectInfo]:
        """
        Generate access URLs for viewing or downloading an object.

        Args:
            requester: Identity performing the read
            path: Object path
            mode: "view" (inline) or "download" (attachment)

        Returns:
            Tuple of (pre_signed_url, public_url, object_info). The public URL
            is None unless the bucket is publicly readable.

        Raises:
            UnauthenticatedError: If the requester is anonymous
            NotFoundError: If no object exists at the path
            StorageError: If the lookup or URL generation fails
        """
        object_path = parse_object_path(path)

        logger.debug(
            "Generating object access URL",
            extra={"path": path, "mode": mode},
        )

        self.policy.authorize(StorageOperation.SELECT, requester, object_path)

        info = self.storage.head_object(path=object_path)
        if info is None:
            logger.warning("Object not found", extra={"path": path})
            raise NotFoundError(
                message="Object not found",
                error_code=ERROR_CODE_OBJECT_NOT_FOUND,
                details={"path": path},
            )

        disposition = "attachment" if mode == "download" else "inline"

        url = self.storage.generate_presigned_get_url(
            path=object_path,
            expires_in=self.expires_in,
            content_disposition=f'{disposition}; filename="{object_path.name}"',
        )
        url = self._rewrite_localstack_url(url)

        public_url = None
        if self.bucket.public:
            public_url = self._rewrite_localstack_url(
                self.storage.public_url(path=object_path)
            )

        logger.info(
            "Object access URL generated",
            extra={"path": path, "mode": mode},
        )

        return url, public_url, info
