"""
Business logic for object listing and filtering.
"""

from typing import Any

from aws_lambda_powertools import Logger

from core.auth.requester import Requester
from core.filters.in_memory_object_filter import InMemoryObjectFilter
from core.infrastructure.aws.s3_object_storage import S3ObjectStorage
from core.models.bucket import SALVAGE_PARTS_BUCKET, BucketConfig
from core.policies.access_policy import (
    BucketAccessPolicy,
    StorageOperation,
    default_bucket_policy,
)
from core.repositories.storage_repository import ObjectStorageRepository

ObjectItem = dict[str, Any]

logger = Logger(UTC=True)


class ListService:
    """Application service responsible for listing bucket objects.

    This service coordinates:
    - Applying the select rule
    - Fetching object summaries under a prefix
    - Applying optional in-memory name filtering
    - Sorting and paginating results
    """

    def __init__(
        self,
        storage: ObjectStorageRepository | None = None,
        policy: BucketAccessPolicy | None = None,
        bucket: BucketConfig = SALVAGE_PARTS_BUCKET,
    ) -> None:
        self.storage = storage or S3ObjectStorage()
        self.policy = policy or default_bucket_policy(bucket.id)
        self.filters = InMemoryObjectFilter()

    def list_objects(
        self,
        *,
        requester: Requester,
        prefix: str,
        name_contains: str | None,
        offset: int,
        limit: int,
        sort_by: str,
        sort_order: str,
    ) -> tuple[list[ObjectItem], int, bool]:
        """List objects with filtering, sorting, and pagination.

        Raises:
            UnauthenticatedError: If the requester is anonymous
            FilterError: If sort or pagination parameters are invalid
            StorageError: If listing fails
        """
        # The select rule is not owner-scoped, so no path is needed
        self.policy.authorize(StorageOperation.SELECT, requester)

        # Step 1: Fetch from storage (prefix filtering only)
        items = [
            summary.model_dump()
            for summary in self.storage.list_objects(prefix=prefix)
        ]

        # Step 2: Apply in-memory name filtering only if requested
        items = self.filters.filter_by_name_contains(
            items,
            name_contains=name_contains,
        )

        # Step 3: Sort
        items = self.filters.sort(items, sort_by=sort_by, sort_order=sort_order)

        # Step 4: Paginate
        page_items, total, has_more = self.filters.paginate(
            items,
            offset=offset,
            limit=limit,
        )

        logger.info(
            "Objects listed successfully",
            extra={
                "user_id": requester.user_id,
                "prefix": prefix,
                "count": len(page_items),
            },
        )

        return page_items, total, has_more
