"""Folder-scoped access rules for the storage bucket.

Each rule is a stateless predicate over (operation, requester, object path).
Rules are permissive: an operation is admitted when at least one rule for
that operation allows it, and denied when none does.
"""

from collections.abc import Iterable
from enum import Enum

from aws_lambda_powertools import Logger
from pydantic import BaseModel, ConfigDict

from core.auth.requester import Requester
from core.models.errors import AccessDeniedError, UnauthenticatedError
from core.models.storage_object import ObjectPath
from core.utils.constants import SALVAGE_PARTS_BUCKET_ID

logger = Logger(UTC=True)


class StorageOperation(str, Enum):
    INSERT = "insert"
    SELECT = "select"
    UPDATE = "update"
    DELETE = "delete"


class AccessRule(BaseModel):
    """A single access rule bound to one operation on one bucket."""

    model_config = ConfigDict(frozen=True)

    name: str
    operation: StorageOperation
    bucket_id: str
    require_owner: bool = False

    def allows(
        self,
        requester: Requester,
        *,
        bucket_id: str,
        path: ObjectPath | None,
    ) -> bool:
        if bucket_id != self.bucket_id:
            return False

        if not requester.is_authenticated:
            return False

        if self.require_owner:
            owner_id = path.owner_id if path is not None else None
            return owner_id is not None and requester.user_id == owner_id

        return True


class BucketAccessPolicy:
    """Set of access rules evaluated for every storage request."""

    def __init__(self, bucket_id: str, rules: Iterable[AccessRule]) -> None:
        self.bucket_id = bucket_id
        self.rules: tuple[AccessRule, ...] = tuple(rules)

    def rules_for(self, operation: StorageOperation) -> list[AccessRule]:
        return [rule for rule in self.rules if rule.operation == operation]

    def is_allowed(
        self,
        operation: StorageOperation,
        requester: Requester,
        path: ObjectPath | None = None,
    ) -> bool:
        """Return True when any rule for the operation admits the request."""
        return any(
            rule.allows(requester, bucket_id=self.bucket_id, path=path)
            for rule in self.rules_for(operation)
        )

    def authorize(
        self,
        operation: StorageOperation,
        requester: Requester,
        path: ObjectPath | None = None,
    ) -> None:
        """Admit the request or raise.

        Raises:
            UnauthenticatedError: If the requester is not authenticated
            AccessDeniedError: If no rule admits the request
        """
        if not requester.is_authenticated:
            logger.warning(
                "Unauthenticated storage request rejected",
                extra={"operation": operation.value, "path": str(path or "")},
            )
            raise UnauthenticatedError(
                message="Authentication required",
                details={"operation": operation.value},
            )

        if not self.is_allowed(operation, requester, path):
            logger.warning(
                "Storage request denied",
                extra={
                    "operation": operation.value,
                    "user_id": requester.user_id,
                    "path": str(path or ""),
                    "owner_id": path.owner_id if path else None,
                },
            )
            raise AccessDeniedError(
                message=f"Not allowed to {operation.value} objects under this path",
                details={"operation": operation.value, "path": str(path or "")},
            )

        logger.debug(
            "Storage request authorized",
            extra={
                "operation": operation.value,
                "user_id": requester.user_id,
                "path": str(path or ""),
            },
        )


def default_bucket_policy(bucket_id: str = SALVAGE_PARTS_BUCKET_ID) -> BucketAccessPolicy:
    """Build the four access rules of the parts image bucket.

    Uploads, updates and deletes are limited to the owner's folder; any
    authenticated requester may read.
    """
    return BucketAccessPolicy(
        bucket_id,
        [
            AccessRule(
                name="Authenticated users can upload files",
                operation=StorageOperation.INSERT,
                bucket_id=bucket_id,
                require_owner=True,
            ),
            AccessRule(
                name="Authenticated users can view files",
                operation=StorageOperation.SELECT,
                bucket_id=bucket_id,
            ),
            AccessRule(
                name="Users can update their own files",
                operation=StorageOperation.UPDATE,
                bucket_id=bucket_id,
                require_owner=True,
            ),
            AccessRule(
                name="Users can delete their own files",
                operation=StorageOperation.DELETE,
                bucket_id=bucket_id,
                require_owner=True,
            ),
        ],
    )
