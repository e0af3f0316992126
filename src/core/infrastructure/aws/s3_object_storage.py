"""S3-backed implementation of ObjectStorageRepository."""

from collections.abc import Mapping
from typing import Any

from aws_lambda_powertools import Logger
from botocore.exceptions import ClientError

from core.infrastructure.adapters.s3_adapter import S3Adapter, S3AdapterProtocol
from core.models.errors import (
    DuplicateObjectError,
    ObjectDeletionFailedError,
    ObjectUploadFailedError,
    StorageError,
)
from core.models.storage_object import ObjectInfo, ObjectPath, ObjectSummary
from core.repositories.storage_repository import ObjectStorageRepository
from core.utils.constants import (
    ERROR_CODE_OBJECT_FETCH_FAILED,
    ERROR_CODE_OBJECT_LIST_FAILED,
    ERROR_CODE_PRESIGNED_URL_FAILED,
    PATH_SEPARATOR,
)
from core.utils.time import to_utc_iso

logger = Logger(UTC=True)

MISSING_OBJECT_CODES = frozenset({"404", "NoSuchKey", "NotFound"})
OCCUPIED_PATH_CODES = frozenset({"412", "PreconditionFailed", "ConditionalRequestConflict"})


def _etag(value: Any) -> str | None:
    return value.strip('"') if isinstance(value, str) else None


class S3ObjectStorage(ObjectStorageRepository):
    """Object storage implementation backed by Amazon S3."""

    def __init__(self, adapter: S3AdapterProtocol | None = None) -> None:
        """Create storage using the provided S3 adapter."""
        self._s3: S3AdapterProtocol = adapter or S3Adapter()

    @property
    def bucket(self) -> str:
        return self._s3.bucket

    def put_object(
        self,
        *,
        path: ObjectPath,
        file_data: bytes,
        mime_type: str,
        metadata: dict[str, str] | None = None,
        overwrite: bool = True,
    ) -> ObjectInfo:
        """Upload object bytes to S3 and return the stored attributes."""
        key = str(path)
        object_metadata = dict(metadata or {})
        if path.owner_id:
            object_metadata.setdefault("owner-id", path.owner_id)

        logger.debug(
            "Uploading object",
            extra={"key": key, "size": len(file_data), "mime_type": mime_type},
        )

        try:
            self._s3.put_object(
                key=key,
                body=file_data,
                content_type=mime_type,
                metadata=object_metadata,
                if_none_match=None if overwrite else "*",
            )
        except ClientError as exc:
            if not overwrite and exc.response.get("Error", {}).get("Code") in OCCUPIED_PATH_CODES:
                logger.info("Object already exists", extra={"key": key})
                raise DuplicateObjectError(
                    message="An object already exists at this path",
                    details={"path": key},
                ) from exc

            logger.error("S3 upload failed", extra={"key": key})
            raise ObjectUploadFailedError(
                message="Unable to upload file at this time",
                details={"path": key},
            ) from exc
        except Exception as exc:
            logger.exception("Unexpected error uploading object")
            raise ObjectUploadFailedError(
                message="Unable to upload file at this time",
                details={"path": key},
            ) from exc

        logger.info("Object uploaded successfully", extra={"key": key})

        return ObjectInfo(
            path=key,
            owner_id=path.owner_id,
            mime_type=mime_type,
            size=len(file_data),
            metadata=object_metadata,
        )

    def head_object(self, *, path: ObjectPath) -> ObjectInfo | None:
        """Fetch object attributes, returning None for a missing object."""
        key = str(path)
        logger.debug("Fetching object attributes", extra={"key": key})

        try:
            response: Mapping[str, Any] = self._s3.head_object(key=key)
        except ClientError as exc:
            if exc.response.get("Error", {}).get("Code") in MISSING_OBJECT_CODES:
                return None

            logger.error("S3 head_object failed", extra={"key": key})
            raise StorageError(
                message="Unable to retrieve file details",
                error_code=ERROR_CODE_OBJECT_FETCH_FAILED,
                details={"path": key},
            ) from exc
        except Exception as exc:
            logger.exception("Unexpected error fetching object attributes")
            raise StorageError(
                message="Unable to retrieve file details",
                error_code=ERROR_CODE_OBJECT_FETCH_FAILED,
                details={"path": key},
            ) from exc

        return ObjectInfo(
            path=key,
            owner_id=path.owner_id,
            mime_type=response.get("ContentType", "application/octet-stream"),
            size=int(response.get("ContentLength", 0)),
            etag=_etag(response.get("ETag")),
            updated_at=to_utc_iso(response.get("LastModified")),
            metadata=dict(response.get("Metadata") or {}),
        )

    def remove_object(self, *, path: ObjectPath) -> None:
        """Delete an object from S3."""
        key = str(path)
        logger.debug("Deleting object", extra={"key": key})

        try:
            self._s3.delete_object(key=key)
            logger.info("Object deleted successfully", extra={"key": key})

        except ClientError as exc:
            logger.error("S3 deletion failed", extra={"key": key})
            raise ObjectDeletionFailedError(
                message="Unable to delete file at this time",
                details={"path": key},
            ) from exc

        except Exception as exc:
            logger.exception("Unexpected error deleting object")
            raise ObjectDeletionFailedError(
                message="Unable to delete file at this time",
                details={"path": key},
            ) from exc

    def list_objects(self, *, prefix: str) -> list[ObjectSummary]:
        """List objects under a prefix."""
        logger.debug("Listing objects", extra={"prefix": prefix})

        try:
            summaries = [
                ObjectSummary(
                    path=item["Key"],
                    name=item["Key"].rsplit(PATH_SEPARATOR, 1)[-1],
                    size=int(item.get("Size", 0)),
                    etag=_etag(item.get("ETag")),
                    updated_at=to_utc_iso(item.get("LastModified")),
                )
                for item in self._s3.iter_objects(prefix=prefix)
            ]
        except ClientError as exc:
            logger.error("S3 list failed", extra={"prefix": prefix})
            raise StorageError(
                message="Unable to list files",
                error_code=ERROR_CODE_OBJECT_LIST_FAILED,
                details={"prefix": prefix},
            ) from exc
        except Exception as exc:
            logger.exception("Unexpected error listing objects")
            raise StorageError(
                message="Unable to list files",
                error_code=ERROR_CODE_OBJECT_LIST_FAILED,
                details={"prefix": prefix},
            ) from exc

        logger.info("Objects listed", extra={"prefix": prefix, "count": len(summaries)})
        return summaries

    def generate_presigned_get_url(
        self,
        *,
        path: ObjectPath,
        expires_in: int,
        content_disposition: str | None = None,
    ) -> str:
        """Generate a pre-signed S3 URL for reading an object."""
        key = str(path)
        logger.debug(
            "Generating pre-signed S3 URL",
            extra={"key": key, "expires_in": expires_in},
        )

        params: dict[str, Any] = {"Key": key}
        if content_disposition:
            params["ResponseContentDisposition"] = content_disposition

        try:
            return self._s3.generate_presigned_url(
                method="get_object",
                params=params,
                expires_in=expires_in,
            )
        except Exception as exc:
            logger.exception("Failed to generate pre-signed URL", extra={"key": key})
            raise StorageError(
                message="Unable to generate file access URL",
                error_code=ERROR_CODE_PRESIGNED_URL_FAILED,
                details={"path": key},
            ) from exc

    def public_url(self, *, path: ObjectPath) -> str:
        return self._s3.public_url(key=str(path))
