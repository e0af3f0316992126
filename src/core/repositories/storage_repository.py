"""Abstract contract for bucket object storage."""

from abc import ABC, abstractmethod

from core.models.storage_object import ObjectInfo, ObjectPath, ObjectSummary


class ObjectStorageRepository(ABC):
    """Contract for storing and retrieving bucket objects.

    Implementations could be S3, GCS, local disk, etc.
    Services depend on this interface, not the implementation.
    """

    @abstractmethod
    def put_object(
        self,
        *,
        path: ObjectPath,
        file_data: bytes,
        mime_type: str,
        metadata: dict[str, str] | None = None,
        overwrite: bool = True,
    ) -> ObjectInfo:
        """Write object content at a path.

        Args:
            path: Target object path
            file_data: Binary object content
            mime_type: MIME type (e.g., 'image/png')
            metadata: Optional user metadata stored with the object
            overwrite: When False, the write fails if the path already holds an object

        Returns:
            Attributes of the stored object

        Raises:
            DuplicateObjectError: If overwrite is False and the path is taken
            ObjectUploadFailedError: If the write fails
        """

    @abstractmethod
    def head_object(self, *, path: ObjectPath) -> ObjectInfo | None:
        """Fetch object attributes.

        Returns:
            Object attributes, or None if no object exists at the path

        Raises:
            StorageError: If the lookup fails
        """

    @abstractmethod
    def remove_object(self, *, path: ObjectPath) -> None:
        """Delete the object at a path.

        Raises:
            ObjectDeletionFailedError: If deletion fails
        """

    @abstractmethod
    def list_objects(self, *, prefix: str) -> list[ObjectSummary]:
        """List every object whose path starts with a prefix.

        Raises:
            StorageError: If listing fails
        """

    @abstractmethod
    def generate_presigned_get_url(
        self,
        *,
        path: ObjectPath,
        expires_in: int,
        content_disposition: str | None = None,
    ) -> str:
        """Generate a time-limited URL for reading an object.

        Raises:
            StorageError: If the URL cannot be generated
        """

    @abstractmethod
    def public_url(self, *, path: ObjectPath) -> str:
        """Unsigned URL of an object in a publicly readable bucket."""
