from unittest.mock import MagicMock

import pytest

from core.auth.requester import Requester
from core.models.errors import (
    AccessDeniedError,
    DuplicateObjectError,
    FileSizeError,
    MIMETypeError,
    ObjectUploadFailedError,
    UnauthenticatedError,
    ValidationError,
)
from core.models.storage_object import ObjectInfo
from handlers.upload_object.service import UploadService

MB = 1024 * 1024


def png_of_size(size: int) -> bytes:
    header = b"\x89PNG\r\n\x1a\n"
    return header + b"x" * (size - len(header))


@pytest.fixture
def storage() -> MagicMock:
    storage = MagicMock()
    storage.head_object.return_value = None
    storage.put_object.side_effect = lambda *, path, file_data, mime_type, metadata, overwrite=True: ObjectInfo(
        path=str(path),
        owner_id=path.owner_id,
        mime_type=mime_type,
        size=len(file_data),
        metadata=metadata,
    )
    storage.public_url.return_value = "https://s3.amazonaws.com/salvage-parts/u1/photo.png"
    return storage


class TestUploadService:
    def test_owner_uploads_into_own_folder(self, storage, owner) -> None:
        result = UploadService(storage=storage).upload_object(
            requester=owner,
            path="u1/photo.png",
            file_data=png_of_size(2 * MB),
            content_type="image/png",
        )

        assert result["path"] == "u1/photo.png"
        assert result["owner_id"] == "u1"
        assert result["mime_type"] == "image/png"
        assert result["size"] == 2 * MB
        assert result["public_url"].endswith("/u1/photo.png")
        assert "uploaded_at" in result

        metadata = storage.put_object.call_args.kwargs["metadata"]
        assert metadata["uploaded-at"] == result["uploaded_at"]

    def test_upload_into_other_folder_is_denied(self, storage, owner) -> None:
        with pytest.raises(AccessDeniedError):
            UploadService(storage=storage).upload_object(
                requester=owner,
                path="u2/photo.png",
                file_data=png_of_size(1024),
            )

        storage.put_object.assert_not_called()

    def test_anonymous_upload(self, storage, anonymous) -> None:
        with pytest.raises(UnauthenticatedError):
            UploadService(storage=storage).upload_object(
                requester=anonymous,
                path="u1/photo.png",
                file_data=png_of_size(1024),
            )

    def test_root_level_upload_is_denied(self, storage, owner) -> None:
        with pytest.raises(AccessDeniedError):
            UploadService(storage=storage).upload_object(
                requester=owner,
                path="photo.png",
                file_data=png_of_size(1024),
            )

    def test_oversized_upload(self, storage, owner) -> None:
        with pytest.raises(FileSizeError):
            UploadService(storage=storage).upload_object(
                requester=owner,
                path="u1/photo.png",
                file_data=png_of_size(11 * MB),
            )

        storage.put_object.assert_not_called()

    def test_pdf_upload(self, storage, owner, sample_pdf_binary) -> None:
        with pytest.raises(MIMETypeError):
            UploadService(storage=storage).upload_object(
                requester=owner,
                path="u1/manual.png",
                file_data=sample_pdf_binary,
                content_type="application/pdf",
            )

    def test_invalid_path(self, storage, owner) -> None:
        with pytest.raises(ValidationError):
            UploadService(storage=storage).upload_object(
                requester=owner,
                path="u1/../u2/photo.png",
                file_data=png_of_size(1024),
            )

    def test_existing_object_is_a_conflict(self, storage, owner) -> None:
        storage.head_object.return_value = ObjectInfo(
            path="u1/photo.png", owner_id="u1", mime_type="image/png", size=10
        )

        with pytest.raises(DuplicateObjectError):
            UploadService(storage=storage).upload_object(
                requester=owner,
                path="u1/photo.png",
                file_data=png_of_size(1024),
            )

        storage.put_object.assert_not_called()

    def test_write_is_conditional(self, storage, owner) -> None:
        UploadService(storage=storage).upload_object(
            requester=owner,
            path="u1/photo.png",
            file_data=png_of_size(1024),
        )

        assert storage.put_object.call_args.kwargs["overwrite"] is False

    def test_concurrent_upload_is_a_conflict(self, storage, owner) -> None:
        storage.put_object.side_effect = DuplicateObjectError(
            message="An object already exists at this path",
            details={"path": "u1/photo.png"},
        )

        with pytest.raises(DuplicateObjectError):
            UploadService(storage=storage).upload_object(
                requester=owner,
                path="u1/photo.png",
                file_data=png_of_size(1024),
            )

    def test_path_without_extension(self, storage, owner) -> None:
        result = UploadService(storage=storage).upload_object(
            requester=owner,
            path="u1/photo",
            file_data=png_of_size(1024),
        )

        assert result["path"] == "u1/photo"
        assert result["mime_type"] == "image/png"

    def test_storage_failure_propagates(self, storage, owner) -> None:
        storage.put_object.side_effect = ObjectUploadFailedError(message="Unable to upload file at this time")

        with pytest.raises(ObjectUploadFailedError):
            UploadService(storage=storage).upload_object(
                requester=owner,
                path="u1/photo.png",
                file_data=png_of_size(1024),
            )

    def test_private_bucket_has_no_public_url(self, storage, owner) -> None:
        from core.models.bucket import BucketConfig

        private = BucketConfig(
            id="salvage-parts",
            name="salvage-parts",
            public=False,
            file_size_limit=MB,
            allowed_mime_types=frozenset({"image/png"}),
        )

        result = UploadService(storage=storage, bucket=private).upload_object(
            requester=Requester.authenticated("u1"),
            path="u1/photo.png",
            file_data=png_of_size(1024),
        )

        assert result["public_url"] is None
        storage.public_url.assert_not_called()
