from unittest.mock import MagicMock

import pytest

from core.models.errors import NotFoundError, StorageError, UnauthenticatedError
from core.models.storage_object import ObjectInfo
from handlers.get_object.service import GetService


@pytest.fixture
def storage() -> MagicMock:
    storage = MagicMock()
    storage.head_object.return_value = ObjectInfo(
        path="u1/photo.png",
        owner_id="u1",
        mime_type="image/png",
        size=2048,
    )
    storage.generate_presigned_get_url.return_value = "http://localstack:4566/salvage-parts/u1/photo.png?sig=1"
    storage.public_url.return_value = "http://localstack:4566/salvage-parts/u1/photo.png"
    return storage


class TestGetService:
    def test_other_user_can_view(self, storage, other_user, monkeypatch) -> None:
        monkeypatch.delenv("APP_RUNTIME", raising=False)

        url, public_url, info = GetService(storage=storage, expires_in=60).generate_object_url(
            requester=other_user,
            path="u1/photo.png",
        )

        assert url.startswith("http://localstack:4566/")
        assert public_url == "http://localstack:4566/salvage-parts/u1/photo.png"
        assert info.owner_id == "u1"

        kwargs = storage.generate_presigned_get_url.call_args.kwargs
        assert kwargs["expires_in"] == 60
        assert kwargs["content_disposition"] == 'inline; filename="photo.png"'

    def test_download_mode(self, storage, owner) -> None:
        GetService(storage=storage).generate_object_url(
            requester=owner,
            path="u1/photo.png",
            mode="download",
        )

        kwargs = storage.generate_presigned_get_url.call_args.kwargs
        assert kwargs["content_disposition"] == 'attachment; filename="photo.png"'

    def test_localstack_urls_are_rewritten(self, storage, owner, monkeypatch) -> None:
        monkeypatch.setenv("APP_RUNTIME", "localstack")

        url, public_url, _ = GetService(storage=storage).generate_object_url(
            requester=owner,
            path="u1/photo.png",
        )

        assert url.startswith("http://localhost:4566/")
        assert public_url.startswith("http://localhost:4566/")

    def test_expiry_from_environment(self, storage, monkeypatch) -> None:
        monkeypatch.setenv("PRESIGNED_URL_EXPIRES_IN", "900")

        assert GetService(storage=storage).expires_in == 900

    def test_default_expiry(self, storage, monkeypatch) -> None:
        monkeypatch.delenv("PRESIGNED_URL_EXPIRES_IN", raising=False)

        assert GetService(storage=storage).expires_in == 300

    def test_anonymous_read(self, storage, anonymous) -> None:
        with pytest.raises(UnauthenticatedError):
            GetService(storage=storage).generate_object_url(
                requester=anonymous,
                path="u1/photo.png",
            )

    def test_missing_object(self, storage, owner) -> None:
        storage.head_object.return_value = None

        with pytest.raises(NotFoundError) as exc:
            GetService(storage=storage).generate_object_url(
                requester=owner,
                path="u1/missing.png",
            )

        assert exc.value.error_code == "OBJECT_NOT_FOUND"
        storage.generate_presigned_get_url.assert_not_called()

    def test_url_generation_failure(self, storage, owner) -> None:
        storage.generate_presigned_get_url.side_effect = StorageError(
            message="Unable to generate file access URL"
        )

        with pytest.raises(StorageError):
            GetService(storage=storage).generate_object_url(
                requester=owner,
                path="u1/photo.png",
            )
