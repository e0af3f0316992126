import json
from unittest.mock import patch

from botocore.exceptions import ClientError

from core.models.errors import ObjectUploadFailedError
from handlers.upload_object.handler import handler

MB = 1024 * 1024


def parse_body(response):
    return json.loads(response["body"])


class TestUploadHandler:
    def test_upload_success(self, api_event, encode, lambda_context, s3_get_object, sample_png_binary) -> None:
        event = api_event(
            "POST",
            body={"file": encode(sample_png_binary), "path": "u1/photo.png"},
        )

        response = handler(event, lambda_context)

        assert response["statusCode"] == 201
        body = parse_body(response)
        assert body["path"] == "u1/photo.png"
        assert body["bucket"] == "salvage-parts"
        assert body["owner_id"] == "u1"
        assert body["mime_type"] == "image/png"
        assert body["message"] == "File uploaded successfully"
        assert body["public_url"].endswith("/u1/photo.png")

        stored = s3_get_object("u1/photo.png")
        assert stored["Content"] == sample_png_binary
        assert stored["Metadata"]["owner-id"] == "u1"

    def test_upload_path_without_extension(self, api_event, encode, lambda_context, s3_get_object, sample_png_binary) -> None:
        event = api_event(
            "POST",
            body={"file": encode(sample_png_binary), "path": "u1/photo"},
        )

        response = handler(event, lambda_context)

        assert response["statusCode"] == 201
        assert parse_body(response)["mime_type"] == "image/png"
        assert s3_get_object("u1/photo")["ContentType"] == "image/png"

    def test_upload_other_users_folder(self, api_event, encode, lambda_context, s3_bucket, s3_object_exists, sample_png_binary) -> None:
        event = api_event(
            "POST",
            body={"file": encode(sample_png_binary), "path": "u2/photo.png"},
        )

        response = handler(event, lambda_context)

        assert response["statusCode"] == 403
        assert parse_body(response)["error"] == "ACCESS_DENIED"
        assert s3_object_exists("u2/photo.png") is False

    def test_upload_without_identity(self, api_event, encode, lambda_context, s3_bucket, sample_png_binary) -> None:
        event = api_event(
            "POST",
            user_id=None,
            body={"file": encode(sample_png_binary), "path": "u1/photo.png"},
        )

        response = handler(event, lambda_context)

        assert response["statusCode"] == 401
        assert parse_body(response)["error"] == "UNAUTHENTICATED"

    def test_upload_duplicate(self, api_event, encode, lambda_context, s3_put_object, sample_png_binary) -> None:
        s3_put_object("u1/photo.png", sample_png_binary, "image/png")
        event = api_event(
            "POST",
            body={"file": encode(sample_png_binary), "path": "u1/photo.png"},
        )

        response = handler(event, lambda_context)

        assert response["statusCode"] == 409
        assert parse_body(response)["error"] == "DUPLICATE_OBJECT"

    def test_upload_loses_race_for_path(self, api_event, encode, lambda_context, s3_bucket, sample_png_binary) -> None:
        event = api_event(
            "POST",
            body={"file": encode(sample_png_binary), "path": "u1/photo.png"},
        )
        precondition_failed = ClientError(
            {"Error": {"Code": "PreconditionFailed", "Message": "At least one of the pre-conditions you specified did not hold"}},
            "PutObject",
        )

        with patch(
            "core.infrastructure.adapters.s3_adapter.S3Adapter.put_object",
            side_effect=precondition_failed,
        ):
            response = handler(event, lambda_context)

        assert response["statusCode"] == 409
        assert parse_body(response)["error"] == "DUPLICATE_OBJECT"

    def test_upload_file_size_exceeded(self, api_event, encode, lambda_context, s3_bucket) -> None:
        data = b"\x89PNG\r\n\x1a\n" + b"x" * (11 * MB)
        event = api_event("POST", body={"file": encode(data), "path": "u1/big.png"})

        response = handler(event, lambda_context)

        assert response["statusCode"] == 413
        assert parse_body(response)["error"] == "FILE_SIZE_EXCEEDED"

    def test_upload_unsupported_content(self, api_event, encode, lambda_context, s3_bucket, sample_pdf_binary) -> None:
        event = api_event(
            "POST",
            body={"file": encode(sample_pdf_binary), "path": "u1/manual.png"},
        )

        response = handler(event, lambda_context)

        assert response["statusCode"] == 415

    def test_upload_declared_type_mismatch(self, api_event, encode, lambda_context, s3_bucket, sample_png_binary) -> None:
        event = api_event(
            "POST",
            body={
                "file": encode(sample_png_binary),
                "path": "u1/photo.png",
                "content_type": "image/jpeg",
            },
        )

        response = handler(event, lambda_context)

        assert response["statusCode"] == 415
        assert parse_body(response)["error"] == "UNSUPPORTED_MIME_TYPE"

    def test_upload_invalid_base64(self, api_event, lambda_context) -> None:
        event = api_event("POST", body={"file": "!!!invalid!!!", "path": "u1/photo.png"})

        response = handler(event, lambda_context)

        assert response["statusCode"] == 422
        errors = parse_body(response)["details"]["errors"]
        assert errors[0]["field"] == "file"

    def test_upload_invalid_json(self, api_event, lambda_context) -> None:
        response = handler(api_event("POST", body="{not json"), lambda_context)

        assert response["statusCode"] == 422
        assert parse_body(response)["message"] == "Invalid JSON body"

    def test_upload_non_object_body(self, api_event, lambda_context) -> None:
        response = handler(api_event("POST", body="[1, 2]"), lambda_context)

        assert response["statusCode"] == 422

    def test_upload_storage_failure(self, api_event, encode, lambda_context, sample_png_binary) -> None:
        event = api_event(
            "POST",
            body={"file": encode(sample_png_binary), "path": "u1/photo.png"},
        )

        with patch(
            "handlers.upload_object.handler.UploadService.upload_object",
            side_effect=ObjectUploadFailedError(
                message="Unable to upload file at this time",
                details={"path": "u1/photo.png"},
            ),
        ), patch("handlers.upload_object.handler.UploadService.__init__", return_value=None):
            response = handler(event, lambda_context)

        assert response["statusCode"] == 500
        body = parse_body(response)
        assert body["error"] == "OBJECT_UPLOAD_FAILED"
        assert "details" not in body

    def test_options_preflight(self, api_event, lambda_context) -> None:
        response = handler(api_event("OPTIONS"), lambda_context)

        assert response["statusCode"] == 204
