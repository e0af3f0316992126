import base64

import pytest
from pydantic import BaseModel, ValidationError

from core.utils.validators import (
    sanitize_validation_errors,
    validate_base64_file,
    validate_object_path_value,
    validate_request,
)


class SampleRequest(BaseModel):
    path: str
    limit: int


class TestSanitizeValidationErrors:
    def test_field_required(self) -> None:
        errors = [{"loc": ("path",), "msg": "Field required", "input": {}, "url": "x"}]

        assert sanitize_validation_errors(errors) == [
            {"field": "path", "message": "This field is required"}
        ]

    def test_value_error_prefix_removed(self) -> None:
        errors = [{"loc": ("path",), "msg": "Value error, Path must end with a file extension"}]

        assert sanitize_validation_errors(errors)[0]["message"] == (
            "Path must end with a file extension"
        )

    def test_base64_message(self) -> None:
        errors = [{"loc": ("file",), "msg": "Value error, Invalid base64 encoded file"}]

        assert sanitize_validation_errors(errors)[0]["message"] == (
            "File must be a valid Base64-encoded string"
        )

    def test_type_message_and_default_field(self) -> None:
        errors = [{"loc": (), "msg": "Input should be a valid integer"}]

        assert sanitize_validation_errors(errors) == [
            {"field": "body", "message": "Invalid value type"}
        ]


class TestValidateRequest:
    def test_returns_model(self) -> None:
        request = validate_request(SampleRequest, {"path": "u1/a.png", "limit": "5"})

        assert request.limit == 5

    def test_raises_pydantic_error(self) -> None:
        with pytest.raises(ValidationError):
            validate_request(SampleRequest, {"path": "u1/a.png"})


class TestFieldValidators:
    def test_object_path_value(self) -> None:
        assert validate_object_path_value("u1/a.png") == "u1/a.png"

    def test_object_path_value_rejects_traversal(self) -> None:
        with pytest.raises(ValueError, match="relative segments"):
            validate_object_path_value("u1/../u2/a.png")

    @pytest.mark.parametrize("raw", ["u1/photo", "u1/manual.pdf", "u1/a.svg"])
    def test_object_path_value_accepts_any_file_name(self, raw: str) -> None:
        assert validate_object_path_value(raw) == raw

    def test_base64_file(self) -> None:
        encoded = base64.b64encode(b"data").decode()

        assert validate_base64_file(encoded) == encoded

    @pytest.mark.parametrize("value", ["", "   ", "!!!invalid!!!"])
    def test_base64_file_rejects(self, value: str) -> None:
        with pytest.raises(ValueError):
            validate_base64_file(value)
