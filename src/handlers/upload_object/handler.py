"""
Lambda handler responsible for uploading new objects to the bucket.
"""

import json
from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError as PydanticValidationError

from core.auth.requester import requester_from_event
from core.models.errors import StorageServiceError
from core.policies.content_policy import decode_file
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.validators import sanitize_validation_errors, validate_request

from .models import ObjectUploadRequest, ObjectUploadResponse
from .service import UploadService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle object upload requests.

    Expected API Gateway event structure:
    {
        "body": "{\"file\": \"<base64>\", \"path\": \"<user-id>/part.png\"}",
        "requestContext": {"authorizer": {"claims": {"sub": "<user-id>"}}}
    }

    Args:
        event: API Gateway Lambda proxy event containing the upload payload
        context: AWS Lambda execution context

    Returns:
        API Gateway-compatible HTTP response describing the stored object
    """
    logger.info(
        "Received object upload request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "request_id": getattr(context, "aws_request_id", None),
            "function_name": getattr(context, "function_name", None),
        },
    )

    requester = requester_from_event(event)

    try:
        body = json.loads(event.get("body") or "{}")
    except json.JSONDecodeError:
        logger.warning("Invalid JSON body received")
        return ResponseBuilder.validation_error(message="Invalid JSON body")

    if not isinstance(body, dict):
        return ResponseBuilder.validation_error(message="Request body must be a JSON object")

    try:
        request = validate_request(ObjectUploadRequest, body)
    except PydanticValidationError as exc:
        logger.error("Request validation failed", extra={"errors": exc.errors()})
        return ResponseBuilder.validation_error(
            message="Invalid request params",
            details={"errors": sanitize_validation_errors(exc.errors())},
        )

    try:
        file_data = decode_file(request.file)
        service = UploadService()

        result = service.upload_object(
            requester=requester,
            path=request.path,
            file_data=file_data,
            content_type=request.content_type,
        )
    except StorageServiceError as exc:
        logger.warning(
            "Object upload rejected",
            extra={
                "user_id": requester.user_id,
                "path": request.path,
                "error_code": exc.error_code,
            },
        )
        return ResponseBuilder.from_service_error(exc)

    response = ObjectUploadResponse(
        path=result["path"],
        bucket=service.bucket.id,
        owner_id=result["owner_id"],
        mime_type=result["mime_type"],
        size=result["size"],
        public_url=result["public_url"],
        uploaded_at=result["uploaded_at"],
        message="File uploaded successfully",
    )

    return ResponseBuilder.created(response.model_dump())
