"""
Lambda handler responsible for replacing existing objects.
"""

import json
from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from core.auth.requester import requester_from_event
from core.models.errors import StorageServiceError
from core.policies.content_policy import decode_file
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.validators import sanitize_validation_errors, validate_request

from .models import ObjectUpdateRequest, ObjectUpdateResponse
from .service import UpdateService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle object update requests.

    The object path comes from the ``{path+}`` path parameter and the new
    content from the JSON body (``file`` and optional ``content_type``).
    """
    logger.info(
        "Received object update request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "request_id": getattr(context, "aws_request_id", None),
            "function_name": getattr(context, "function_name", None),
            "remaining_time_ms": context.get_remaining_time_in_millis()
            if hasattr(context, "get_remaining_time_in_millis")
            else None,
        },
    )

    path_params = event.get("pathParameters") or {}

    try:
        body = json.loads(event.get("body") or "{}")
    except json.JSONDecodeError:
        logger.warning("Invalid JSON body received")
        return ResponseBuilder.validation_error(message="Invalid JSON body")

    if not isinstance(body, dict):
        return ResponseBuilder.validation_error(message="Request body must be a JSON object")

    try:
        request = validate_request(
            ObjectUpdateRequest,
            {**body, "path": path_params.get("path")},
        )
    except ValidationError as exc:
        logger.error(
            "Request validation failed",
            extra={"errors": exc.errors()},
        )
        return ResponseBuilder.validation_error(
            message="Invalid request payload",
            details={"errors": sanitize_validation_errors(exc.errors())},
        )

    requester = requester_from_event(event)

    try:
        result = UpdateService().update_object(
            requester=requester,
            path=request.path,
            file_data=decode_file(request.file),
            content_type=request.content_type,
        )
    except StorageServiceError as exc:
        logger.warning(
            "Object update rejected",
            extra={
                "user_id": requester.user_id,
                "path": request.path,
                "error_code": exc.error_code,
            },
        )
        return ResponseBuilder.from_service_error(exc)

    response = ObjectUpdateResponse(
        path=result["path"],
        owner_id=result["owner_id"],
        mime_type=result["mime_type"],
        size=result["size"],
        updated_at=result["updated_at"],
        message="File updated successfully",
    )

    return ResponseBuilder.ok(response.model_dump())
