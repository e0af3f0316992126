"""
Lambda handler responsible for object deletion.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from core.auth.requester import requester_from_event
from core.models.errors import StorageServiceError
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.validators import sanitize_validation_errors, validate_request

from .models import DeleteObjectRequest, DeleteObjectResponse
from .service import DeleteService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle object deletion requests.

    This function:
    - Extracts the object path from API Gateway path parameters
    - Validates the incoming request payload
    - Delegates deletion to the service layer
    - Translates domain errors into HTTP responses

    Args:
        event: API Gateway Lambda proxy event
        context: AWS Lambda execution context

    Returns:
        API Gateway-compatible HTTP response
    """
    logger.info(
        "Received object delete request",
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
        request = validate_request(
            DeleteObjectRequest,
            {"path": path_params.get("path")},
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
        delete_result = DeleteService().delete_object(
            requester=requester,
            path=request.path,
        )
    except StorageServiceError as exc:
        logger.warning(
            "Deletion rejected",
            extra={"path": request.path, "error_code": exc.error_code},
        )
        return ResponseBuilder.from_service_error(exc)

    response = DeleteObjectResponse(
        path=delete_result["path"],
        message="File deleted successfully",
        deleted_at=delete_result["deleted_at"],
    )

    return ResponseBuilder.ok(response.model_dump())
