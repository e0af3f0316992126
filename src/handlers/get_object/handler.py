"""
Lambda handler responsible for object view and download URLs.
"""

from typing import Any, Literal

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from core.auth.requester import requester_from_event
from core.models.errors import StorageServiceError
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.validators import sanitize_validation_errors, validate_request

from .models import GetObjectRequest, ObjectAttributes
from .service import GetService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle object view or download requests.

    This function:
     - Default: return view URL
        - download=true: return download URL
        - metadata=true: include object attributes in response
    Args:
        event: API Gateway event payload.
        context: AWS Lambda runtime context.

    Returns:
        API Gateway-compatible response dictionary.
    """
    logger.info(
        "Received object view/download request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "query_params": event.get("queryStringParameters"),
            "request_id": getattr(context, "aws_request_id", None),
            "function_name": getattr(context, "function_name", None),
            "remaining_time_ms": context.get_remaining_time_in_millis()
            if hasattr(context, "get_remaining_time_in_millis")
            else None,
        },
    )

    path_params = event.get("pathParameters") or {}
    query_params = event.get("queryStringParameters") or {}

    params = {
        "path": path_params.get("path"),
        "metadata": query_params.get("metadata", "false").lower() == "true",
        "download": query_params.get("download", "false").lower() == "true",
    }

    try:
        request = validate_request(GetObjectRequest, params)
    except ValidationError as exc:
        logger.error(
            "Request validation failed",
            extra={"errors": exc.errors()},
        )
        return ResponseBuilder.validation_error(
            message="Invalid request params",
            details={"errors": sanitize_validation_errors(exc.errors())},
        )

    requester = requester_from_event(event)
    mode: Literal["view", "download"] = "download" if request.download else "view"

    try:
        url, public_url, info = GetService().generate_object_url(
            requester=requester,
            path=request.path,
            mode=mode,
        )
    except StorageServiceError as exc:
        logger.warning(
            "Get object failed",
            extra={"path": request.path, "error_code": exc.error_code},
        )
        return ResponseBuilder.from_service_error(exc)

    response_body: dict[str, Any] = {
        "path": request.path,
        "mode": mode,
        "url": url,
        "public_url": public_url,
    }

    if request.metadata:
        response_body["metadata"] = ObjectAttributes(
            path=info.path,
            owner_id=info.owner_id,
            mime_type=info.mime_type,
            size=info.size,
            etag=info.etag,
            updated_at=info.updated_at,
        ).model_dump()

    return ResponseBuilder.ok(response_body)
