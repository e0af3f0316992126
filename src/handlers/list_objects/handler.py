"""
Lambda handler responsible for listing objects with optional filtering and pagination.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from core.auth.requester import requester_from_event
from core.models.errors import StorageServiceError
from core.models.storage_object import ListObjectsResponse, ObjectSummary, PaginationInfo
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.validators import sanitize_validation_errors, validate_request

from .models import ListObjectsRequest
from .service import ListService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle requests to list objects.

    Supports:
    - Filtering by path prefix (storage-level)
    - Filtering by object name substring (in-memory)
    - Sorting and offset-based pagination

    Args:
        event: API Gateway Lambda proxy event
        context: AWS Lambda execution context

    Returns:
        API Gateway-compatible HTTP response

    """
    logger.info(
        "Received object list request",
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

    params = event.get("queryStringParameters") or {}

    try:
        request = validate_request(ListObjectsRequest, params)
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

    try:
        items, total_count, has_more = ListService().list_objects(
            requester=requester,
            prefix=request.prefix,
            name_contains=request.name_contains,
            offset=request.offset,
            limit=request.limit,
            sort_by=request.sort_by,
            sort_order=request.sort_order,
        )
    except StorageServiceError as exc:
        logger.warning(
            "Error listing objects",
            extra={"prefix": request.prefix, "error_code": exc.error_code},
        )
        return ResponseBuilder.from_service_error(exc)

    objects = [ObjectSummary.model_validate(item) for item in items]
    next_offset = request.offset + len(objects) if has_more else None

    response = ListObjectsResponse(
        objects=objects,
        total_count=total_count,
        returned_count=len(objects),
        pagination=PaginationInfo(
            limit=request.limit,
            offset=request.offset,
            has_more=has_more,
            next_offset=next_offset,
        ),
    )

    return ResponseBuilder.ok(response.model_dump())
