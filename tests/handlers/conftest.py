import base64
import json
from collections.abc import Callable
from types import SimpleNamespace
from typing import Any

import pytest


@pytest.fixture
def lambda_context():
    return SimpleNamespace(
        aws_request_id="test-request-id",
        function_name="test-function",
        memory_limit_in_mb=256,
        invoked_function_arn="arn:aws:lambda:us-east-1:000000000000:function:test",
        log_group_name="/aws/lambda/test-function",
        log_stream_name="2024/01/01/[$LATEST]test",
        get_remaining_time_in_millis=lambda: 30000,
    )


def authorizer(user_id: str | None) -> dict[str, Any]:
    if user_id is None:
        return {}
    return {"authorizer": {"claims": {"sub": user_id}}}


@pytest.fixture
def api_event() -> Callable[..., dict[str, Any]]:
    """
    Build an API Gateway proxy event.

    Usage:
        event = api_event("GET", user_id="u1", path="u1/photo.png")
    """

    def _build(
        method: str,
        *,
        user_id: str | None = "u1",
        path: str | None = None,
        query: dict[str, str] | None = None,
        body: dict[str, Any] | str | None = None,
    ) -> dict[str, Any]:
        event: dict[str, Any] = {
            "httpMethod": method,
            "path": f"/v1/objects/{path}" if path else "/v1/objects",
            "pathParameters": {"path": path} if path is not None else None,
            "queryStringParameters": query,
            "headers": {"Content-Type": "application/json"},
            "requestContext": authorizer(user_id),
        }
        if body is not None:
            event["body"] = body if isinstance(body, str) else json.dumps(body)
        return event

    return _build


@pytest.fixture
def encode() -> Callable[[bytes], str]:
    def _encode(data: bytes) -> str:
        return base64.b64encode(data).decode("utf-8")

    return _encode