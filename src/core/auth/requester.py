"""Requester identity resolved from the API Gateway authorizer context."""

from typing import Any, Literal

from aws_lambda_powertools import Logger
from pydantic import BaseModel, ConfigDict

logger = Logger(UTC=True)

ROLE_AUTHENTICATED = "authenticated"
ROLE_ANONYMOUS = "anon"


class Requester(BaseModel):
    """Identity of the caller performing a storage operation."""

    model_config = ConfigDict(frozen=True)

    user_id: str | None = None
    email: str | None = None
    role: Literal["authenticated", "anon"] = ROLE_ANONYMOUS

    @property
    def is_authenticated(self) -> bool:
        return self.role == ROLE_AUTHENTICATED and bool(self.user_id)

    @classmethod
    def anonymous(cls) -> "Requester":
        return cls()

    @classmethod
    def authenticated(cls, user_id: str, email: str | None = None) -> "Requester":
        return cls(user_id=user_id, email=email, role=ROLE_AUTHENTICATED)


def _claims_from_authorizer(authorizer: dict[str, Any]) -> dict[str, Any]:
    # REST API (Cognito / JWT authorizer)
    claims = authorizer.get("claims")
    if isinstance(claims, dict):
        return claims

    # HTTP API (JWT authorizer)
    jwt = authorizer.get("jwt")
    if isinstance(jwt, dict) and isinstance(jwt.get("claims"), dict):
        return jwt["claims"]

    return {}


def requester_from_event(event: dict[str, Any]) -> Requester:
    """Resolve the requester from an API Gateway proxy event.

    Identity sources, in order:
    - ``requestContext.authorizer.claims.sub`` (REST API JWT authorizer)
    - ``requestContext.authorizer.jwt.claims.sub`` (HTTP API JWT authorizer)
    - ``requestContext.authorizer.principalId`` (Lambda authorizer)

    A missing or blank identity yields an anonymous requester. Any other
    identity is kept exactly as issued.
    """
    request_context = event.get("requestContext") or {}
    authorizer = request_context.get("authorizer") or {}

    if not isinstance(authorizer, dict):
        return Requester.anonymous()

    claims = _claims_from_authorizer(authorizer)
    user_id = claims.get("sub") or authorizer.get("principalId")

    if not isinstance(user_id, str) or not user_id.strip():
        logger.debug("No requester identity in authorizer context")
        return Requester.anonymous()

    email = claims.get("email")
    return Requester.authenticated(
        user_id=user_id,
        email=email if isinstance(email, str) else None,
    )
