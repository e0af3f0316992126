"""Thin adapter for interacting with Amazon S3."""

from collections.abc import Iterator, Mapping
import os
from typing import Any, Protocol
from urllib.parse import quote

import boto3

from core.utils.constants import (
    ENV_AWS_ENDPOINT_URL,
    ENV_AWS_REGION,
    ENV_STORAGE_BUCKET_NAME,
    SALVAGE_PARTS_BUCKET_ID,
)


class S3AdapterProtocol(Protocol):
    """Minimal S3 adapter protocol (repository-facing)."""

    bucket: str

    def put_object(
        self,
        *,
        key: str,
        body: bytes,
        content_type: str,
        metadata: dict[str, str],
        if_none_match: str | None = None,
    ) -> None: ...

    def head_object(self, *, key: str) -> Mapping[str, Any]: ...

    def delete_object(self, *, key: str) -> None: ...

    def iter_objects(self, *, prefix: str) -> Iterator[Mapping[str, Any]]: ...

    def generate_presigned_url(
        self,
        *,
        method: str,
        params: dict[str, Any],
        expires_in: int,
    ) -> str: ...

    def public_url(self, *, key: str) -> str: ...


def create_s3_client() -> Any:
    """Create a boto3 S3 client from environment configuration."""
    return boto3.client(
        "s3",
        endpoint_url=os.getenv(ENV_AWS_ENDPOINT_URL),
        region_name=os.getenv(ENV_AWS_REGION),
    )


def resolve_bucket_name() -> str:
    """Physical bucket name, defaulting to the declared bucket id."""
    return os.getenv(ENV_STORAGE_BUCKET_NAME) or SALVAGE_PARTS_BUCKET_ID


class S3Adapter:
    """Low-level S3 operations (mechanical, no error handling).

    This adapter:
    - Wraps boto3 S3 client
    - Does NOT handle errors (lets them bubble up)
    - Domain implementations catch and translate errors
    """

    def __init__(self, bucket: str | None = None, client: Any | None = None) -> None:
        self.bucket = bucket or resolve_bucket_name()
        self._client = client or create_s3_client()

    def put_object(
        self,
        *,
        key: str,
        body: bytes,
        content_type: str,
        metadata: dict[str, str],
        if_none_match: str | None = None,
    ) -> None:
        """Store object in S3.
        Raises boto3 exceptions - caught by domain implementation.
        """
        kwargs: dict[str, Any] = {
            "Bucket": self.bucket,
            "Key": key,
            "Body": body,
            "ContentType": content_type,
            "Metadata": metadata,
        }
        if if_none_match:
            kwargs["IfNoneMatch"] = if_none_match

        self._client.put_object(**kwargs)

    def head_object(self, *, key: str) -> Mapping[str, Any]:
        """Fetch object attributes without the body."""
        response: Mapping[str, Any] = self._client.head_object(
            Bucket=self.bucket,
            Key=key,
        )
        return response

    def delete_object(self, *, key: str) -> None:
        """Delete object from S3.
        Raises boto3 exceptions - caught by domain implementation.
        """
        self._client.delete_object(
            Bucket=self.bucket,
            Key=key,
        )

    def iter_objects(self, *, prefix: str) -> Iterator[Mapping[str, Any]]:
        """Yield every object under a prefix, following continuation tokens."""
        paginator = self._client.get_paginator("list_objects_v2")
        for page in paginator.paginate(Bucket=self.bucket, Prefix=prefix):
            yield from page.get("Contents", [])

    def generate_presigned_url(
        self,
        *,
        method: str,
        params: dict[str, Any],
        expires_in: int,
    ) -> str:
        """Generate a pre-signed S3 URL."""
        url: str = self._client.generate_presigned_url(
            ClientMethod=method,
            Params={**params, "Bucket": self.bucket},
            ExpiresIn=expires_in,
        )
        return url

    def public_url(self, *, key: str) -> str:
        """Unsigned URL of an object in a publicly readable bucket."""
        base_url: str = self._client.meta.endpoint_url
        return f"{base_url.rstrip('/')}/{self.bucket}/{quote(key, safe='/')}"
