"""Idempotent provisioning of the storage bucket."""

import json
import os
from typing import Any

from aws_lambda_powertools import Logger
from botocore.exceptions import ClientError

from core.infrastructure.adapters.s3_adapter import create_s3_client
from core.models.bucket import BucketConfig
from core.models.errors import BucketProvisioningError
from core.utils.constants import ENV_AWS_REGION, ENV_STORAGE_BUCKET_NAME

logger = Logger(UTC=True)

MISSING_BUCKET_CODES = frozenset({"404", "NoSuchBucket", "NotFound"})
DEFAULT_REGION = "us-east-1"


class S3BucketProvisioner:
    """Create the storage bucket if absent and keep its configuration applied."""

    def __init__(self, client: Any | None = None, bucket_name: str | None = None) -> None:
        self._client = client or create_s3_client()
        self._bucket_name = bucket_name

    def bucket_name_for(self, config: BucketConfig) -> str:
        return self._bucket_name or os.getenv(ENV_STORAGE_BUCKET_NAME) or config.id

    def bucket_exists(self, bucket_name: str) -> bool:
        try:
            self._client.head_bucket(Bucket=bucket_name)
            return True
        except ClientError as exc:
            if exc.response.get("Error", {}).get("Code") in MISSING_BUCKET_CODES:
                return False

            logger.error("Unable to inspect bucket", extra={"bucket": bucket_name})
            raise BucketProvisioningError(
                message="Unable to inspect storage bucket",
                details={"bucket": bucket_name},
            ) from exc

    def ensure_bucket(self, config: BucketConfig) -> bool:
        """Provision the bucket described by ``config``.

        Tags and the public-read policy are applied on every run, so a bucket
        left unconfigured by an earlier failure is repaired.

        Returns:
            True if the bucket was created, False if it already existed

        Raises:
            BucketProvisioningError: If the bucket cannot be inspected, created or configured
        """
        bucket_name = self.bucket_name_for(config)
        created = False

        if self.bucket_exists(bucket_name):
            logger.info("Bucket already exists", extra={"bucket": bucket_name})
        else:
            created = self._create_if_absent(bucket_name, config)

        try:
            self._tag_bucket(bucket_name, config)
            if config.public:
                self._allow_public_read(bucket_name)
        except ClientError as exc:
            logger.error("Bucket configuration failed", extra={"bucket": bucket_name})
            raise BucketProvisioningError(
                message="Unable to configure storage bucket",
                details={"bucket": bucket_name},
            ) from exc

        logger.info("Bucket provisioned", extra={"bucket": bucket_name, "created": created})
        return created

    def _create_if_absent(self, bucket_name: str, config: BucketConfig) -> bool:
        logger.info(
            "Creating bucket",
            extra={
                "bucket": bucket_name,
                "public": config.public,
                "file_size_limit": config.file_size_limit,
            },
        )

        try:
            self._create_bucket(bucket_name)
        except ClientError as exc:
            if exc.response.get("Error", {}).get("Code") == "BucketAlreadyOwnedByYou":
                logger.info("Bucket created concurrently", extra={"bucket": bucket_name})
                return False

            logger.error("Bucket creation failed", extra={"bucket": bucket_name})
            raise BucketProvisioningError(
                message="Unable to create storage bucket",
                details={"bucket": bucket_name},
            ) from exc

        return True

    def _create_bucket(self, bucket_name: str) -> None:
        region = os.getenv(ENV_AWS_REGION) or DEFAULT_REGION
        kwargs: dict[str, Any] = {"Bucket": bucket_name}

        # us-east-1 rejects an explicit location constraint
        if region != DEFAULT_REGION:
            kwargs["CreateBucketConfiguration"] = {"LocationConstraint": region}

        self._client.create_bucket(**kwargs)

    def _tag_bucket(self, bucket_name: str, config: BucketConfig) -> None:
        self._client.put_bucket_tagging(
            Bucket=bucket_name,
            Tagging={
                "TagSet": [
                    {"Key": "bucket_id", "Value": config.id},
                    {"Key": "display_name", "Value": config.name},
                    {"Key": "file_size_limit", "Value": str(config.file_size_limit)},
                    {
                        "Key": "allowed_mime_types",
                        "Value": " ".join(sorted(config.allowed_mime_types)),
                    },
                ]
            },
        )

    def _allow_public_read(self, bucket_name: str) -> None:
        self._client.put_public_access_block(
            Bucket=bucket_name,
            PublicAccessBlockConfiguration={
                "BlockPublicAcls": True,
                "IgnorePublicAcls": True,
                "BlockPublicPolicy": False,
                "RestrictPublicBuckets": False,
            },
        )
        self._client.put_bucket_policy(
            Bucket=bucket_name,
            Policy=json.dumps(
                {
                    "Version": "2012-10-17",
                    "Statement": [
                        {
                            "Sid": "PublicReadObjects",
                            "Effect": "Allow",
                            "Principal": "*",
                            "Action": "s3:GetObject",
                            "Resource": f"arn:aws:s3:::{bucket_name}/*",
                        }
                    ],
                }
            ),
        )
