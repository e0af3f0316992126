#!/usr/bin/env python3
"""
Provision the parts image bucket against AWS or LocalStack.

Run:
    python seed/provision_bucket.py \
      --endpoint-url http://localhost:4566 \
      --bucket-name salvage-parts
"""

import argparse
import os
import sys

from aws_lambda_powertools import Logger

from core.infrastructure.aws.bucket_provisioner import S3BucketProvisioner
from core.models.bucket import SALVAGE_PARTS_BUCKET
from core.models.errors import BucketProvisioningError
from core.utils.constants import ENV_AWS_ENDPOINT_URL, ENV_AWS_REGION

logger = Logger(service="provision")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create the parts image bucket if absent")

    parser.add_argument(
        "--endpoint-url",
        default=None,
        help="S3 endpoint override (e.g. LocalStack)",
    )
    parser.add_argument(
        "--region",
        default=None,
        help="AWS region for the bucket",
    )
    parser.add_argument(
        "--bucket-name",
        default=None,
        help="Physical bucket name (defaults to STORAGE_BUCKET_NAME or the bucket id)",
    )

    return parser.parse_args()


def provision_bucket() -> None:
    args = parse_args()

    if args.endpoint_url:
        os.environ[ENV_AWS_ENDPOINT_URL] = args.endpoint_url
    if args.region:
        os.environ[ENV_AWS_REGION] = args.region

    provisioner = S3BucketProvisioner(bucket_name=args.bucket_name)
    bucket_name = provisioner.bucket_name_for(SALVAGE_PARTS_BUCKET)

    logger.info(
        "Provisioning bucket",
        extra={"bucket_id": SALVAGE_PARTS_BUCKET.id, "bucket": bucket_name},
    )

    try:
        created = provisioner.ensure_bucket(SALVAGE_PARTS_BUCKET)
    except BucketProvisioningError as exc:
        logger.error(
            "Bucket provisioning failed",
            extra={"error": exc.message, "details": exc.details},
        )
        sys.exit(1)

    if created:
        logger.info("Bucket created", extra={"bucket": bucket_name})
    else:
        logger.info("Bucket already present, nothing to do", extra={"bucket": bucket_name})


if __name__ == "__main__":
    provision_bucket()
