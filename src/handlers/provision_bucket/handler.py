"""
Lambda handler that provisions the parts image bucket during deployment.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.infrastructure.aws.bucket_provisioner import S3BucketProvisioner
from core.models.bucket import SALVAGE_PARTS_BUCKET
from core.models.errors import BucketProvisioningError
from core.utils.response import ResponseBuilder

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """Create the bucket if absent. Running it again changes nothing."""
    logger.info(
        "Received bucket provisioning request",
        extra={
            "bucket_id": SALVAGE_PARTS_BUCKET.id,
            "request_id": getattr(context, "aws_request_id", None),
        },
    )

    provisioner = S3BucketProvisioner()

    try:
        created = provisioner.ensure_bucket(SALVAGE_PARTS_BUCKET)
    except BucketProvisioningError as exc:
        logger.exception("Bucket provisioning failed")
        return ResponseBuilder.from_service_error(exc)

    return ResponseBuilder.ok(
        {
            "bucket_id": SALVAGE_PARTS_BUCKET.id,
            "bucket": provisioner.bucket_name_for(SALVAGE_PARTS_BUCKET),
            "created": created,
            "public": SALVAGE_PARTS_BUCKET.public,
            "file_size_limit": SALVAGE_PARTS_BUCKET.file_size_limit,
            "allowed_mime_types": sorted(SALVAGE_PARTS_BUCKET.allowed_mime_types),
        }
    )
