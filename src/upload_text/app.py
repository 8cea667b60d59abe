# src/upload_text/app.py
"""
Store a text body in S3 (Lambda: upload_text.app.handler)

Flow:
  1. Parse textBody from the event
  2. Validate: present, at most 100 UTF-8 bytes
  3. Resolve the bucket and the S3 client (mock / local / AWS)
  4. put_object BUCKET/test.txt (public-read)
  5. Return {"message": "Succeeded."}

Validation failures raise with "[400] ..." messages. Configuration and S3
errors propagate as-is and the invocation fails.

Environment:
  - BUCKET_NAME
  - AWS_MOCK_FLAG
  - LOCAL_FLAG
  - LOG_LEVEL
"""
import logging
from typing import Any, Callable, Dict

import structlog

from .config import Settings, get_settings, require_bucket
from .errors import EmptyTextBody, TextBodyTooLong
from .models import UploadRequest, UploadResponse
from .storage import get_s3_client, upload_text
from .validation import MAX_TEXT_BYTES, validate_text


# ----------------------------
# Logging
# ----------------------------
def configure_logging(level: str = "DEBUG") -> None:
    """JSON logs on top of stdlib logging, which Lambda ships to CloudWatch."""
    log_level = getattr(logging, level.upper(), logging.DEBUG)
    logging.basicConfig(format="%(message)s", level=log_level)
    logging.getLogger().setLevel(log_level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


configure_logging(get_settings().log_level)
logger = structlog.get_logger(__name__)


# ----------------------------
# Request processing
# ----------------------------
def process_event(
    event: Dict[str, Any],
    request_id: str,
    settings: Settings,
    client_factory: Callable[[], Any] = get_s3_client,
) -> Dict[str, Any]:
    """
    Validate, upload and build the response for one invocation.

    The client is only requested once the text has passed validation, so a
    bad request is rejected even when the storage backend is misconfigured.
    """
    log = logger.bind(request_id=request_id)
    request = UploadRequest.from_event(event)

    try:
        text = validate_text(request.text_body)
    except EmptyTextBody:
        log.error("empty_text_body")
        raise
    except TextBodyTooLong:
        log.error("text_body_too_long", max_bytes=MAX_TEXT_BYTES)
        raise

    s3_client = client_factory()
    bucket = require_bucket(settings)

    try:
        upload_text(s3_client, bucket, text)
    except Exception as e:
        log.error("upload_failed", bucket=bucket, error=str(e), error_type=type(e).__name__)
        raise

    log.info("text_uploaded", bucket=bucket, text_bytes=len(text.encode("utf-8")))
    return UploadResponse().model_dump()


# ----------------------------
# Lambda handler
# ----------------------------
def handler(event, context):
    """
    Lambda entry point.

    The correlation id is the Lambda request id; local callers without a
    context are logged as "unknown".
    """
    request_id = getattr(context, "aws_request_id", None) or "unknown"
    return process_event(event, request_id, get_settings())
