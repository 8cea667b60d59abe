# src/upload_text/storage.py
"""
S3 client construction and the upload itself.

Flow:
  1. build_s3_client() turns a StorageBackend into a boto3 S3 client
  2. upload_text() writes the text to BUCKET/test.txt as public-read

In mock mode the client never leaves the process: every request is answered
from a recorded response in mock_data/.
"""
import io
import json
from functools import lru_cache
from importlib import resources
from typing import Any, Dict, List, Optional

import boto3
import structlog
from botocore.awsrequest import AWSPreparedRequest, AWSResponse
from botocore.config import Config

from .config import BackendKind, StorageBackend, get_settings, resolve_backend

logger = structlog.get_logger(__name__)

OBJECT_KEY = "test.txt"
OBJECT_ACL = "public-read"


# ----------------------------
# Mock backend
# ----------------------------
class _CannedBody(io.BytesIO):
    """Raw body object in the shape AWSResponse expects."""

    def stream(self, **kwargs):
        contents = self.read()
        while contents:
            yield contents
            contents = self.read()


class CannedResponder:
    """
    before-send hook that short-circuits the HTTP layer.

    Returning a response from before-send makes botocore skip the real
    send, so the same recorded response is served for every request.
    With record=True sent requests are kept in `requests`.
    """

    def __init__(self, status_code: int, headers: Dict[str, str], body: bytes, record: bool = False):
        self.status_code = status_code
        self.headers = headers
        self.body = body
        self.record = record
        self.requests: List[AWSPreparedRequest] = []

    @classmethod
    def from_fixture(cls, name: str, record: bool = False) -> "CannedResponder":
        raw = resources.files(__package__).joinpath("mock_data", name).read_text(encoding="utf-8")
        data = json.loads(raw)
        return cls(
            status_code=int(data.get("status_code", 200)),
            headers=data.get("headers") or {},
            body=(data.get("body") or "").encode("utf-8"),
            record=record,
        )

    def __call__(self, request: AWSPreparedRequest, **kwargs) -> AWSResponse:
        if self.record:
            self.requests.append(request)
        logger.debug("mock_s3_request", method=request.method, url=request.url)
        return AWSResponse(request.url, self.status_code, dict(self.headers), _CannedBody(self.body))


# ----------------------------
# Client factory
# ----------------------------
def build_s3_client(backend: StorageBackend, responder: Optional[CannedResponder] = None):
    """
    Create an S3 client for the given backend. No network I/O happens here.

    `responder` overrides the fixture-backed responder in mock mode.
    """
    if backend.kind is BackendKind.MOCK:
        responder = responder or CannedResponder.from_fixture(backend.fixture)
        client = boto3.client(
            "s3",
            region_name=backend.region,
            aws_access_key_id="mock-access-key",
            aws_secret_access_key="mock-secret-key",
        )
        client.meta.events.register("before-send.s3", responder)
    elif backend.kind is BackendKind.LOCAL:
        # Emulators only serve path-style bucket URLs
        client = boto3.client(
            "s3",
            region_name=backend.region,
            endpoint_url=backend.endpoint_url,
            config=Config(s3={"addressing_style": "path"}),
        )
    else:
        client = boto3.client("s3", region_name=backend.region)

    logger.debug(
        "s3_client_created",
        backend=backend.kind.value,
        region=backend.region,
        endpoint_url=client.meta.endpoint_url,
    )
    return client


@lru_cache
def get_s3_client():
    """S3 client for this process, resolved from the environment once."""
    return build_s3_client(resolve_backend(get_settings()))


# ----------------------------
# Upload
# ----------------------------
def upload_text(client, bucket: str, text: str) -> Dict[str, Any]:
    """
    Store text as BUCKET/test.txt, readable by anyone.

    The key is fixed, so each call overwrites the previous object.
    botocore errors are not caught here.
    """
    return client.put_object(
        Bucket=bucket,
        Key=OBJECT_KEY,
        Body=text.encode("utf-8"),
        ACL=OBJECT_ACL,
    )
