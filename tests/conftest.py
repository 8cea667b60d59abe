# =============================================================================
# Upload Text - Shared Test Fixtures
# =============================================================================
from types import SimpleNamespace

import boto3
import pytest

from upload_text.config import get_settings
from upload_text.storage import get_s3_client

ENV_VARS = ("AWS_MOCK_FLAG", "BUCKET_NAME", "LOCAL_FLAG", "LOG_LEVEL")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test with no upload-related env vars and empty caches."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    get_s3_client.cache_clear()
    yield
    get_settings.cache_clear()
    get_s3_client.cache_clear()


@pytest.fixture
def mock_env(monkeypatch):
    """Mock backend with a bucket configured."""
    monkeypatch.setenv("AWS_MOCK_FLAG", "1")
    monkeypatch.setenv("BUCKET_NAME", "test-bucket")


@pytest.fixture
def lambda_context():
    return SimpleNamespace(aws_request_id="req-0001")


@pytest.fixture
def s3_client():
    """Plain S3 client for use with botocore's Stubber."""
    return boto3.client(
        "s3",
        region_name="ap-northeast-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )
