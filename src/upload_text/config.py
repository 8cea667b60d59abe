# src/upload_text/config.py
"""
Configuration for the upload Lambda.

Environment:
  - AWS_MOCK_FLAG  (presence selects the canned mock backend)
  - BUCKET_NAME    (target bucket, required before upload)
  - LOCAL_FLAG     (non-empty selects the local emulator, empty selects AWS)
  - LOG_LEVEL      (defaults to DEBUG)

The environment is read once per process. The storage backend is resolved
from it into an explicit StorageBackend value that is handed to the client
factory, so nothing downstream touches os.environ.
"""
from enum import Enum
from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError

# ----------------------------
# Constants
# ----------------------------
REGION = "ap-northeast-1"
LOCAL_ENDPOINT = "http://host.docker.internal:8000"
MOCK_FIXTURE = "s3_test.json"


# ----------------------------
# Settings
# ----------------------------
class Settings(BaseSettings):
    aws_mock_flag: Optional[str] = Field(default=None, validation_alias="AWS_MOCK_FLAG")
    bucket_name: Optional[str] = Field(default=None, validation_alias="BUCKET_NAME")
    local_flag: Optional[str] = Field(default=None, validation_alias="LOCAL_FLAG")
    log_level: str = Field(default="DEBUG", validation_alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Settings for this process, read from the environment on first use."""
    return Settings()


# ----------------------------
# Storage backend selection
# ----------------------------
class BackendKind(str, Enum):
    MOCK = "mock"
    LOCAL = "local"
    CLOUD = "cloud"


class StorageBackend(BaseModel):
    """Where S3 requests go: canned fixture, local emulator or AWS."""

    model_config = ConfigDict(frozen=True)

    kind: BackendKind
    region: str = REGION
    endpoint_url: Optional[str] = None
    fixture: Optional[str] = None


def resolve_backend(settings: Settings) -> StorageBackend:
    """
    Map the mock/local flags onto a backend.

    Every combination is defined: the mock flag wins whenever it is present,
    otherwise LOCAL_FLAG must be set (possibly to an empty string).
    """
    if settings.aws_mock_flag is not None:
        return StorageBackend(kind=BackendKind.MOCK, fixture=MOCK_FIXTURE)

    if settings.local_flag is None:
        raise ConfigurationError(
            "LOCAL_FLAG is not set (use an empty value to target AWS)"
        )

    if settings.local_flag != "":
        return StorageBackend(kind=BackendKind.LOCAL, endpoint_url=LOCAL_ENDPOINT)

    return StorageBackend(kind=BackendKind.CLOUD)


def require_bucket(settings: Settings) -> str:
    if not settings.bucket_name:
        raise ConfigurationError("BUCKET_NAME is not set")
    return settings.bucket_name
