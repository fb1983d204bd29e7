"""Explicit configuration objects for storage and database adapters.

Adapters receive these objects in their constructors; only `from_env`
reads the process environment.
"""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field

from image_uploads.core.models.errors import ConfigurationError
from image_uploads.core.utils.constants import (
    DEFAULT_STORAGE_REGION,
    ENV_CLOUDFLARE_ACCOUNT_ID,
    ENV_DATABASE_ECHO,
    ENV_DATABASE_URL,
    ENV_STORAGE_ACCESS_KEY_ID,
    ENV_STORAGE_BUCKET,
    ENV_STORAGE_ENDPOINT_URL,
    ENV_STORAGE_PUBLIC_URL,
    ENV_STORAGE_REGION,
    ENV_STORAGE_SECRET_ACCESS_KEY,
    R2_ENDPOINT_TEMPLATE,
)


def _require_env(name: str) -> str:
    value = os.getenv(name)
    if not value:
        raise ConfigurationError(
            message=f"{name} environment variable is not set",
            details={"variable": name},
        )
    return value


class StorageConfig(BaseModel):
    """Object storage settings (S3 or Cloudflare R2)."""

    model_config = ConfigDict(frozen=True)

    bucket: str = Field(..., min_length=1)
    public_url: str = Field(..., min_length=1)
    endpoint_url: str | None = None
    region: str = DEFAULT_STORAGE_REGION
    access_key_id: str | None = None
    secret_access_key: str | None = Field(None, repr=False)

    @classmethod
    def from_env(cls) -> StorageConfig:
        endpoint_url = os.getenv(ENV_STORAGE_ENDPOINT_URL)
        account_id = os.getenv(ENV_CLOUDFLARE_ACCOUNT_ID)
        if not endpoint_url and account_id:
            endpoint_url = R2_ENDPOINT_TEMPLATE.format(account_id=account_id)

        return cls(
            bucket=_require_env(ENV_STORAGE_BUCKET),
            public_url=_require_env(ENV_STORAGE_PUBLIC_URL),
            endpoint_url=endpoint_url,
            region=os.getenv(ENV_STORAGE_REGION) or DEFAULT_STORAGE_REGION,
            access_key_id=os.getenv(ENV_STORAGE_ACCESS_KEY_ID),
            secret_access_key=os.getenv(ENV_STORAGE_SECRET_ACCESS_KEY),
        )


class DatabaseConfig(BaseModel):
    """Relational database settings."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(..., min_length=1)
    echo: bool = False

    @classmethod
    def from_env(cls) -> DatabaseConfig:
        echo = (os.getenv(ENV_DATABASE_ECHO) or "").lower() in {"1", "true", "yes"}
        return cls(url=_require_env(ENV_DATABASE_URL), echo=echo)
