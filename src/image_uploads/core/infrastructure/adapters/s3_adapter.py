"""Thin adapter for interacting with S3-compatible object storage."""

from collections.abc import Mapping
from typing import Any, BinaryIO, Protocol

import boto3
from botocore.config import Config

from image_uploads.core.config import StorageConfig


class _Boto3S3Client(Protocol):
    """Internal typing for boto3 S3 client (AWS-facing only)."""

    def upload_fileobj(
        self,
        Fileobj: BinaryIO,
        Bucket: str,
        Key: str,
        ExtraArgs: Mapping[str, Any] | None = None,
    ) -> None: ...

    def delete_object(
        self,
        *,
        Bucket: str,
        Key: str,
    ) -> Any: ...


class S3AdapterProtocol(Protocol):
    """Minimal S3 adapter protocol (repository-facing)."""

    def upload_fileobj(
        self,
        *,
        key: str,
        fileobj: BinaryIO,
        content_type: str,
    ) -> None: ...

    def delete_object(self, *, key: str) -> None: ...


class S3Adapter:
    """Low-level S3 operations (mechanical, no error handling).

    This adapter:
    - Wraps boto3 S3 client built from an explicit StorageConfig
    - Does NOT handle errors (lets them bubble up)
    - Domain implementations catch and translate errors
    """

    def __init__(self, config: StorageConfig) -> None:
        """Create S3 client from the given storage configuration."""
        self._bucket = config.bucket
        self._client: _Boto3S3Client = boto3.client(
            "s3",
            endpoint_url=config.endpoint_url,
            region_name=config.region,
            aws_access_key_id=config.access_key_id,
            aws_secret_access_key=config.secret_access_key,
            # Single attempt: retry policy belongs to the caller.
            config=Config(retries={"max_attempts": 1, "mode": "standard"}),
        )

    def upload_fileobj(
        self,
        *,
        key: str,
        fileobj: BinaryIO,
        content_type: str,
    ) -> None:
        """Stream a file-like object to S3 using the managed transfer.

        Raises boto3 exceptions - caught by domain implementation.
        """
        self._client.upload_fileobj(
            fileobj,
            self._bucket,
            key,
            ExtraArgs={"ContentType": content_type},
        )

    def delete_object(self, *, key: str) -> None:
        """Delete object from S3.

        Raises boto3 exceptions - caught by domain implementation.
        """
        self._client.delete_object(
            Bucket=self._bucket,
            Key=key,
        )
