"""
Pytest configuration and fixtures for image-uploads tests.
Provides AWS mocking, S3 bucket, SQL database and upload factory fixtures.
"""

import os
from collections.abc import Callable, Iterator
from datetime import datetime, timedelta
from types import SimpleNamespace
from typing import Any

import boto3
import pytest
from botocore.exceptions import ClientError
from moto import mock_aws
from sqlalchemy import func, select

os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")
os.environ.setdefault("STORAGE_BUCKET", "test-uploads-bucket")
os.environ.setdefault("STORAGE_PUBLIC_URL", "https://cdn.example.com/")
os.environ.setdefault("STORAGE_REGION", "us-east-1")
os.environ.setdefault("DATABASE_URL", "sqlite://")

from image_uploads.core.config import DatabaseConfig, StorageConfig  # noqa: E402
from image_uploads.core.infrastructure.adapters.database_adapter import (  # noqa: E402
    DatabaseAdapter,
)
from image_uploads.core.infrastructure.aws.s3_file_storage import S3FileStorage  # noqa: E402
from image_uploads.core.infrastructure.sql.schema import UploadRecord  # noqa: E402
from image_uploads.core.infrastructure.sql.sql_upload_metadata import (  # noqa: E402
    SqlUploadMetadata,
)
from image_uploads.core.models.upload import Upload  # noqa: E402
from image_uploads.core.utils.time import utc_now  # noqa: E402


@pytest.fixture(scope="function")
def aws_mock():
    with mock_aws():
        yield


@pytest.fixture(scope="function")
def s3_client(aws_mock):
    """S3 client for bucket operations."""
    return boto3.client("s3", region_name=os.getenv("STORAGE_REGION"))


def _cleanup_s3_objects(s3_client, bucket_name):
    """Helper to delete all objects from S3 bucket efficiently."""
    try:
        paginator = s3_client.get_paginator("list_objects_v2")
        for page in paginator.paginate(Bucket=bucket_name):
            objects = page.get("Contents", [])
            if objects:
                delete_keys = [{"Key": obj["Key"]} for obj in objects]
                s3_client.delete_objects(
                    Bucket=bucket_name, Delete={"Objects": delete_keys}
                )
    except ClientError as e:
        if e.response["Error"]["Code"] != "NoSuchBucket":
            raise


@pytest.fixture(scope="function")
def s3_bucket(s3_client):
    """
    Create and manage S3 bucket for testing.

    Cleanup Strategy:
    - Objects are deleted after each test (teardown)
    - Bucket is NOT deleted (moto cleans up on context exit)
    """
    bucket_name = os.getenv("STORAGE_BUCKET")

    try:
        s3_client.head_bucket(Bucket=bucket_name)
    except ClientError:
        s3_client.create_bucket(Bucket=bucket_name)

    yield s3_client

    _cleanup_s3_objects(s3_client, bucket_name)


@pytest.fixture
def s3_list_keys(s3_client) -> Callable[[], list[str]]:
    """
    Helper to list every object key in the test bucket.

    Usage:
        keys = s3_list_keys()
    """

    def _list() -> list[str]:
        response = s3_client.list_objects_v2(Bucket=os.getenv("STORAGE_BUCKET"))
        return [obj["Key"] for obj in response.get("Contents", [])]

    return _list


@pytest.fixture
def storage_config() -> StorageConfig:
    return StorageConfig.from_env()


@pytest.fixture
def s3_storage(s3_bucket, storage_config) -> S3FileStorage:
    """S3FileStorage bound to the mocked bucket."""
    return S3FileStorage(storage_config)


@pytest.fixture(scope="function")
def database() -> Iterator[DatabaseAdapter]:
    """
    In-memory SQLite database with the schema created.

    Every test gets a fresh database; the engine is disposed on teardown.
    """
    adapter = DatabaseAdapter(DatabaseConfig(url="sqlite://"))
    adapter.create_schema()

    yield adapter

    adapter.dispose()


@pytest.fixture
def metadata_repository(database) -> SqlUploadMetadata:
    return SqlUploadMetadata(database)


@pytest.fixture
def make_upload(database) -> Callable[..., Upload]:
    """
    Factory inserting an upload row directly.

    Usage:
        upload = make_upload(name="cat.png")
        upload = make_upload(name="old.png", created_at=datetime(2024, 1, 1))
    """
    counter = {"value": 0}

    def _make(**overrides: Any) -> Upload:
        counter["value"] += 1
        file_name = f"file-test-{counter['value']}"
        values: dict[str, Any] = {
            "name": file_name,
            "remote_key": f"images/{file_name}",
            "remote_url": f"https://cdn.example.com/images/{file_name}",
            **overrides,
        }

        with database.session() as session:
            record = UploadRecord(**values)
            session.add(record)
            session.flush()
            session.refresh(record)
            return Upload.model_validate(record)

    return _make


@pytest.fixture
def fetch_uploads_by_name(database) -> Callable[[str], list[UploadRecord]]:
    """
    Helper to read upload rows with an exact name.

    Usage:
        rows = fetch_uploads_by_name("photo.png")
    """
    def _fetch(name: str) -> list[UploadRecord]:
        with database.session() as session:
            return list(
                session.scalars(select(UploadRecord).where(UploadRecord.name == name))
            )

    return _fetch


@pytest.fixture
def count_uploads(database) -> Callable[[], int]:
    def _count() -> int:
        with database.session() as session:
            return session.scalar(select(func.count(UploadRecord.id))) or 0

    return _count


@pytest.fixture
def lambda_context() -> SimpleNamespace:
    return SimpleNamespace(
        aws_request_id="test-request-id",
        function_name="test-function",
        memory_limit_in_mb=256,
        invoked_function_arn="arn:aws:lambda:us-east-1:000000000000:function:test",
    )


@pytest.fixture
def sample_image_binary() -> bytes:
    """Sample binary image data (1x1 PNG)."""
    import base64

    png_base64 = "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNk+M9QDwADhgGAWjR9awAAAABJRU5ErkJggg=="
    return base64.b64decode(png_base64)


@pytest.fixture
def days_ago() -> Callable[[int], datetime]:
    """Return a helper producing `today - n days` timestamps."""
    today = utc_now()

    def _days_ago(days: int) -> datetime:
        return today - timedelta(days=days)

    return _days_ago
