import base64
import json
from collections.abc import Callable
from typing import Any

import pytest

from image_uploads.handlers.list_uploads.service import ListService
from image_uploads.handlers.upload_image.service import UploadService


@pytest.fixture
def upload_service(s3_storage, metadata_repository) -> UploadService:
    """UploadService wired to the mocked bucket and in-memory database."""
    return UploadService(storage=s3_storage, metadata=metadata_repository)


@pytest.fixture
def list_service(metadata_repository) -> ListService:
    return ListService(metadata=metadata_repository)


@pytest.fixture
def upload_event(sample_image_binary) -> Callable[..., dict[str, Any]]:
    """
    Build an API Gateway upload event.

    Usage:
        event = upload_event(fileName="cat.png", contentType="image/png")
    """

    def _build(**overrides: Any) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "file": base64.b64encode(sample_image_binary).decode(),
            "fileName": "photo.png",
            "contentType": "image/png",
            **overrides,
        }
        return {"httpMethod": "POST", "path": "/uploads", "body": json.dumps(payload)}

    return _build


@pytest.fixture
def list_event() -> Callable[..., dict[str, Any]]:
    def _build(**params: str) -> dict[str, Any]:
        return {
            "httpMethod": "GET",
            "path": "/uploads",
            "queryStringParameters": params or None,
        }

    return _build
