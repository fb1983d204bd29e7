"""Pydantic models for image upload request/response."""

import base64
import binascii

from aws_lambda_powertools import Logger
from pydantic import BaseModel, ConfigDict, Field, field_validator

from image_uploads.core.utils.constants import MAX_FILE_SIZE, get_max_file_size_mb

logger = Logger(utc=True)


class ImageUploadRequest(BaseModel):
    """Validation model for image upload request."""

    model_config = ConfigDict(populate_by_name=True)

    file: str = Field(..., description="Base64 encoded image file")
    file_name: str = Field(
        ...,
        alias="fileName",
        min_length=1,
        max_length=255,
        description="Original file name",
    )
    content_type: str = Field(
        ...,
        alias="contentType",
        min_length=1,
        description="Declared MIME type, e.g. image/png",
    )

    @field_validator("file")
    @classmethod
    def validate_file(cls, value: str) -> str:
        """
        Validate base64 file:
        - surrounding whitespace is ignored
        - must not be empty
        - must decode correctly
        - must have non-zero size
        - must not exceed MAX_FILE_SIZE
        """
        value = value.strip()
        if not value:
            raise ValueError("file must not be empty")

        try:
            file_data = base64.b64decode(value, validate=True)
        except (binascii.Error, ValueError) as e:
            logger.error(f"File validation error: Invalid base64 - {e}")
            raise ValueError("Invalid base64 encoded file") from e

        if not file_data:
            logger.error("File validation error: Decoded file is empty")
            raise ValueError("Decoded file is empty")

        if len(file_data) > MAX_FILE_SIZE:
            logger.error("File size validation error: File size exceeds limit")
            raise ValueError(f"File size exceeds {get_max_file_size_mb()}MB limit")

        return value

    def decoded_file(self) -> bytes:
        """Return the validated file content."""
        return base64.b64decode(self.file)


class UploadImageOutput(BaseModel):
    """Result of a successful upload."""

    url: str = Field(..., description="Public URL of the stored image")
