"""Business logic for image upload operations.

This module coordinates format validation, remote storage, and metadata
persistence for image uploads. Expected failures are returned as `Left`
values rather than raised.
"""

from typing import BinaryIO

from aws_lambda_powertools import Logger

from image_uploads.core.config import StorageConfig
from image_uploads.core.infrastructure.aws.s3_file_storage import S3FileStorage
from image_uploads.core.infrastructure.sql.sql_upload_metadata import SqlUploadMetadata
from image_uploads.core.models.errors import (
    InvalidFileFormatError,
    MetadataWriteError,
    RemoteStorageError,
    UploadServiceError,
)
from image_uploads.core.repositories.metadata_repository import UploadMetadataRepository
from image_uploads.core.repositories.storage_repository import (
    FileStorageRepository,
    StorageFolder,
)
from image_uploads.core.utils.either import Either, make_left, make_right
from image_uploads.core.utils.mime import is_allowed_mime_type

from .models import UploadImageOutput

logger = Logger(utc=True)


class UploadService:
    """Application service responsible for image uploads.

    This service orchestrates:
    - Content type validation
    - Streaming the file to object storage
    - Persisting upload metadata
    """

    def __init__(
        self,
        storage: FileStorageRepository | None = None,
        metadata: UploadMetadataRepository | None = None,
    ) -> None:
        """Initialize the upload service with required infrastructure dependencies."""
        self.storage = storage or S3FileStorage(StorageConfig.from_env())
        self.metadata = metadata or SqlUploadMetadata()

    def upload_image(
        self,
        *,
        file_name: str,
        content_type: str,
        content_stream: BinaryIO,
    ) -> Either[UploadServiceError, UploadImageOutput]:
        """Upload an image and persist its metadata.

        The upload flow is:
        1. Validate the declared content type
        2. Stream the image to object storage
        3. Persist upload metadata
        4. Remove the stored object if metadata persistence fails

        Args:
            file_name: Original client file name
            content_type: Declared MIME type
            content_stream: Readable binary stream, consumed once

        Returns:
            Right(UploadImageOutput) with the public URL, or
            Left(InvalidFileFormatError | RemoteStorageError | MetadataWriteError)
        """
        logger.debug(
            "Starting image upload",
            extra={"file_name": file_name, "content_type": content_type},
        )

        # Step 1: Validate content type before any I/O
        if not is_allowed_mime_type(content_type):
            logger.warning(
                "Unsupported content type",
                extra={"content_type": content_type},
            )
            return make_left(
                InvalidFileFormatError(details={"content_type": content_type})
            )

        # Step 2: Upload file to storage
        try:
            stored = self.storage.upload_file(
                folder=StorageFolder.IMAGES,
                file_name=file_name,
                content_type=content_type,
                content_stream=content_stream,
            )
        except RemoteStorageError as exc:
            logger.exception("Image upload to storage failed")
            return make_left(exc)

        # Step 3: Persist metadata (remove stored object on failure)
        try:
            upload = self.metadata.create_upload(
                name=file_name,
                remote_key=stored.key,
                remote_url=stored.url,
            )
        except MetadataWriteError as exc:
            logger.exception("Failed to persist upload metadata")
            self._discard_orphan(stored.key)
            return make_left(exc)

        logger.info(
            "Image uploaded successfully",
            extra={"upload_id": upload.id, "remote_key": upload.remote_key},
        )
        return make_right(UploadImageOutput(url=upload.remote_url))

    def _discard_orphan(self, key: str) -> None:
        """Best-effort removal of an object whose metadata row was not written."""
        try:
            self.storage.remove_file(key=key)
        except RemoteStorageError:
            logger.warning(
                "Failed to clean up uploaded file after metadata failure",
                extra={"remote_key": key},
            )
