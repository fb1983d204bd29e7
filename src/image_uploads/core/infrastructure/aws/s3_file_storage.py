"""S3-backed implementation of FileStorageRepository."""

import re
import uuid
from pathlib import PurePosixPath, PureWindowsPath
from typing import BinaryIO
from urllib.parse import urljoin

from aws_lambda_powertools import Logger
from boto3.exceptions import Boto3Error
from botocore.exceptions import BotoCoreError, ClientError

from image_uploads.core.config import StorageConfig
from image_uploads.core.infrastructure.adapters.s3_adapter import (
    S3Adapter,
    S3AdapterProtocol,
)
from image_uploads.core.models.errors import RemoteStorageError
from image_uploads.core.models.upload import StoredFile
from image_uploads.core.repositories.storage_repository import (
    FileStorageRepository,
    StorageFolder,
)
from image_uploads.core.utils.constants import (
    ERROR_CODE_FILE_DELETE_FAILED,
    ERROR_CODE_FILE_UPLOAD_FAILED,
)

logger = Logger(utc=True)

_UNSAFE_KEY_CHARS = re.compile(r"[^A-Za-z0-9]")


class S3FileStorage(FileStorageRepository):
    """File storage implementation backed by S3 or Cloudflare R2."""

    def __init__(
        self,
        config: StorageConfig,
        adapter: S3AdapterProtocol | None = None,
    ) -> None:
        """Create storage for the configured bucket and public URL."""
        self._config = config
        self._s3: S3AdapterProtocol = adapter or S3Adapter(config)

    def upload_file(
        self,
        *,
        folder: StorageFolder,
        file_name: str,
        content_type: str,
        content_stream: BinaryIO,
    ) -> StoredFile:
        """Stream file content to storage and return its key and public URL."""
        key = self.build_key(folder=folder, file_name=file_name)

        logger.debug(
            "Uploading file",
            extra={"key": key, "file_name": file_name, "content_type": content_type},
        )

        try:
            self._s3.upload_fileobj(
                key=key,
                fileobj=content_stream,
                content_type=content_type,
            )
        except (ClientError, BotoCoreError, Boto3Error) as exc:
            logger.error("S3 upload failed", extra={"key": key, "error": str(exc)})
            raise RemoteStorageError(
                message="Unable to upload file at this time",
                error_code=ERROR_CODE_FILE_UPLOAD_FAILED,
                details={"key": key},
            ) from exc

        except Exception as exc:
            logger.exception("Unexpected error uploading file")
            raise RemoteStorageError(
                message="Unable to upload file at this time",
                error_code=ERROR_CODE_FILE_UPLOAD_FAILED,
                details={"key": key},
            ) from exc

        logger.info("File uploaded successfully", extra={"key": key})
        return StoredFile(key=key, url=self.public_url_for(key))

    def remove_file(self, *, key: str) -> None:
        """Delete a stored object."""
        logger.debug("Deleting file", extra={"key": key})

        try:
            self._s3.delete_object(key=key)
            logger.info("File deleted successfully", extra={"key": key})

        except (ClientError, BotoCoreError) as exc:
            logger.error("S3 deletion failed", extra={"key": key})
            raise RemoteStorageError(
                message="Unable to delete file at this time",
                error_code=ERROR_CODE_FILE_DELETE_FAILED,
                details={"key": key},
            ) from exc

        except Exception as exc:
            logger.exception("Unexpected error deleting file")
            raise RemoteStorageError(
                message="Unable to delete file at this time",
                error_code=ERROR_CODE_FILE_DELETE_FAILED,
                details={"key": key},
            ) from exc

    def public_url_for(self, key: str) -> str:
        """Resolve a key against the configured public base URL."""
        return urljoin(self._config.public_url, key)

    @staticmethod
    def build_key(*, folder: StorageFolder, file_name: str) -> str:
        """Build a unique, URL-safe object key.

        Example:
            build_key(folder=StorageFolder.IMAGES, file_name="My Photo!.png")
            → "images/3f0c...-MyPhoto.png"
        """
        # Windows paths accept both separators, so either client style is stripped.
        path = PurePosixPath(PureWindowsPath(file_name).name)

        sanitized = _UNSAFE_KEY_CHARS.sub("", path.stem)
        return f"{StorageFolder(folder).value}/{uuid.uuid4()}-{sanitized}{path.suffix}"
