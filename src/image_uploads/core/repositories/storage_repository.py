"""Abstract contract for remote file storage."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import BinaryIO

from image_uploads.core.models.upload import StoredFile
from image_uploads.core.utils.constants import (
    STORAGE_FOLDER_DOWNLOADS,
    STORAGE_FOLDER_IMAGES,
)


class StorageFolder(str, Enum):
    """Top-level namespaces inside the bucket."""

    IMAGES = STORAGE_FOLDER_IMAGES
    DOWNLOADS = STORAGE_FOLDER_DOWNLOADS


class FileStorageRepository(ABC):
    """Contract for storing files in an object store.

    Implementations could be S3, R2, GCS, local disk, etc.
    Services depend on this interface, not the implementation.
    """

    @abstractmethod
    def upload_file(
        self,
        *,
        folder: StorageFolder,
        file_name: str,
        content_type: str,
        content_stream: BinaryIO,
    ) -> StoredFile:
        """Stream a file to storage under a unique key.

        Args:
            folder: Namespace the key is prefixed with
            file_name: Original client file name
            content_type: Declared MIME type
            content_stream: Readable binary stream, consumed once

        Returns:
            The stored object key and its public URL

        Raises:
            RemoteStorageError: If the transfer fails
        """

    @abstractmethod
    def remove_file(self, *, key: str) -> None:
        """Delete a stored object by key.

        Raises:
            RemoteStorageError: If deletion fails
        """
