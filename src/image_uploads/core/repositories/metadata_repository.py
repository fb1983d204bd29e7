"""Abstract contract for upload metadata persistence."""

from abc import ABC, abstractmethod
from typing import Literal

from image_uploads.core.models.upload import Upload

SortField = Literal["created_at"]
SortDirection = Literal["asc", "desc"]


class UploadMetadataRepository(ABC):
    """Contract for storing and querying upload metadata.

    Implementations could be PostgreSQL, SQLite, etc.
    Services depend on this interface, not the implementation.
    """

    @abstractmethod
    def create_upload(self, *, name: str, remote_key: str, remote_url: str) -> Upload:
        """Insert one upload row.

        The row id and creation timestamp are assigned by the persistence
        layer.

        Raises:
            MetadataWriteError: If the insert fails
        """

    @abstractmethod
    def list_uploads(
        self,
        *,
        search_query: str | None,
        sort_by: SortField | None,
        sort_direction: SortDirection | None,
        offset: int,
        limit: int,
    ) -> tuple[list[Upload], int]:
        """Return one page of uploads and the total matching count.

        Args:
            search_query: Case-insensitive substring matched against name
            sort_by: Field to order by; default order is id descending
            sort_direction: Direction used together with sort_by
            offset: Number of matching rows to skip
            limit: Maximum rows to return

        Returns:
            Tuple of (uploads, total_count)

        Raises:
            MetadataOperationFailedError: If the query fails
        """
