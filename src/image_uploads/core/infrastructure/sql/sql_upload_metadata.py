"""SQL-backed implementation of UploadMetadataRepository."""

from aws_lambda_powertools import Logger
from sqlalchemy import ColumnElement, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from image_uploads.core.infrastructure.adapters.database_adapter import (
    DatabaseAdapter,
    default_database_adapter,
)
from image_uploads.core.infrastructure.sql.schema import UploadRecord
from image_uploads.core.models.errors import (
    MetadataOperationFailedError,
    MetadataWriteError,
)
from image_uploads.core.models.upload import Upload
from image_uploads.core.repositories.metadata_repository import (
    SortDirection,
    SortField,
    UploadMetadataRepository,
)
from image_uploads.core.utils.constants import ERROR_CODE_METADATA_LIST_FAILED

logger = Logger(utc=True)

_SORT_COLUMNS = {
    "created_at": UploadRecord.created_at,
}


class SqlUploadMetadata(UploadMetadataRepository):
    """Relational metadata storage with error handling.

    All SQLAlchemy errors are caught and translated into
    domain-specific errors with stable semantics.
    """

    def __init__(self, adapter: DatabaseAdapter | None = None) -> None:
        """Initialize with a database adapter (the shared one by default)."""
        self._db = adapter or default_database_adapter()

    def create_upload(self, *, name: str, remote_key: str, remote_url: str) -> Upload:
        """Insert one upload row and return it with generated id and timestamp.

        Raises:
            MetadataWriteError: If the insert fails
        """
        logger.debug(
            "Creating upload metadata",
            extra={"upload_name": name, "remote_key": remote_key},
        )

        try:
            with self._db.session() as session:
                record = UploadRecord(
                    name=name,
                    remote_key=remote_key,
                    remote_url=remote_url,
                )
                session.add(record)
                session.flush()
                # created_at is assigned by the database
                session.refresh(record)
                upload = Upload.model_validate(record)

        except IntegrityError as exc:
            logger.error(
                "Upload insert violated a constraint",
                extra={"remote_key": remote_key},
            )
            raise MetadataWriteError(
                message="An upload with this storage key already exists",
                details={"remote_key": remote_key},
            ) from exc

        except SQLAlchemyError as exc:
            logger.error("Upload insert failed", extra={"remote_key": remote_key})
            raise MetadataWriteError(
                message="Unable to save upload metadata at this time",
                details={"remote_key": remote_key},
            ) from exc

        logger.info(
            "Upload metadata created",
            extra={"upload_id": upload.id, "remote_key": remote_key},
        )
        return upload

    def list_uploads(
        self,
        *,
        search_query: str | None,
        sort_by: SortField | None,
        sort_direction: SortDirection | None,
        offset: int,
        limit: int,
    ) -> tuple[list[Upload], int]:
        """Return one page of uploads and the count under the same filter.

        NOTE:
        - Both reads share one session, so they see the same snapshot.
        - LIKE wildcards inside search_query are matched literally.
        """
        logger.debug(
            "Listing uploads",
            extra={
                "search_query": search_query,
                "sort_by": sort_by,
                "sort_direction": sort_direction,
                "offset": offset,
                "limit": limit,
            },
        )

        filters: list[ColumnElement[bool]] = []
        if search_query:
            filters.append(UploadRecord.name.icontains(search_query, autoescape=True))

        if sort_by and sort_direction:
            column = _SORT_COLUMNS[sort_by]
            if sort_direction == "asc":
                order_by = [column.asc(), UploadRecord.id.asc()]
            else:
                order_by = [column.desc(), UploadRecord.id.desc()]
        else:
            order_by = [UploadRecord.id.desc()]

        page_query = (
            select(UploadRecord)
            .where(*filters)
            .order_by(*order_by)
            .offset(offset)
            .limit(limit)
        )
        count_query = select(func.count(UploadRecord.id)).where(*filters)

        try:
            with self._db.session() as session:
                records = session.scalars(page_query).all()
                total = session.scalar(count_query) or 0
                uploads = [Upload.model_validate(record) for record in records]

        except SQLAlchemyError as exc:
            logger.error("Upload listing query failed", extra={"search_query": search_query})
            raise MetadataOperationFailedError(
                message="Unable to list uploads",
                error_code=ERROR_CODE_METADATA_LIST_FAILED,
                details={"search_query": search_query},
            ) from exc

        logger.info(
            "Uploads listed",
            extra={"count": len(uploads), "total": total},
        )
        return uploads, total
