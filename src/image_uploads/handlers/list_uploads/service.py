"""
Business logic for listing uploads.
"""

from typing import Any

from aws_lambda_powertools import Logger
from pydantic import ValidationError as PydanticValidationError

from image_uploads.core.infrastructure.sql.sql_upload_metadata import SqlUploadMetadata
from image_uploads.core.models.errors import (
    MetadataOperationFailedError,
    UploadServiceError,
    ValidationError,
)
from image_uploads.core.models.upload import ListUploadsOutput
from image_uploads.core.repositories.metadata_repository import UploadMetadataRepository
from image_uploads.core.utils.either import Either, make_left, make_right
from image_uploads.core.utils.validators import sanitize_validation_errors

from .models import ListUploadsRequest

logger = Logger(utc=True)


class ListService:
    """Application service responsible for listing uploads.

    This service coordinates:
    - Validating search, sort and pagination parameters
    - Fetching one page of uploads and the total matching count
    """

    def __init__(self, metadata: UploadMetadataRepository | None = None) -> None:
        """Initialize list service with required dependencies."""
        self.metadata = metadata or SqlUploadMetadata()

    def get_uploads(self, **params: Any) -> Either[UploadServiceError, ListUploadsOutput]:
        """List uploads with optional search, sorting, and pagination.

        Args:
            **params: search_query, sort_by, sort_direction, page, page_size
                (camelCase aliases are accepted as well)

        Returns:
            Right(ListUploadsOutput), or
            Left(ValidationError | MetadataOperationFailedError)

        Example:
            service.get_uploads(search_query="logo", sort_by="created_at",
                                sort_direction="desc", page=1, page_size=10)
        """
        try:
            request = ListUploadsRequest.model_validate(params)
        except PydanticValidationError as exc:
            logger.warning("Invalid list parameters", extra={"errors": exc.error_count()})
            return make_left(
                ValidationError(
                    message="Invalid list parameters",
                    details={"errors": sanitize_validation_errors(exc.errors())},
                )
            )

        try:
            uploads, total = self.metadata.list_uploads(
                search_query=request.search_query,
                sort_by=request.sort_by,
                sort_direction=request.sort_direction,
                offset=request.offset,
                limit=request.page_size,
            )
        except MetadataOperationFailedError as exc:
            logger.exception("Failed to fetch uploads")
            return make_left(exc)

        logger.info(
            "Uploads listed successfully",
            extra={"count": len(uploads), "total": total, "page": request.page},
        )

        return make_right(ListUploadsOutput(uploads=uploads, total=total))
