"""Custom exception classes for the upload service."""

from typing import Any

from image_uploads.core.utils.constants import (
    ERROR_CODE_CONFIGURATION,
    ERROR_CODE_INVALID_FILE_FORMAT,
    ERROR_CODE_METADATA_OPERATION_FAILED,
    ERROR_CODE_METADATA_WRITE_FAILED,
    ERROR_CODE_REMOTE_STORAGE,
    ERROR_CODE_VALIDATION_FAILED,
)


class UploadServiceError(Exception):
    """
    Base exception for all upload service errors.

    All custom errors must inherit from this class.
    Callers must explicitly provide a message and error code.
    Optional contextual information can be supplied via `details`.

    Services return these as failure values; infrastructure raises them.
    """

    message: str
    error_code: str
    details: dict[str, Any]

    def __init__(
        self,
        *,
        message: str,
        error_code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}

        super().__init__(self.message)


class ValidationError(UploadServiceError):
    """Raised when request validation fails."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_VALIDATION_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class InvalidFileFormatError(UploadServiceError):
    """Declared content type is not one of the allowed image types."""

    def __init__(
        self,
        *,
        message: str = "Invalid file format.",
        error_code: str = ERROR_CODE_INVALID_FILE_FORMAT,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class RemoteStorageError(UploadServiceError):
    """Raised when an object storage operation fails."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_REMOTE_STORAGE,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class MetadataWriteError(UploadServiceError):
    """Raised when the upload row cannot be inserted."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_METADATA_WRITE_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class MetadataOperationFailedError(UploadServiceError):
    """Raised when reading upload metadata fails."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_METADATA_OPERATION_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class ConfigurationError(UploadServiceError):
    """Raised when required configuration is missing or invalid."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_CONFIGURATION,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )
