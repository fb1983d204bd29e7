"""
Unit tests for image_uploads.core.models.errors
"""

import pytest

from image_uploads.core.models.errors import (
    ConfigurationError,
    InvalidFileFormatError,
    MetadataOperationFailedError,
    MetadataWriteError,
    RemoteStorageError,
    UploadServiceError,
    ValidationError,
)


class TestUploadServiceError:
    def test_base_error(self) -> None:
        err = UploadServiceError(
            message="Something went wrong",
            error_code="TEST_ERROR",
            details={"foo": "bar"},
        )

        assert err.message == "Something went wrong"
        assert err.error_code == "TEST_ERROR"
        assert err.details == {"foo": "bar"}
        assert str(err) == "Something went wrong"

    def test_arguments_are_keyword_only(self) -> None:
        with pytest.raises(TypeError):
            UploadServiceError("message", "CODE")  # type: ignore[misc]


class TestInvalidFileFormatError:
    def test_defaults(self) -> None:
        err = InvalidFileFormatError()

        assert err.message == "Invalid file format."
        assert err.error_code == "INVALID_FILE_FORMAT"
        assert err.details == {}


@pytest.mark.parametrize(
    "error_cls,code",
    [
        (ValidationError, "VALIDATION_FAILED"),
        (RemoteStorageError, "REMOTE_STORAGE_ERROR"),
        (MetadataWriteError, "METADATA_WRITE_FAILED"),
        (MetadataOperationFailedError, "METADATA_OPERATION_FAILED"),
        (ConfigurationError, "CONFIGURATION_ERROR"),
    ],
)
def test_default_error_codes(error_cls, code) -> None:
    err = error_cls(message="failed")

    assert isinstance(err, UploadServiceError)
    assert err.error_code == code
    assert err.details == {}


def test_error_code_can_be_overridden() -> None:
    err = RemoteStorageError(message="failed", error_code="FILE_UPLOAD_FAILED")

    assert err.error_code == "FILE_UPLOAD_FAILED"
