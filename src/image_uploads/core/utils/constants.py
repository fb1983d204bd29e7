"""Global constants used throughout the application.

This module centralizes error codes, upload constraints, pagination limits
and environment variable names so they can be changed in one place.
"""

from typing import Final

# ============================================================================
# Error Codes
# ============================================================================

# Validation Errors
ERROR_CODE_VALIDATION_FAILED = "VALIDATION_FAILED"
ERROR_CODE_INVALID_FILE_FORMAT = "INVALID_FILE_FORMAT"

# Storage Errors
ERROR_CODE_REMOTE_STORAGE = "REMOTE_STORAGE_ERROR"
ERROR_CODE_FILE_UPLOAD_FAILED = "FILE_UPLOAD_FAILED"
ERROR_CODE_FILE_DELETE_FAILED = "FILE_DELETE_FAILED"

# Metadata / Database Errors
ERROR_CODE_METADATA_WRITE_FAILED = "METADATA_WRITE_FAILED"
ERROR_CODE_METADATA_OPERATION_FAILED = "METADATA_OPERATION_FAILED"
ERROR_CODE_METADATA_LIST_FAILED = "METADATA_LIST_FAILED"

# Configuration
ERROR_CODE_CONFIGURATION = "CONFIGURATION_ERROR"

# Internal / Unexpected
ERROR_CODE_INTERNAL_ERROR = "INTERNAL_ERROR"


# ============================================================================
# File Upload Constraints
# ============================================================================

MAX_FILE_SIZE = 5 * 1024 * 1024  # 5MB in bytes

ALLOWED_MIME_TYPES: Final[frozenset[str]] = frozenset(
    {
        "image/jpg",
        "image/jpeg",
        "image/png",
        "image/webp",
    }
)

STORAGE_FOLDER_IMAGES = "images"
STORAGE_FOLDER_DOWNLOADS = "downloads"


# ============================================================================
# Pagination Constraints
# ============================================================================

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 20
MIN_PAGE_SIZE = 1
MAX_PAGE_SIZE = 100

# Keeps (page - 1) * MAX_PAGE_SIZE within a signed 64-bit SQL integer
MAX_PAGE = (2**63 - 1) // MAX_PAGE_SIZE

# ============================================================================
# API Gateway Configuration
# ============================================================================

CORS_ORIGIN = "*"
CORS_METHODS = "GET,POST,OPTIONS"
CORS_HEADERS = "Content-Type,Authorization,X-Api-Key"
DEFAULT_CONTENT_TYPE = "application/json"

# ============================================================================
# Environment Variable Names
# ============================================================================

ENV_DATABASE_URL = "DATABASE_URL"
ENV_DATABASE_ECHO = "DATABASE_ECHO"
ENV_STORAGE_BUCKET = "STORAGE_BUCKET"
ENV_STORAGE_PUBLIC_URL = "STORAGE_PUBLIC_URL"
ENV_STORAGE_ENDPOINT_URL = "STORAGE_ENDPOINT_URL"
ENV_STORAGE_REGION = "STORAGE_REGION"
ENV_STORAGE_ACCESS_KEY_ID = "STORAGE_ACCESS_KEY_ID"
ENV_STORAGE_SECRET_ACCESS_KEY = "STORAGE_SECRET_ACCESS_KEY"
ENV_CLOUDFLARE_ACCOUNT_ID = "CLOUDFLARE_ACCOUNT_ID"

DEFAULT_STORAGE_REGION = "auto"
R2_ENDPOINT_TEMPLATE = "https://{account_id}.r2.cloudflarestorage.com"


# ============================================================================
# Helper Functions
# ============================================================================


def get_max_file_size_mb() -> int:
    """Get maximum file size in megabytes."""
    return MAX_FILE_SIZE // (1024 * 1024)
