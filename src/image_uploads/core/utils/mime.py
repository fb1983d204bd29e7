from image_uploads.core.utils.constants import ALLOWED_MIME_TYPES


def is_allowed_mime_type(content_type: str) -> bool:
    """Exact, case-sensitive match against the image allow-list."""
    return content_type in ALLOWED_MIME_TYPES
