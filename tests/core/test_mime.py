import pytest

from image_uploads.core.utils.mime import is_allowed_mime_type


@pytest.mark.parametrize(
    "content_type",
    ["image/jpg", "image/jpeg", "image/png", "image/webp"],
)
def test_allowed_image_types(content_type: str) -> None:
    assert is_allowed_mime_type(content_type) is True


@pytest.mark.parametrize(
    "content_type",
    ["image/gif", "image/pdf", "application/pdf", "text/plain", ""],
)
def test_rejects_other_types(content_type: str) -> None:
    assert is_allowed_mime_type(content_type) is False


def test_match_is_case_sensitive() -> None:
    assert is_allowed_mime_type("IMAGE/PNG") is False
    assert is_allowed_mime_type(" image/png") is False
