"""Pydantic error shaping shared by the upload and list handlers."""

from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from image_uploads.core.utils.response import JsonDict, ResponseBuilder

ModelT = TypeVar("ModelT", bound=BaseModel)

_MESSAGE_REWRITES = (
    ("field required", "This field is required"),
    ("valid integer", "Must be a whole number"),
)


def sanitize_validation_errors(
    errors: Sequence[Mapping[str, Any]],
) -> list[dict[str, str]]:
    """Reduce pydantic errors to `{"field", "message"}` pairs.

    `input`, `ctx` and `url` are dropped so request values never echo back.
    """
    sanitized: list[dict[str, str]] = []

    for err in errors:
        field = ".".join(str(part) for part in err.get("loc", [])) or "body"
        msg = err.get("msg", "Invalid value").replace("Value error,", "").strip()

        lowered = msg.lower()
        for needle, replacement in _MESSAGE_REWRITES:
            if needle in lowered:
                msg = replacement
                break

        sanitized.append({"field": field, "message": msg})

    return sanitized


def validate_request(
    model: type[ModelT],
    data: Mapping[str, Any],
    *,
    request_id: str | None = None,
    cors_origin: str | None = None,
) -> tuple[bool, ModelT | JsonDict]:
    """Return `(True, instance)` or `(False, 422 response)`."""
    try:
        return True, model.model_validate(data)

    except ValidationError as exc:
        return (
            False,
            ResponseBuilder.validation_error(
                message="Invalid request payload",
                details=sanitize_validation_errors(exc.errors()),
                request_id=request_id,
                cors_origin=cors_origin,
            ),
        )
