"""
Lambda handler responsible for listing uploads with search, sorting and pagination.
"""

from typing import Any

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext

from image_uploads.core.models.errors import ValidationError
from image_uploads.core.utils.decorators import api_gateway_handler
from image_uploads.core.utils.either import is_left, unwrap_either
from image_uploads.core.utils.response import ResponseBuilder

from .service import ListService

logger = Logger(utc=True)


@api_gateway_handler
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle requests to list uploads.

    Supports:
    - searchQuery: case-insensitive substring on the upload name
    - sortBy=createdAt with sortDirection=asc|desc
    - page / pageSize pagination
    """
    request_id = getattr(context, "aws_request_id", None)
    params = event.get("queryStringParameters") or {}

    logger.info(
        "Received list uploads request",
        extra={"query_params": params, "request_id": request_id},
    )

    outcome = ListService().get_uploads(**params)

    if is_left(outcome):
        error = unwrap_either(outcome)

        if isinstance(error, ValidationError):
            return ResponseBuilder.validation_error(
                message=error.message,
                details=error.details.get("errors"),
                request_id=request_id,
            )

        return ResponseBuilder.internal_error(
            error.message,
            error=error.error_code,
            request_id=request_id,
        )

    output = unwrap_either(outcome)
    return ResponseBuilder.ok(output.model_dump(mode="json"), request_id=request_id)
