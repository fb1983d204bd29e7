"""
Lambda handler responsible for image upload and metadata creation.
"""

import io
import json
from typing import Any

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext

from image_uploads.core.models.errors import InvalidFileFormatError
from image_uploads.core.utils.decorators import api_gateway_handler
from image_uploads.core.utils.either import is_right, unwrap_either
from image_uploads.core.utils.response import ResponseBuilder
from image_uploads.core.utils.validators import validate_request

from .models import ImageUploadRequest
from .service import UploadService

logger = Logger(utc=True)


@api_gateway_handler
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle image upload requests.

    Expected API Gateway event structure:
    {
        "body": "{\"file\": \"<base64>\", \"fileName\": \"a.png\", \"contentType\": \"image/png\"}"
    }

    Args:
        event: API Gateway Lambda proxy event containing the upload payload
        context: AWS Lambda execution context

    Returns:
        201 with the public URL of the stored image, or an error response
    """
    request_id = getattr(context, "aws_request_id", None)

    logger.info(
        "Received image upload request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "request_id": request_id,
        },
    )

    try:
        body = json.loads(event.get("body") or "{}")
    except json.JSONDecodeError as exc:
        logger.exception("Invalid JSON body received", exc_info=exc)
        return ResponseBuilder.bad_request("Invalid JSON body", request_id=request_id)

    if not isinstance(body, dict):
        return ResponseBuilder.bad_request("Invalid JSON body", request_id=request_id)

    is_valid, result = validate_request(ImageUploadRequest, body, request_id=request_id)
    if not is_valid:
        logger.warning("Request validation failed", extra={"request_id": request_id})
        return result  # type: ignore[return-value]

    request: ImageUploadRequest = result  # type: ignore[assignment]
    service = UploadService()

    outcome = service.upload_image(
        file_name=request.file_name,
        content_type=request.content_type,
        content_stream=io.BytesIO(request.decoded_file()),
    )

    if is_right(outcome):
        output = unwrap_either(outcome)
        logger.info("Upload completed", extra={"url": output.url})
        return ResponseBuilder.created(output.model_dump(), request_id=request_id)

    error = unwrap_either(outcome)

    if isinstance(error, InvalidFileFormatError):
        return ResponseBuilder.bad_request(
            error.message,
            error=error.error_code,
            request_id=request_id,
        )

    return ResponseBuilder.internal_error(
        error.message,
        error=error.error_code,
        request_id=request_id,
    )
