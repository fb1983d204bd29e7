"""Image Uploads Service Package."""

__version__ = "1.0.0"
__description__ = (
    "Serverless image upload service using AWS Lambda, S3-compatible storage, and SQL"
)

__all__ = ["handlers", "core"]
