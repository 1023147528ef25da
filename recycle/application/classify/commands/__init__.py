"""Classify Commands."""

from recycle.application.classify.commands.classify_image import (
    MAX_UPLOAD_BYTES,
    ClassifyImageCommand,
    ClassifyImageRequest,
    ClassifyImageResponse,
)

__all__ = [
    "MAX_UPLOAD_BYTES",
    "ClassifyImageCommand",
    "ClassifyImageRequest",
    "ClassifyImageResponse",
]
