"""Recycle 애플리케이션 예외."""

from recycle.application.common.exceptions.base import ApplicationError
from recycle.application.common.exceptions.classification import ClassificationFailedError
from recycle.application.common.exceptions.validation import (
    ImageRequiredError,
    ImageTooLargeError,
)

__all__ = [
    "ApplicationError",
    "ClassificationFailedError",
    "ImageRequiredError",
    "ImageTooLargeError",
]
