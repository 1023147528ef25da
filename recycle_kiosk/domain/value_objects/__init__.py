"""Kiosk Value Objects."""

from recycle_kiosk.domain.value_objects.captured_image import CapturedImage
from recycle_kiosk.domain.value_objects.classification_result import ClassificationResult

__all__ = ["CapturedImage", "ClassificationResult"]
