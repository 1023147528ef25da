"""Hugging Face Inference API Adapter."""

from recycle.infrastructure.huggingface.waste_classifier_client import (
    DEFAULT_CLASSIFIER_URL,
    HuggingFaceWasteClassifier,
    parse_predictions,
)

__all__ = ["DEFAULT_CLASSIFIER_URL", "HuggingFaceWasteClassifier", "parse_predictions"]
