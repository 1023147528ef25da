"""Recycle Value Objects."""

from recycle.domain.value_objects.classification_outcome import (
    ClassificationOutcome,
    DefaultApplied,
    Failed,
    Recognized,
)
from recycle.domain.value_objects.prediction import Prediction

__all__ = [
    "ClassificationOutcome",
    "DefaultApplied",
    "Failed",
    "Prediction",
    "Recognized",
]
