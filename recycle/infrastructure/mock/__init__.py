"""Mock Classifier."""

from recycle.infrastructure.mock.random_classifier import RandomWasteClassifier

__all__ = ["RandomWasteClassifier"]
