"""Classify Ports - Remote Classifier, Fallback Classifier."""

from recycle.application.classify.ports.fallback_classifier import FallbackClassifierPort
from recycle.application.classify.ports.remote_classifier import RemoteClassifierPort

__all__ = ["FallbackClassifierPort", "RemoteClassifierPort"]
