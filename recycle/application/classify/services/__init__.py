"""Classify Services - 순수 로직."""

from recycle.application.classify.services.prediction_selector import (
    resolve_outcome,
    select_top_prediction,
)

__all__ = ["resolve_outcome", "select_top_prediction"]
