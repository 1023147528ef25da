"""Recycle 도메인 예외."""

from recycle.domain.exceptions.base import DomainError
from recycle.domain.exceptions.classification import (
    InvalidCategoryError,
    InvalidPredictionPayloadError,
)

__all__ = [
    "DomainError",
    "InvalidCategoryError",
    "InvalidPredictionPayloadError",
]
