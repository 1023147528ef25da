"""Classify Application - 이미지 분류 유스케이스."""

from recycle.application.classify.commands import (
    ClassifyImageCommand,
    ClassifyImageRequest,
    ClassifyImageResponse,
)

__all__ = ["ClassifyImageCommand", "ClassifyImageRequest", "ClassifyImageResponse"]
