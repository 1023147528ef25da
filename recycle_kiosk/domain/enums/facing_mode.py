"""Camera Facing Mode Enum."""

from __future__ import annotations

from enum import Enum


class FacingMode(str, Enum):
    """카메라 방향. user=전면, environment=후면."""

    USER = "user"
    ENVIRONMENT = "environment"

    @property
    def opposite(self) -> FacingMode:
        return FacingMode.USER if self is FacingMode.ENVIRONMENT else FacingMode.ENVIRONMENT
