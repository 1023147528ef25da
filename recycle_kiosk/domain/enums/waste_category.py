"""Waste Category Enum (client side)."""

from __future__ import annotations

from enum import Enum


class WasteCategory(str, Enum):
    """서버가 반환할 수 있는 재활용 카테고리 (closed set)."""

    PLASTIC = "plastic"
    PAPER = "paper"
    GLASS = "glass"
    METAL = "metal"
    ORGANIC = "organic"

    @classmethod
    def parse(cls, value: object) -> WasteCategory:
        """응답 값 → 카테고리. 정확히 일치하지 않으면 ValueError."""
        if not isinstance(value, str):
            raise ValueError(f"Category must be a string, got {type(value).__name__}")
        return cls(value)
