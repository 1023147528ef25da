"""Waste Category Enum."""

from __future__ import annotations

from enum import Enum


class WasteCategory(str, Enum):
    """재활용 분류 카테고리 (closed set).

    이 5개 값 이외의 카테고리는 어떤 경계에서도 유효하지 않다.
    """

    PLASTIC = "plastic"
    PAPER = "paper"
    GLASS = "glass"
    METAL = "metal"
    ORGANIC = "organic"

    @classmethod
    def default(cls) -> WasteCategory:
        """인식할 수 없는 라벨에 적용되는 기본 카테고리."""
        return cls.PLASTIC

    @classmethod
    def from_label(cls, label: str) -> WasteCategory | None:
        """모델 라벨 → 카테고리 (대소문자 무시).

        Returns:
            매칭되는 카테고리, 없으면 None
        """
        normalized = label.strip().lower()
        for category in cls:
            if category.value == normalized:
                return category
        return None

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return value in cls._value2member_map_


WASTE_CATEGORIES: tuple[WasteCategory, ...] = tuple(WasteCategory)
