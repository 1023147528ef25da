"""Classification Source Enum."""

from enum import Enum


class ClassificationSource(str, Enum):
    """최종 카테고리가 어디서 결정되었는지."""

    REMOTE = "remote"  # 원격 모델이 인식한 라벨
    DEFAULT = "default"  # 미인식 라벨 → 기본 카테고리 적용
    MOCK = "mock"  # 원격 실패 → mock 분류 (non-production only)
