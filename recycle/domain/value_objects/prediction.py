"""Prediction Value Object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Prediction:
    """원격 모델이 반환한 단일 라벨 점수.

    Attributes:
        label: 모델 라벨 (원문 그대로, 대소문자 유지)
        score: 신뢰도
    """

    label: str
    score: float
