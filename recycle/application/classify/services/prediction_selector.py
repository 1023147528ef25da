"""Prediction Selector - 최고 점수 라벨 선택 및 카테고리 정규화."""

from __future__ import annotations

from collections.abc import Sequence

from recycle.domain.enums import WasteCategory
from recycle.domain.exceptions import InvalidPredictionPayloadError
from recycle.domain.value_objects import DefaultApplied, Prediction, Recognized


def select_top_prediction(predictions: Sequence[Prediction]) -> Prediction:
    """최고 점수 예측 선택.

    왼쪽→오른쪽 순회하며 strictly-greater일 때만 교체하므로
    동점이면 먼저 나온 항목이 이긴다.

    Raises:
        InvalidPredictionPayloadError: 빈 시퀀스
    """
    if not predictions:
        raise InvalidPredictionPayloadError()

    best = predictions[0]
    for candidate in predictions[1:]:
        if candidate.score > best.score:
            best = candidate
    return best


def resolve_outcome(prediction: Prediction) -> Recognized | DefaultApplied:
    """라벨 → 카테고리. closed set 밖이면 기본 카테고리 적용."""
    category = WasteCategory.from_label(prediction.label)
    if category is None:
        return DefaultApplied(
            category=WasteCategory.default(),
            label=prediction.label,
            score=prediction.score,
        )
    return Recognized(category=category, label=prediction.label, score=prediction.score)
