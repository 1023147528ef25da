"""Classification Outcome Value Objects.

원격 분류 결과를 예외 대신 명시적인 variant로 표현한다.

- Recognized: 모델 라벨이 closed set에 속함
- DefaultApplied: 미인식 라벨 → 기본 카테고리로 대체 (정책, 에러 아님)
- Failed: 원격 호출/응답 실패 (timeout, non-2xx, 잘못된 payload 등)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from recycle.domain.enums import WasteCategory


@dataclass(frozen=True, slots=True)
class Recognized:
    category: WasteCategory
    label: str
    score: float


@dataclass(frozen=True, slots=True)
class DefaultApplied:
    """미인식 라벨에 기본 카테고리를 적용한 결과.

    "알 수 없음"을 "plastic"으로 취급하는 것은 가용성을 우선한 정책 선택이며
    정확성이 검증된 동작은 아니다.
    """

    category: WasteCategory
    label: str
    score: float


@dataclass(frozen=True, slots=True)
class Failed:
    reason: str
    error: BaseException | None = field(default=None, compare=False)


ClassificationOutcome = Union[Recognized, DefaultApplied, Failed]
