"""Classification Result Value Object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from recycle_kiosk.domain.enums import WasteCategory


@dataclass(frozen=True, slots=True)
class ClassificationResult:
    """서버 분류 결과. 생성 후 불변."""

    category: WasteCategory

    @classmethod
    def from_payload(cls, payload: Any) -> ClassificationResult:
        """응답 JSON → ClassificationResult.

        Raises:
            ValueError: 객체가 아니거나 category가 closed set 밖
        """
        if not isinstance(payload, dict) or "category" not in payload:
            raise ValueError("Response has no category field")
        return cls(category=WasteCategory.parse(payload["category"]))
