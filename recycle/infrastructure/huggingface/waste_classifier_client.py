"""Hugging Face Waste Classifier - Inference API Adapter.

Clean Architecture:
- Port: application/classify/ports/remote_classifier.py
- Adapter: 이 파일 (HTTP 구현)

API 계약:
- 엔드포인트: https://api-inference.huggingface.co/models/rootstrap-org/waste-classifier
- 인증: Authorization: Bearer {HUGGINGFACE_API_KEY}
- 요청: {"inputs": {"image": <base64>}}
- 응답: [{"label": str, "score": float}, ...]
"""

from __future__ import annotations

import asyncio
import base64
import logging
from typing import Any

import httpx

from recycle.application.classify.ports import RemoteClassifierPort
from recycle.application.classify.services import resolve_outcome, select_top_prediction
from recycle.domain.exceptions import InvalidPredictionPayloadError
from recycle.domain.value_objects import (
    ClassificationOutcome,
    DefaultApplied,
    Failed,
    Prediction,
)

logger = logging.getLogger(__name__)

DEFAULT_CLASSIFIER_URL = (
    "https://api-inference.huggingface.co/models/rootstrap-org/waste-classifier"
)
DEFAULT_TIMEOUT = 30.0


def parse_predictions(data: Any) -> list[Prediction]:
    """응답 JSON → Prediction 목록.

    Raises:
        InvalidPredictionPayloadError: 비어있지 않은 배열이 아니거나 항목 형식이 잘못됨
    """
    if not isinstance(data, list) or not data:
        raise InvalidPredictionPayloadError()

    predictions: list[Prediction] = []
    for index, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise InvalidPredictionPayloadError(f"Prediction #{index} is not an object")
        label = entry.get("label")
        score = entry.get("score")
        if not isinstance(label, str):
            raise InvalidPredictionPayloadError(f"Prediction #{index} has no string label")
        if isinstance(score, bool) or not isinstance(score, (int, float)):
            raise InvalidPredictionPayloadError(f"Prediction #{index} has no numeric score")
        predictions.append(Prediction(label=label, score=float(score)))
    return predictions


class HuggingFaceWasteClassifier(RemoteClassifierPort):
    """Hugging Face Inference API 분류기.

    Attributes:
        DEFAULT_TIMEOUT: 기본 타임아웃 (초). 요청 수명의 유일한 상한.
    """

    DEFAULT_TIMEOUT = DEFAULT_TIMEOUT

    def __init__(
        self,
        api_key: str | None,
        api_url: str = DEFAULT_CLASSIFIER_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """초기화.

        Args:
            api_key: Hugging Face API 토큰 (없으면 빈 Bearer로 호출 → 보통 401)
            api_url: 모델 엔드포인트 URL
            timeout: HTTP 타임아웃 (초)
        """
        self._api_key = api_key or ""
        self._api_url = api_url
        self._timeout = timeout
        self._client: httpx.AsyncClient | None = None
        self._lock = asyncio.Lock()

    async def _get_client(self) -> httpx.AsyncClient:
        """HTTP 클라이언트 lazy 초기화."""
        if self._client is None:
            async with self._lock:
                if self._client is None:
                    self._client = httpx.AsyncClient(
                        headers={
                            "Authorization": f"Bearer {self._api_key}",
                            "Content-Type": "application/json",
                        },
                        timeout=self._timeout,
                    )
        return self._client

    async def classify(self, image: bytes) -> ClassificationOutcome:
        """이미지 분류.

        네트워크/HTTP/payload 오류는 모두 Failed로 변환된다.
        """
        logger.info("Classifying image with Hugging Face API", extra={"image_bytes": len(image)})
        payload = {"inputs": {"image": base64.b64encode(image).decode("ascii")}}

        try:
            client = await self._get_client()
            response = await client.post(self._api_url, json=payload)
            response.raise_for_status()
            data = response.json()
        except httpx.TimeoutException as e:
            logger.error("Hugging Face API timeout", extra={"timeout": self._timeout})
            return Failed(reason=f"Classifier API timed out after {self._timeout:g}s", error=e)
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.error("Hugging Face API HTTP error", extra={"status_code": status_code})
            return Failed(reason=f"Classifier API returned HTTP {status_code}", error=e)
        except httpx.HTTPError as e:
            logger.error("Hugging Face API request failed", extra={"error": str(e)})
            return Failed(reason=f"Classifier API request failed: {e}", error=e)
        except ValueError as e:
            logger.error("Hugging Face API returned non-JSON body", extra={"error": str(e)})
            return Failed(reason="Classifier API returned a non-JSON body", error=e)

        logger.debug("Hugging Face API response", extra={"predictions": data})

        try:
            predictions = parse_predictions(data)
        except InvalidPredictionPayloadError as e:
            logger.error(
                "Invalid response from Hugging Face API",
                extra={"reason": e.message, "payload_type": type(data).__name__},
            )
            return Failed(reason=e.message, error=e)

        top = select_top_prediction(predictions)
        outcome = resolve_outcome(top)
        if isinstance(outcome, DefaultApplied):
            logger.warning(
                "Hugging Face returned an unrecognized category",
                extra={"label": top.label, "default_category": outcome.category.value},
            )
        return outcome

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None
