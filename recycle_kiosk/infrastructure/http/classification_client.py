"""HTTP Classification Client - ClassificationClientPort 구현.

POST <base_url>/api/classify (multipart, field=image)
- 2xx     → {"category": ...}
- non-2xx → {"message": ...} (없으면 "Server error: <status>")
"""

from __future__ import annotations

import asyncio
import logging

import httpx

from recycle_kiosk.application.common.exceptions import (
    InvalidResponseError,
    NetworkError,
    ServerError,
)
from recycle_kiosk.application.session.ports import ClassificationClientPort
from recycle_kiosk.domain.value_objects import CapturedImage, ClassificationResult

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:5000"
CLASSIFY_PATH = "/api/classify"
DEFAULT_TIMEOUT = 60.0


class HttpClassificationClient(ClassificationClientPort):
    """분류 서버 클라이언트. 재시도 없음."""

    def __init__(self, base_url: str = DEFAULT_BASE_URL, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self._timeout = timeout
        self._client: httpx.AsyncClient | None = None
        self._lock = asyncio.Lock()

    @property
    def endpoint(self) -> str:
        return f"{self._base_url}{CLASSIFY_PATH}"

    async def _get_client(self) -> httpx.AsyncClient:
        """HTTP 클라이언트 lazy 초기화."""
        if self._client is None:
            async with self._lock:
                if self._client is None:
                    self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    async def classify(self, image: CapturedImage) -> ClassificationResult:
        files = {"image": (image.filename, image.data, image.media_type)}

        try:
            client = await self._get_client()
            response = await client.post(self.endpoint, files=files)
        except httpx.RequestError as e:
            logger.error(
                "Classification request failed",
                extra={"endpoint": self.endpoint, "error": str(e)},
            )
            raise NetworkError() from e

        if not response.is_success:
            message = self._error_message(response)
            logger.error(
                "Classification server error",
                extra={"status_code": response.status_code, "server_message": message},
            )
            raise ServerError(message, response.status_code)

        try:
            return ClassificationResult.from_payload(response.json())
        except ValueError as e:
            logger.error("Invalid classification response", extra={"error": str(e)})
            raise InvalidResponseError() from e

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        fallback = f"Server error: {response.status_code}"
        try:
            body = response.json()
        except ValueError:
            return fallback
        if isinstance(body, dict) and isinstance(body.get("message"), str) and body["message"]:
            return body["message"]
        return fallback

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None
