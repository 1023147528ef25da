"""API Access Log Middleware.

/api 경로 요청마다 한 줄 로그:
    POST /api/classify 200 in 812ms :: {"category":"paper"}
80자를 넘으면 "…"로 자른다.
"""

from __future__ import annotations

import logging
import time

from starlette.types import ASGIApp, Message, Receive, Scope, Send

from recycle.setup.constants import ACCESS_LOG_MAX_LINE_LENGTH, ACCESS_LOG_PATH_PREFIX

logger = logging.getLogger(__name__)

ELLIPSIS = "…"


def format_access_line(
    method: str,
    path: str,
    status_code: int,
    duration_ms: float,
    json_body: str | None = None,
    max_length: int = ACCESS_LOG_MAX_LINE_LENGTH,
) -> str:
    """액세스 로그 한 줄 생성."""
    line = f"{method} {path} {status_code} in {duration_ms:.0f}ms"
    if json_body:
        line += f" :: {json_body}"
    if len(line) > max_length:
        line = line[: max_length - 1] + ELLIPSIS
    return line


class AccessLogMiddleware:
    """Pure ASGI middleware. 응답 본문은 JSON일 때만 버퍼링한다."""

    def __init__(self, app: ASGIApp, path_prefix: str = ACCESS_LOG_PATH_PREFIX) -> None:
        self.app = app
        self.path_prefix = path_prefix

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or not scope["path"].startswith(self.path_prefix):
            await self.app(scope, receive, send)
            return

        start = time.perf_counter()
        status_code = 500
        is_json = False
        body = bytearray()

        async def send_wrapper(message: Message) -> None:
            nonlocal status_code, is_json
            if message["type"] == "http.response.start":
                status_code = message["status"]
                for key, value in message.get("headers", []):
                    if key.lower() == b"content-type":
                        is_json = value.split(b";")[0].strip() == b"application/json"
            elif message["type"] == "http.response.body" and is_json:
                body.extend(message.get("body", b""))
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        finally:
            duration_ms = (time.perf_counter() - start) * 1000
            json_body = body.decode("utf-8", errors="replace") if body else None
            logger.info(
                format_access_line(
                    scope["method"], scope["path"], status_code, duration_ms, json_body
                ),
                extra={
                    "http_method": scope["method"],
                    "url_path": scope["path"],
                    "status_code": status_code,
                    "duration_ms": round(duration_ms, 1),
                },
            )
