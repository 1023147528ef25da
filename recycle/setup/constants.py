"""
Service Constants (Single Source of Truth)

정적 상수 정의 - 빌드 타임에 결정되며 환경변수로 변경되지 않음
"""

from __future__ import annotations

# ─────────────────────────────────────────────────────────────────────────────
# Service Identity
# ─────────────────────────────────────────────────────────────────────────────
SERVICE_NAME = "recycle-api"
SERVICE_VERSION = "1.0.0"

# ─────────────────────────────────────────────────────────────────────────────
# Logging Constants (12-Factor App Compliance)
# ─────────────────────────────────────────────────────────────────────────────
ENV_KEY_ENVIRONMENT = "ENVIRONMENT"
ENV_KEY_LOG_LEVEL = "LOG_LEVEL"
ENV_KEY_LOG_FORMAT = "LOG_FORMAT"

DEFAULT_ENVIRONMENT = "development"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "json"

ECS_VERSION = "8.11.0"

EXCLUDED_LOG_RECORD_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "exc_info",
        "exc_text",
        "thread",
        "threadName",
        "taskName",
        "message",
        "asctime",
    }
)

# Noisy loggers to suppress
NOISY_LOGGERS = (
    "uvicorn",
    "uvicorn.access",
    "uvicorn.error",
    "httpx",
    "httpcore",
    "asyncio",
)

# ─────────────────────────────────────────────────────────────────────────────
# PII Masking Configuration
# ─────────────────────────────────────────────────────────────────────────────
SENSITIVE_FIELD_PATTERNS = frozenset({"password", "secret", "token", "api_key", "authorization"})
MASK_PLACEHOLDER = "***REDACTED***"
MASK_PRESERVE_PREFIX = 4
MASK_PRESERVE_SUFFIX = 4
MASK_MIN_LENGTH = 10

# ─────────────────────────────────────────────────────────────────────────────
# Access Log
# ─────────────────────────────────────────────────────────────────────────────
ACCESS_LOG_PATH_PREFIX = "/api"
ACCESS_LOG_MAX_LINE_LENGTH = 80

# ─────────────────────────────────────────────────────────────────────────────
# CORS Constants
# ─────────────────────────────────────────────────────────────────────────────
DEFAULT_CORS_ORIGINS = (
    "http://localhost:5000,"
    "http://127.0.0.1:5000,"
    "http://localhost:5173,"
    "https://localhost:5173"
)
