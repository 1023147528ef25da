"""HTTP Middleware."""

from recycle.presentation.http.middleware.access_log import (
    AccessLogMiddleware,
    format_access_line,
)

__all__ = ["AccessLogMiddleware", "format_access_line"]
