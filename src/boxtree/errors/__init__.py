"""Public error exports for boxtree."""

from __future__ import annotations

from .exceptions import (
    ApiError,
    AuthError,
    BoxTreeError,
    ConflictError,
    FetchError,
    HttpErrorInfo,
    InvalidArgumentError,
    InvalidStateError,
    NetworkError,
    NotFoundError,
    PermissionError,
    QuotaExceededError,
    RateLimitError,
    map_http_error,
)

__all__ = [
    "BoxTreeError",
    "InvalidStateError",
    "FetchError",
    "AuthError",
    "PermissionError",
    "InvalidArgumentError",
    "NotFoundError",
    "ConflictError",
    "RateLimitError",
    "QuotaExceededError",
    "NetworkError",
    "ApiError",
    "HttpErrorInfo",
    "map_http_error",
]
