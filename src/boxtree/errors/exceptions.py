"""Exception hierarchy and HTTP error mapping for boxtree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


class BoxTreeError(Exception):
    """
    Base exception for boxtree.

    Attributes:
        details: Optional structured information (e.g., HTTP status, code).
        cause: Optional original exception that triggered this error.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause


class InvalidStateError(BoxTreeError):
    """Raised when an item is used in an invalid state (e.g., no id to refresh)."""


class FetchError(BoxTreeError):
    """Raised when a paginated fetch makes no forward progress."""


class AuthError(BoxTreeError):
    """Raised when the access token is missing or rejected (HTTP 401)."""


class PermissionError(BoxTreeError):
    """Raised when access is denied (HTTP 403 non-quota)."""


class InvalidArgumentError(BoxTreeError):
    """Raised when request arguments are invalid (HTTP 400 and other 4xx)."""


class NotFoundError(BoxTreeError):
    """Raised when a Box resource is not found (HTTP 404)."""


class ConflictError(BoxTreeError):
    """Raised when a name is taken or an etag precondition fails (HTTP 409/412)."""


class RateLimitError(BoxTreeError):
    """Raised when rate-limited (HTTP 429)."""


class QuotaExceededError(BoxTreeError):
    """Raised when the account storage is exceeded (HTTP 507, quota 403)."""


class NetworkError(BoxTreeError):
    """Raised when network/timeout issues prevent the request."""


class ApiError(BoxTreeError):
    """Raised for unclassified API errors (5xx, unknown status, etc.)."""


@dataclass(frozen=True)
class HttpErrorInfo:
    """Lightweight HTTP error information for mapping to boxtree exceptions."""

    status_code: int
    reason: str | None = None
    message: str | None = None
    details: dict[str, Any] | None = None


_QUOTA_REASON_KEYWORDS: tuple[str, ...] = (
    "quota",
    "storage_limit_exceeded",
    "insufficient_storage",
    "file_size_limit_exceeded",
)


def _is_quota_reason(reason: str | None) -> bool:
    if not reason:
        return False
    return any(key in reason.lower() for key in _QUOTA_REASON_KEYWORDS)


def map_http_error(
    info: HttpErrorInfo,
    *,
    cause: Optional[BaseException] = None,
) -> BoxTreeError:
    """
    Map an HTTP error to a boxtree exception.

    Policy:
        - 401 -> AuthError
        - 403 -> PermissionError (default), but QuotaExceededError if quota-related
        - 404 -> NotFoundError
        - 409/412 -> ConflictError
        - 429 -> RateLimitError
        - 507 -> QuotaExceededError
        - other 4xx -> InvalidArgumentError
        - 5xx -> ApiError
        - otherwise -> ApiError
    """
    details: dict[str, Any] = {
        "status_code": info.status_code,
        "reason": info.reason,
    }
    if info.details:
        details.update(info.details)

    message = info.message or f"HTTP error {info.status_code}"

    if info.status_code == 401:
        return AuthError(message, details=details, cause=cause)
    if info.status_code == 403:
        if _is_quota_reason(info.reason):
            return QuotaExceededError(message, details=details, cause=cause)
        return PermissionError(message, details=details, cause=cause)
    if info.status_code == 404:
        return NotFoundError(message, details=details, cause=cause)
    if info.status_code in (409, 412):
        return ConflictError(message, details=details, cause=cause)
    if info.status_code == 429:
        return RateLimitError(message, details=details, cause=cause)
    if info.status_code == 507:
        return QuotaExceededError(message, details=details, cause=cause)
    if 400 <= info.status_code <= 499:
        return InvalidArgumentError(message, details=details, cause=cause)

    return ApiError(message, details=details, cause=cause)
