"""boxtree public API."""

from __future__ import annotations

from boxtree.auth import AuthInfo
from boxtree.errors import (
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
from boxtree.controller import BoxApi
from boxtree.models import (
    MISSING,
    AttributeStore,
    Comment,
    Discussion,
    File,
    Folder,
    Item,
    ItemFactory,
    Version,
    merge_page,
)
from boxtree.navigation import find_items, resolve_path
from boxtree.client import BoxClient

__all__ = [
    # High-level
    "BoxClient",
    "BoxApi",
    # Auth
    "AuthInfo",
    # Items
    "Item",
    "File",
    "Folder",
    "Comment",
    "Version",
    "Discussion",
    "MISSING",
    "AttributeStore",
    "ItemFactory",
    "merge_page",
    "find_items",
    "resolve_path",
    # Errors
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
