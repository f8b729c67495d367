"""Public auth exports for boxtree."""

from __future__ import annotations

from .auth_info import AuthInfo

__all__ = ["AuthInfo"]
