"""Remote API collaborator exports for boxtree."""

from __future__ import annotations

from .box_api import BoxApi

__all__ = ["BoxApi"]
