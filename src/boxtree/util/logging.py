"""Logging helpers for boxtree modules."""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """
    Return a module logger that propagates to the root logger.

    The library never configures handlers or levels; applications opt in
    with ``logging.basicConfig`` or their own setup.
    """
    logger = logging.getLogger(name)
    logger.propagate = True
    return logger
