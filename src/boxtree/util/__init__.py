from .logging import get_logger
from .time import normalize_dt, parse_rfc3339, to_rfc3339

__all__ = [
    "get_logger",
    "parse_rfc3339",
    "to_rfc3339",
    "normalize_dt",
]
