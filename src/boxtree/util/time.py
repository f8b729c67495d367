"""Timestamp helpers for Box ``created_at`` / ``modified_at`` style values."""

from __future__ import annotations

from datetime import datetime, timezone

_UTC_SUFFIX = "+00:00"


def parse_rfc3339(value: str) -> datetime:
    """
    Turn a Box timestamp into a UTC datetime.

    Box sends local offsets (``2012-12-12T10:53:43-08:00``); a trailing
    ``Z`` and fractional seconds are accepted too.

    Raises:
        ValueError: for an empty or malformed timestamp.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Box timestamp must be a non-empty string, got {value!r}")

    text = value.strip()
    if text[-1] in ("Z", "z"):
        text = text[:-1] + _UTC_SUFFIX

    parsed = datetime.fromisoformat(text)
    return normalize_dt(parsed).astimezone(timezone.utc)


def to_rfc3339(dt: datetime) -> str:
    """Format for Box request bodies: UTC, whole seconds, ``Z`` suffix."""
    utc = normalize_dt(dt).astimezone(timezone.utc)
    return utc.isoformat(timespec="seconds").replace(_UTC_SUFFIX, "Z")


def normalize_dt(dt: datetime) -> datetime:
    """Return ``dt`` unchanged if it carries a timezone; reject anything else."""
    if not isinstance(dt, datetime):
        raise TypeError(f"expected a datetime, got {type(dt).__name__}")
    if dt.tzinfo is None or dt.tzinfo.utcoffset(dt) is None:
        raise ValueError("naive datetime: Box timestamps need a timezone")
    return dt
