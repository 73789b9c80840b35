"""Timestamp reconstruction from partial 'MM-DD|HH:MM:SS[.f]' stamps.

Log lines carry no year, so the caller supplies one. The year is glued onto
the raw text and parsed against a fixed layout; the resulting wall-clock time
is then pinned to the local timezone.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from datetime import datetime, tzinfo

TIMESTAMP_FORMATS: Sequence[str] = (
    "%Y-%m-%d|%H:%M:%S",
    "%Y-%m-%d|%H:%M:%S.%f",
)

# strptime's %f stops at microseconds; longer fractions are cut down first.
_LONG_FRACTION_RE = re.compile(r"\.(?P<us>\d{6})\d+$")


def _parse_naive(text: str, formats: Sequence[str]) -> datetime | None:
    """Parse a timestamp string using the configured formats."""
    for fmt in formats:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def localize(naive: datetime, tz: tzinfo | None = None) -> datetime | None:
    """Attach a local offset to a naive datetime.

    Returns None when the wall-clock time is ambiguous (DST overlap) or does
    not exist (DST gap) in the target zone. ``tz=None`` uses the process's
    local timezone.
    """
    if tz is None:
        try:
            first = naive.replace(fold=0).astimezone()
            second = naive.replace(fold=1).astimezone()
        except (OverflowError, OSError):
            # Platform localtime() cannot represent this instant.
            return None
    else:
        first = naive.replace(tzinfo=tz, fold=0)
        second = naive.replace(tzinfo=tz, fold=1)

    if first.utcoffset() != second.utcoffset():
        return None
    return first


def reconstruct_timestamp(
    raw: str,
    year: int,
    *,
    tz: tzinfo | None = None,
    formats: Sequence[str] = TIMESTAMP_FORMATS,
) -> datetime | None:
    """Build an aware datetime from a year-less stamp, or None on any failure."""
    with_year = _LONG_FRACTION_RE.sub(r".\g<us>", f"{year}-{raw}")
    naive = _parse_naive(with_year, formats)
    if naive is None:
        return None
    return localize(naive, tz)
