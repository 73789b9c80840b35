"""Line matching, entry building and file conversion."""

from __future__ import annotations

from .builder import EntryBuilder, LineConverter, extract_details
from .converter import LineParser, count_lines, get_entries, iter_entries, validate_log_path
from .matcher import StructuralMatcher
from .models import LineMatch, LogEntry, LogLevel, RunStats
from .patterns import DEFAULT_PATTERNS, KV_RE, LOG_LINE_RE, Patterns
from .serialize import to_dict, to_json_line
from .timestamps import localize, reconstruct_timestamp

__all__ = [
    "DEFAULT_PATTERNS",
    "EntryBuilder",
    "KV_RE",
    "LOG_LINE_RE",
    "LineConverter",
    "LineMatch",
    "LineParser",
    "LogEntry",
    "LogLevel",
    "Patterns",
    "RunStats",
    "StructuralMatcher",
    "count_lines",
    "extract_details",
    "get_entries",
    "iter_entries",
    "localize",
    "reconstruct_timestamp",
    "to_dict",
    "to_json_line",
    "validate_log_path",
]
