"""Core data models for log conversion."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class LogLevel(str, Enum):
    """Severity levels recognized at the start of a log line."""

    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"
    DEBUG = "DEBUG"
    TRACE = "TRACE"


@dataclass(frozen=True, slots=True)
class LineMatch:
    """Coarse split of a recognized line (level + raw timestamp + message)."""

    level: str
    raw_timestamp: str
    message: str


@dataclass(frozen=True, slots=True)
class LogEntry:
    """Structured record emitted for one recognized log line."""

    level: LogLevel
    timestamp: datetime  # timezone-aware, local offset
    message: str  # verbatim, key/value tokens are not removed
    details: dict[str, str] = field(default_factory=dict)


@dataclass(slots=True)
class RunStats:
    """Per-run tally of lines read and entries produced."""

    lines_processed: int = 0
    valid_entries: int = 0
