"""Entry builder: turn a matched line plus a year into a LogEntry."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from datetime import tzinfo

from .matcher import StructuralMatcher
from .models import LineMatch, LogEntry, LogLevel
from .patterns import DEFAULT_PATTERNS, KV_RE, Patterns
from .timestamps import reconstruct_timestamp

logger = logging.getLogger(__name__)


def extract_details(message: str, *, pattern: re.Pattern[str] = KV_RE) -> dict[str, str]:
    """Collect key=value and key="quoted value" tokens; last duplicate wins."""
    details: dict[str, str] = {}
    for m in pattern.finditer(message):
        value = m.group("value")
        if value.startswith('"') and value.endswith('"'):
            value = value.strip('"')
        details[m.group("key")] = value
    return details


@dataclass(frozen=True, slots=True)
class EntryBuilder:
    """Build LogEntry records from LineMatch triples."""

    patterns: Patterns = DEFAULT_PATTERNS
    tz: tzinfo | None = None  # None means the process's local timezone

    def build(self, match: LineMatch, year: int) -> LogEntry | None:
        try:
            level = LogLevel(match.level)
        except ValueError:
            logger.debug("Unknown level %r", match.level)
            return None

        ts = reconstruct_timestamp(match.raw_timestamp, year, tz=self.tz)
        if ts is None:
            logger.debug("Unusable timestamp %r (year=%d)", match.raw_timestamp, year)
            return None

        return LogEntry(
            level=level,
            timestamp=ts,
            message=match.message,
            details=extract_details(match.message, pattern=self.patterns.kv),
        )


@dataclass(frozen=True, slots=True)
class LineConverter:
    """Matcher + builder for a fixed year: parse(line) -> LogEntry | None."""

    year: int
    matcher: StructuralMatcher = field(default_factory=StructuralMatcher)
    builder: EntryBuilder = field(default_factory=EntryBuilder)

    def parse(self, line: str) -> LogEntry | None:
        match = self.matcher.match(line)
        if match is None:
            return None
        return self.builder.build(match, self.year)
