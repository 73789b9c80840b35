"""Structural matcher for 'LEVEL [TIMESTAMP] MESSAGE' lines."""

from __future__ import annotations

from dataclasses import dataclass

from .models import LineMatch
from .patterns import DEFAULT_PATTERNS, Patterns


@dataclass(frozen=True, slots=True)
class StructuralMatcher:
    """Split a line into level, raw timestamp and message, or return None."""

    patterns: Patterns = DEFAULT_PATTERNS

    def match(self, line: str) -> LineMatch | None:
        m = self.patterns.line.match(line)
        if not m:
            return None
        return LineMatch(
            level=m.group("level"),
            raw_timestamp=m.group("timestamp"),
            message=m.group("message"),
        )
