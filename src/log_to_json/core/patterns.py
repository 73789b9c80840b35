"""Compiled patterns shared by the matcher and the entry builder."""

from __future__ import annotations

import re
from dataclasses import dataclass

LOG_LINE_RE = re.compile(
    r"^(?P<level>INFO|WARN|ERROR|DEBUG|TRACE)\s*\[(?P<timestamp>.+?)\]\s+(?P<message>.*)"
)

# Quoted values run to the next '"'; there is no escape handling.
KV_RE = re.compile(r'(?P<key>\w+)=(?P<value>"[^"]*"|\S+)')


@dataclass(frozen=True, slots=True)
class Patterns:
    """Bundle of compiled patterns injected into the parsing components."""

    line: re.Pattern[str] = LOG_LINE_RE
    kv: re.Pattern[str] = KV_RE


DEFAULT_PATTERNS = Patterns()
