"""JSON-lines serialization of LogEntry records."""

from __future__ import annotations

from pydantic import TypeAdapter

from .models import LogEntry

_ENTRY_ADAPTER: TypeAdapter[LogEntry] = TypeAdapter(LogEntry)


def to_json_line(entry: LogEntry) -> str:
    """Serialize an entry as compact single-line JSON."""
    return _ENTRY_ADAPTER.dump_json(entry).decode("utf-8")


def to_dict(entry: LogEntry) -> dict:
    """JSON-compatible dict form of an entry."""
    return _ENTRY_ADAPTER.dump_python(entry, mode="json")
