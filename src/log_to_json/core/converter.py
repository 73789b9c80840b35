"""File-level conversion pipeline.

Reads a log file line by line, in order, and yields the entries produced by
the line converter. Plain text and .gz files are supported.
"""

from __future__ import annotations

import gzip
import logging
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Protocol

import aiofiles
from aiofiles.threadpool import wrap

from .builder import LineConverter
from .models import LogEntry, RunStats

logger = logging.getLogger(__name__)


class LineParser(Protocol):
    """Parser interface: return LogEntry if the line is usable, else None."""

    def parse(self, line: str) -> LogEntry | None:
        ...


@asynccontextmanager
async def _open_text(path: Path, *, encoding: str, decode_errors: str):
    """Open a log file for async text reading (plain or gzip)."""
    if path.suffix.lower() == ".gz":
        f = gzip.open(path, mode="rt", encoding=encoding, errors=decode_errors, newline="\n")
        af = wrap(f)
        try:
            yield af
        finally:
            await af.close()
    else:
        async with aiofiles.open(
            path, encoding=encoding, errors=decode_errors, newline="\n"
        ) as f:
            yield f


def _strip_terminator(line: str) -> str:
    """Drop one trailing \\n, then one \\r; embedded \\r characters stay."""
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def validate_log_path(log_path: str | Path) -> Path:
    """Return the path if it names an existing regular file."""
    path = Path(log_path)
    if not path.exists():
        raise FileNotFoundError(f"File not found at path '{path}'")
    if path.is_dir():
        raise IsADirectoryError(f"The path '{path}' is a directory, not a file")
    if not path.is_file():
        raise ValueError(f"The path '{path}' is not a regular file")
    return path


async def count_lines(
    log_path: str | Path,
    *,
    encoding: str = "utf-8",
    decode_errors: str = "strict",
) -> int:
    """Pre-scan the file and return its line count."""
    path = validate_log_path(log_path)
    total = 0
    async with _open_text(path, encoding=encoding, decode_errors=decode_errors) as f:
        async for _ in f:
            total += 1
    return total


async def iter_entries(
    log_path: str | Path,
    *,
    year: int,
    parser: LineParser | None = None,
    stats: RunStats | None = None,
    on_line: Callable[[], None] | None = None,
    encoding: str = "utf-8",
    decode_errors: str = "strict",
) -> AsyncIterator[LogEntry]:
    """Yield entries for every usable line, strictly in file order.

    ``stats`` is updated as lines are read and ``on_line`` fires once per line,
    whether or not the line produced an entry. Read and decode errors
    propagate to the caller.
    """
    path = validate_log_path(log_path)
    parser = parser or LineConverter(year=year)
    stats = stats if stats is not None else RunStats()

    async with _open_text(path, encoding=encoding, decode_errors=decode_errors) as f:
        async for line_no, line in _enumerate_async(f, start=1):
            line = _strip_terminator(line)
            stats.lines_processed += 1
            if on_line is not None:
                on_line()

            entry = parser.parse(line)
            if entry is None:
                logger.debug("Skipping line %d", line_no)
                continue

            stats.valid_entries += 1
            yield entry


async def get_entries(
    log_path: str | Path,
    **iter_kwargs,
) -> list[LogEntry]:
    """Collect iter_entries into a list."""
    return [entry async for entry in iter_entries(log_path, **iter_kwargs)]


async def _enumerate_async(iterable, start: int = 0):
    """Async enumerate helper for async iterators."""
    index = start
    async for item in iterable:
        yield index, item
        index += 1
