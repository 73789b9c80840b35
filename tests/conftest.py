from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def write_log() -> Callable[[Path], None]:
    def _write(path: Path) -> None:
        path.write_text(
            "\n".join(
                [
                    "INFO [03-10|09:00:00] service started version=1.4.2",
                    "this line is not a log entry",
                    'ERROR [03-10|09:15:22.500] db=primary retries=3 msg="connection lost"',
                    "WARN [13-01|00:00:00] month thirteen",
                    "DEBUG  [03-10|09:16:00] cache warm hits=10 hits=12",
                ]
            )
            + "\n",
            encoding="utf-8",
        )

    return _write


@pytest.fixture
def write_bytes() -> Callable[[Path, list[bytes]], None]:
    def _write(path: Path, lines: list[bytes]) -> None:
        path.write_bytes(b"".join(line + b"\n" for line in lines))

    return _write
