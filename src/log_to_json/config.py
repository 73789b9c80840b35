"""Runtime configuration: environment overrides and logging setup."""

from __future__ import annotations

import logging
import os
from datetime import datetime

YEAR_ENV = "LOG_TO_JSON_YEAR"
LOG_LEVEL_ENV = "LOG_TO_JSON_LOG_LEVEL"


def resolve_year(year: int | None, *, now: datetime | None = None) -> int:
    """Pick the year used to complete timestamps.

    Explicit value first, then $LOG_TO_JSON_YEAR, then the current local year.
    """
    if year is not None:
        return year

    env = os.getenv(YEAR_ENV)
    if env:
        try:
            return int(env)
        except ValueError as exc:
            raise ValueError(f"{YEAR_ENV} must be an integer") from exc

    now = now or datetime.now().astimezone()
    return now.year


def resolve_log_level() -> int:
    level_name = os.getenv(LOG_LEVEL_ENV, "WARNING").upper()
    return getattr(logging, level_name, logging.WARNING)


def configure_logging() -> None:
    """Send diagnostics to stderr; stdout carries only JSON lines."""
    logging.basicConfig(
        level=resolve_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
