from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)

from log_to_json import __version__
from log_to_json.config import configure_logging, resolve_year
from log_to_json.core.converter import count_lines, iter_entries, validate_log_path
from log_to_json.core.models import RunStats
from log_to_json.core.serialize import to_json_line

LOGGER = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="log-to-json",
        description="Convert 'LEVEL [MM-DD|HH:MM:SS] message' log lines to JSON lines.",
    )
    p.add_argument("log_file_path", help="The path to the log file to be processed")
    p.add_argument(
        "--year",
        type=int,
        default=None,
        help="Year for log timestamps (default: $LOG_TO_JSON_YEAR, else the current year)",
    )
    p.add_argument("--encoding", default="utf-8", help="Text encoding of the log file")
    p.add_argument(
        "--decode-errors",
        choices=["strict", "replace", "ignore"],
        default="strict",
        help="How to handle undecodable bytes (default: strict, aborts the run)",
    )
    p.add_argument("--no-progress", action="store_true", help="Disable the progress bar")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def _make_progress(console: Console, *, disable: bool) -> Progress:
    return Progress(
        SpinnerColumn(style="green"),
        TimeElapsedColumn(),
        BarColumn(bar_width=40, style="blue", complete_style="cyan"),
        MofNCompleteColumn(),
        TaskProgressColumn(),
        TextColumn("- {task.description}"),
        console=console,
        disable=disable,
        redirect_stdout=False,
    )


async def _run(args: argparse.Namespace, *, out, console: Console) -> RunStats:
    year = resolve_year(args.year)
    console.print(f"Using year: {year}")

    read_opts = {"encoding": args.encoding, "decode_errors": args.decode_errors}
    total = await count_lines(args.log_file_path, **read_opts)
    LOGGER.debug("Pre-scan found %d lines", total)

    stats = RunStats()
    with _make_progress(console, disable=args.no_progress) as progress:
        task = progress.add_task("Scanning log file...", total=total)
        async for entry in iter_entries(
            args.log_file_path,
            year=year,
            stats=stats,
            on_line=lambda: progress.advance(task),
            **read_opts,
        ):
            out.write(to_json_line(entry) + "\n")
        progress.update(task, description="Scan complete!")

    return stats


def _print_summary(console: Console, stats: RunStats) -> None:
    console.print()
    console.print("Run Summary")
    console.print("---------------------")
    console.print(f"Total Lines Processed: {stats.lines_processed}")
    console.print(f"Valid Log Entries Found: {stats.valid_entries}")
    console.print("---------------------")


def main(argv: Sequence[str] | None = None) -> None:
    args = _build_parser().parse_args(argv)
    configure_logging()
    console = Console(stderr=True, highlight=False)

    try:
        validate_log_path(args.log_file_path)
        stats = asyncio.run(_run(args, out=sys.stdout, console=console))
    except (FileNotFoundError, IsADirectoryError) as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(2)
    except (UnicodeDecodeError, OSError) as e:
        print(f"Application error: {e}", file=sys.stderr)
        raise SystemExit(1)
    except (ValueError, LookupError) as e:
        # bad configuration: year, encoding, non-regular path
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(2)

    _print_summary(console, stats)


if __name__ == "__main__":
    main()
