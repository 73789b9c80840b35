from __future__ import annotations

import json
import os
from pathlib import Path

import pytest

from log_to_json.cli import main


def test_cli_writes_json_lines_and_summary(
    tmp_path: Path, write_log, capsys: pytest.CaptureFixture[str]
) -> None:
    path = tmp_path / "app.log"
    write_log(path)

    main([str(path), "--year", "2024", "--no-progress"])

    out, err = capsys.readouterr()
    records = [json.loads(line) for line in out.splitlines()]
    assert [r["level"] for r in records] == ["INFO", "ERROR", "DEBUG"]
    assert records[1]["details"] == {"db": "primary", "retries": "3", "msg": "connection lost"}
    assert all(r["timestamp"].startswith("2024-03-10T") for r in records)
    assert "Using year: 2024" in err
    assert "Total Lines Processed: 5" in err
    assert "Valid Log Entries Found: 3" in err


def test_cli_year_from_env(
    tmp_path: Path, write_log, monkeypatch: pytest.MonkeyPatch, capsys
) -> None:
    path = tmp_path / "app.log"
    write_log(path)
    monkeypatch.setenv("LOG_TO_JSON_YEAR", "2020")

    main([str(path), "--no-progress"])

    out, err = capsys.readouterr()
    assert "Using year: 2020" in err
    assert all(json.loads(line)["timestamp"].startswith("2020-") for line in out.splitlines())


def test_cli_missing_file_exits_nonzero(tmp_path: Path, capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        main([str(tmp_path / "missing.log")])
    assert exc.value.code == 2
    assert "File not found" in capsys.readouterr().err


def test_cli_directory_exits_nonzero(tmp_path: Path, capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        main([str(tmp_path)])
    assert exc.value.code == 2
    assert "is a directory" in capsys.readouterr().err


def test_cli_bad_env_year_exits_nonzero(
    tmp_path: Path, write_log, monkeypatch: pytest.MonkeyPatch
) -> None:
    path = tmp_path / "app.log"
    write_log(path)
    monkeypatch.setenv("LOG_TO_JSON_YEAR", "soon")
    with pytest.raises(SystemExit) as exc:
        main([str(path)])
    assert exc.value.code == 2


def test_cli_decode_failure_is_fatal(tmp_path: Path, write_bytes, capsys) -> None:
    path = tmp_path / "bad.log"
    write_bytes(path, [b"INFO [01-01|00:00:00] \xff"])
    with pytest.raises(SystemExit) as exc:
        main([str(path), "--year", "2024", "--no-progress"])
    assert exc.value.code == 1
    assert "Application error" in capsys.readouterr().err


def test_cli_unknown_encoding_exits_nonzero(tmp_path: Path, write_log, capsys) -> None:
    path = tmp_path / "app.log"
    write_log(path)
    with pytest.raises(SystemExit) as exc:
        main([str(path), "--year", "2024", "--encoding", "no-such-codec", "--no-progress"])
    assert exc.value.code == 2
    assert "no-such-codec" in capsys.readouterr().err


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="requires os.mkfifo")
def test_cli_fifo_exits_nonzero(tmp_path: Path, capsys) -> None:
    path = tmp_path / "pipe"
    os.mkfifo(path)
    with pytest.raises(SystemExit) as exc:
        main([str(path)])
    assert exc.value.code == 2
    assert "not a regular file" in capsys.readouterr().err
