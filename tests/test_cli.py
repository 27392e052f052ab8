from __future__ import annotations

import io
import json
import logging
import sys
from pathlib import Path

import pytest

from charsloc.cli import main


def _write(tmp_path: Path, name: str, content: str) -> Path:
    p = tmp_path / name
    p.write_text(content, encoding="utf-8", newline="")
    return p


def test_prints_every_character(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    p = _write(tmp_path, "a.txt", "ab\r\nc")

    assert main([str(p)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        f"{p}:1:1\t'a'",
        f"{p}:1:2\t'b'",
        f"{p}:1:3\t'\\r'",
        f"{p}:1:4\t'\\n'",
        f"{p}:2:1\t'c'",
    ]


def test_json_output(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    p = _write(tmp_path, "a.txt", "x\ny")

    assert main(["--json", str(p)]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload == {
        str(p): [
            {"char": "x", "line": 1, "column": 1},
            {"char": "\n", "line": 1, "column": 2},
            {"char": "y", "line": 2, "column": 1},
        ]
    }


def test_end_position(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    a = _write(tmp_path, "a.txt", "one\ntwo\n")
    b = _write(tmp_path, "b.txt", "")

    assert main(["--end", str(a), str(b)]) == 0
    assert capsys.readouterr().out.splitlines() == [f"{a}:3:1", f"{b}:1:1"]


def test_reads_stdin(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"q\n"), encoding="utf-8"))

    assert main(["--end", "--stdin-name", "input", "-"]) == 0
    assert capsys.readouterr().out.splitlines() == ["input:2:1"]


def test_stdin_matches_file_columns(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    data = "é\r\nz".encode("utf-8")
    p = tmp_path / "crlf.txt"
    p.write_bytes(data)
    # a locale-dependent, newline-translating stdin
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data), encoding="latin-1"))

    assert main(["--json", "--stdin-name", "input", "-", str(p)]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["input"] == payload[str(p)]
    assert [c["char"] for c in payload["input"]] == ["é", "\r", "\n", "z"]
    assert payload["input"][-1] == {"char": "z", "line": 2, "column": 1}


def test_missing_file_is_reported(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
    caplog: pytest.LogCaptureFixture,
) -> None:
    good = _write(tmp_path, "good.txt", "z")
    missing = tmp_path / "missing.txt"

    with caplog.at_level(logging.ERROR, logger="charsloc"):
        assert main(["--end", str(missing), str(good)]) == 1
    assert capsys.readouterr().out.splitlines() == [f"{good}:1:2"]
    assert str(missing) in caplog.text


def test_undecodable_file_is_reported(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    p = tmp_path / "bad.txt"
    p.write_bytes(b"ok\xff\xfe")

    with caplog.at_level(logging.ERROR, logger="charsloc"):
        assert main([str(p)]) == 1
    assert "bad.txt" in caplog.text
