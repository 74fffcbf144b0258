# topmark:header:start
#
#   project      : HeadMatch
#   file         : test_resolve_file_list.py
#   file_relpath : tests/unit/test_resolve_file_list.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for `resolve_file_list` and source I/O in `headmatch.files`.

These tests verify candidate expansion from positional paths (files,
directories and globs) and include/exclude filtering relative to a root.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from headmatch.files import missing_paths, read_source, resolve_file_list, write_source


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    for rel in ("src/a.js", "src/b.ts", "src/vendor/c.js", "README.md"):
        path = tmp_path / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("x\n", "utf-8")
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _names(paths: list[Path], root: Path) -> list[str]:
    return [p.resolve().relative_to(root.resolve()).as_posix() for p in paths]


def test_directories_are_expanded_recursively(project: Path) -> None:
    files = resolve_file_list([project / "src"])
    assert _names(files, project) == ["src/a.js", "src/b.ts", "src/vendor/c.js"]


def test_globs_are_relative_to_cwd(project: Path) -> None:
    files = resolve_file_list(["src/*.js"])
    assert _names(files, project) == ["src/a.js"]


def test_include_and_exclude_patterns(project: Path) -> None:
    files = resolve_file_list(
        ["."], include=["*.js", "*.ts"], exclude=["vendor/"], root=project
    )
    assert _names(files, project) == ["src/a.js", "src/b.ts"]


def test_duplicates_are_removed(project: Path) -> None:
    files = resolve_file_list(["src/a.js", "src/*.js"])
    assert len(files) == 1


def test_nothing_matched(project: Path, caplog: pytest.LogCaptureFixture) -> None:
    assert resolve_file_list(["*.py"]) == []
    assert "No files matched" in caplog.text


def test_missing_paths(project: Path) -> None:
    assert missing_paths(["src", "absent.js", "*.none"]) == [Path("absent.js")]


def test_read_and_write_keep_line_breaks(tmp_path: Path) -> None:
    path = tmp_path / "crlf.js"
    write_source(path, "/* a */\r\ncode();\r\n")
    assert path.read_bytes() == b"/* a */\r\ncode();\r\n"
    assert read_source(path) == "/* a */\r\ncode();\r\n"


def test_read_source_rejects_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "latin1.js"
    path.write_bytes(b"caf\xe9\n")
    with pytest.raises(UnicodeDecodeError):
        read_source(path)
