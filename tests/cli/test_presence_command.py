# topmark:header:start
#
#   project      : HeadMatch
#   file         : test_presence_command.py
#   file_relpath : tests/cli/test_presence_command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI presence command: every file must open with a block comment."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tests.cli.conftest import assert_FAILURE, assert_SUCCESS, run_cli_in
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path


@mark_cli
def test_presence_reports_files_without_header(isolation: Path) -> None:
    (isolation / "a.js").write_text("code();\n", "utf-8")
    (isolation / "b.js").write_text("/* any header */\ncode();\n", "utf-8")

    result = run_cli_in(isolation, ["presence", "a.js", "b.js"])

    assert_FAILURE(result)
    assert "a.js:1:0: file-missing-header File missing header." in result.output
    assert "b.js" not in result.output


@mark_cli
def test_presence_passes(isolation: Path) -> None:
    (isolation / "b.js").write_text("#!/usr/bin/env node\n/* header */\n", "utf-8")

    result = run_cli_in(isolation, ["presence", "b.js"])

    assert_SUCCESS(result)
