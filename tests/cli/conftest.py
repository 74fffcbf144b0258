# topmark:header:start
#
#   project      : HeadMatch
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running HeadMatch in a controlled working directory.

`run_cli_in()` changes the process working directory to the given directory
before invoking the Click CLI, so configuration discovery and relative paths
resolve against the test project rather than the repository.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from click.testing import CliRunner, Result

from headmatch.cli.main import cli
from headmatch.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

HEADMATCH_TOML = """\
content = "Copyright (year) Acme."

[patterns.year]
pattern = '\\d{4}'
default_value = "2024"
"""

EXPECTED_HEADER = "/**\n * Copyright 2024 Acme.\n */"


def write_config(root: Path, text: str = HEADMATCH_TOML) -> Path:
    """Write ``headmatch.toml`` into ``root`` and return its path."""
    path: Path = root / "headmatch.toml"
    path.write_text(text, encoding="utf-8")
    return path


def run_cli_in(tmp_path: Path, argv: Sequence[str]) -> Result:
    """Invoke the CLI with ``tmp_path`` as the working directory.

    Args:
        tmp_path (Path): Directory used as the CWD for the command invocation.
        argv (Sequence[str]): CLI argument vector, e.g. ``["check", "a.js"]``.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, list(argv))
    finally:
        os.chdir(cwd)


def run_cli(argv: Sequence[str]) -> Result:
    """Invoke the CLI without changing the working directory."""
    return CliRunner().invoke(cli, list(argv))


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_WOULD_CHANGE(result: Result) -> None:
    """Assert that the command exited with WOULD_CHANGE (code 2)."""
    # WOULD_CHANGE is a *normal* outcome; do not assert on exception.
    assert result.exit_code == ExitCode.WOULD_CHANGE, result.output


def assert_FAILURE(result: Result) -> None:
    """Assert that the command exited with FAILURE (code 1)."""
    assert result.exit_code == ExitCode.FAILURE, result.output
