# topmark:header:start
#
#   project      : HeadMatch
#   file         : test_render_command.py
#   file_relpath : tests/cli/test_render_command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI render command: print the configured header."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tests.cli.conftest import EXPECTED_HEADER, assert_SUCCESS, run_cli_in, write_config
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path


@mark_cli
def test_render_uses_pattern_defaults(isolation: Path) -> None:
    write_config(isolation)

    result = run_cli_in(isolation, ["render"])

    assert_SUCCESS(result)
    assert result.output == EXPECTED_HEADER + "\n"


@mark_cli
def test_render_style_override(isolation: Path) -> None:
    write_config(isolation)

    result = run_cli_in(isolation, ["render", "--style", "line"])

    assert_SUCCESS(result)
    assert result.output == "// Copyright 2024 Acme.\n"


@mark_cli
def test_render_crlf(isolation: Path) -> None:
    write_config(isolation)

    result = run_cli_in(isolation, ["render", "--eol", "crlf"])

    assert_SUCCESS(result)
    assert result.stdout_bytes == b"/**\r\n * Copyright 2024 Acme.\r\n */\n"


@mark_cli
def test_render_rejects_unknown_style(isolation: Path) -> None:
    write_config(isolation)

    result = run_cli_in(isolation, ["render", "--style", "fancy"])

    # Rejected by click before the command runs.
    assert result.exit_code == 2, result.output
    assert "Invalid value" in result.output
