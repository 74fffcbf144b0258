# topmark:header:start
#
#   project      : HeadMatch
#   file         : presence.py
#   file_relpath : src/headmatch/cli/commands/presence.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HeadMatch `presence` command: report files that do not start with ``/*``."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from headmatch.cli.cmd_common import ensure_paths_exist, get_console, read_file
from headmatch.cli.commands.check import format_violation
from headmatch.cli.options import paths_argument
from headmatch.core.exit_codes import ExitCode
from headmatch.files import resolve_file_list
from headmatch.rules.header_presence import HeaderPresenceRule

if TYPE_CHECKING:
    from headmatch.cli.console import ClickConsole
    from headmatch.rules.types import Violation


@click.command(name="presence", help="Check that every file starts with a block comment.")
@paths_argument
def presence_command(*, paths: tuple[Path, ...]) -> None:
    """Check ``paths`` (the current directory by default) for a leading block comment."""
    ctx: click.Context = click.get_current_context()
    console: ClickConsole = get_console()
    ensure_paths_exist(paths)
    rule = HeaderPresenceRule()
    failures: int = 0
    for path in resolve_file_list(paths or (Path("."),)):
        violations: list[Violation] = rule.check(read_file(path))
        for violation in violations:
            console.print(format_violation(path, violation))
        failures += bool(violations)
    if failures:
        ctx.exit(ExitCode.FAILURE)
