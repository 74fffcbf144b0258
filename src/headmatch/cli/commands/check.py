# topmark:header:start
#
#   project      : HeadMatch
#   file         : check.py
#   file_relpath : src/headmatch/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HeadMatch `check` command.

Runs the header-format rule over the selected files. Without ``--apply`` the
command only reports; it exits with ``WOULD_CHANGE`` (2) when any violation is
found. With ``--apply`` fixable violations are written back and the command
exits with ``FAILURE`` (1) only if violations without a fix remain.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from headmatch.cli.cmd_common import (
    config_root,
    ensure_paths_exist,
    get_console,
    get_verbosity,
    load_header_config,
    read_file,
    write_file,
)
from headmatch.cli.options import config_option, paths_argument
from headmatch.config.logging import get_logger
from headmatch.core.exit_codes import ExitCode
from headmatch.files import resolve_file_list
from headmatch.rules.header_format import HeaderFormatRule
from headmatch.rules.types import apply_fixes
from headmatch.utils.diff import render_patch, unified_diff

if TYPE_CHECKING:
    from headmatch.cli.console import ClickConsole
    from headmatch.config.logging import HeadmatchLogger
    from headmatch.config.model import HeaderConfig
    from headmatch.rules.types import Violation

logger: HeadmatchLogger = get_logger(__name__)


def format_violation(path: Path, violation: Violation) -> str:
    """Return the one-line report of ``violation`` in ``path``."""
    pos = violation.position
    suffix: str = " [fixable]" if violation.fixable else ""
    location: str = f"{path}:{pos.line}:{pos.column}"
    return f"{location}: {violation.message_id.value} {violation.message}{suffix}"


@click.command(
    name="check",
    help="Check (and optionally fix) file headers against the configured template.",
)
@config_option
@click.option(
    "--apply",
    "apply_changes",
    is_flag=True,
    default=False,
    help="Write fixes back to the files.",
)
@click.option(
    "--diff",
    "show_diff",
    is_flag=True,
    default=False,
    help="Show a unified diff of the fixes.",
)
@paths_argument
def check_command(
    *,
    config_path: Path | None,
    apply_changes: bool,
    show_diff: bool,
    paths: tuple[Path, ...],
) -> None:
    """Check headers of ``paths`` (the current directory by default)."""
    ctx: click.Context = click.get_current_context()
    console: ClickConsole = get_console()
    vlevel: int = get_verbosity()

    config: HeaderConfig = load_header_config(config_path)
    ensure_paths_exist(paths)
    files: list[Path] = resolve_file_list(
        paths or (Path("."),),
        include=config.include_patterns,
        exclude=config.exclude_patterns,
        root=config_root(config),
    )
    rule = HeaderFormatRule(config)

    would_change: int = 0
    unfixable: int = 0
    for path in files:
        source: str = read_file(path)
        violations: list[Violation] = rule.check(source)
        if not violations:
            if vlevel > 0:
                console.print(console.styled(f"{path}: ok", fg="green"))
            continue

        for violation in violations:
            console.print(format_violation(path, violation))
        unfixable += sum(1 for v in violations if not v.fixable)

        fixed: str = apply_fixes(source, violations)
        if fixed == source:
            continue
        would_change += 1
        if show_diff:
            console.print(render_patch(unified_diff(source, fixed, str(path))), nl=False)
        if apply_changes:
            write_file(path, fixed)
            logger.info("Fixed %s", path)

    if vlevel >= 0:
        verb: str = "fixed" if apply_changes else "to fix"
        console.print(
            f"{len(files)} file(s) checked, {would_change} {verb}, "
            f"{unfixable} violation(s) without fix."
        )

    if apply_changes:
        if unfixable:
            ctx.exit(ExitCode.FAILURE)
    elif would_change or unfixable:
        ctx.exit(ExitCode.WOULD_CHANGE)
