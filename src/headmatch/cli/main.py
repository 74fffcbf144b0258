# topmark:header:start
#
#   project      : HeadMatch
#   file         : main.py
#   file_relpath : src/headmatch/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HeadMatch Click entry point.

Group-level options are initialized once and placed into ``ctx.obj``; the
subcommands read the console and verbosity from there.
"""

from __future__ import annotations

import click

from headmatch.cli.commands.check import check_command
from headmatch.cli.commands.presence import presence_command
from headmatch.cli.commands.render import render_command
from headmatch.cli.commands.version import version_command
from headmatch.cli.console import ClickConsole
from headmatch.cli.options import common_verbose_options, resolve_verbosity
from headmatch.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(ctx: click.Context, *, verbose: int, quiet: int, no_color: bool) -> None:
    """Initialize verbosity, logging and the console on the Click context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` is populated.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Disable ANSI colors in program output.
    """
    ctx.obj = ctx.obj or {}
    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured through HEADMATCH_LOG_LEVEL only.
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    ctx.color = not no_color
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="HeadMatch: verify and fix file headers against a template.",
)
@common_verbose_options
@click.option("--no-color", is_flag=True, default=False, help="Disable colored output.")
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: int, no_color: bool) -> None:
    """Entry point for the HeadMatch CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)
    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj["console"]
        console.print("Hint: use 'headmatch check [PATHS...]' to validate headers.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(check_command)

cli.add_command(render_command)

cli.add_command(presence_command)

if __name__ == "__main__":
    cli()
