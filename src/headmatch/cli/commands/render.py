# topmark:header:start
#
#   project      : HeadMatch
#   file         : render.py
#   file_relpath : src/headmatch/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HeadMatch `render` command: print the header the template produces."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from headmatch.cli.cmd_common import get_console, load_header_config
from headmatch.cli.options import config_option
from headmatch.config.model import MutableHeaderConfig
from headmatch.rules.header_format import HeaderFormatRule
from headmatch.utils.text import CRLF, LF

if TYPE_CHECKING:
    from pathlib import Path

    from headmatch.config.model import HeaderConfig

_EOLS: dict[str, str] = {"lf": LF, "crlf": CRLF}


@click.command(name="render", help="Print the header rendered from the configured template.")
@config_option
@click.option(
    "--style",
    type=click.Choice(["block", "line", "markup", "jsdoc", "html"], case_sensitive=False),
    default=None,
    help="Override the configured comment style.",
)
@click.option(
    "--eol",
    type=click.Choice(sorted(_EOLS), case_sensitive=False),
    default="lf",
    show_default=True,
    help="Line break style of the output.",
)
def render_command(*, config_path: Path | None, style: str | None, eol: str) -> None:
    """Render the configured header, filling placeholders with their defaults."""
    overrides = MutableHeaderConfig(style=style) if style else None
    config: HeaderConfig = load_header_config(config_path, overrides)
    get_console().print(HeaderFormatRule(config).render(_EOLS[eol.lower()]))
