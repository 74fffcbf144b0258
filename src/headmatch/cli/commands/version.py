# topmark:header:start
#
#   project      : HeadMatch
#   file         : version.py
#   file_relpath : src/headmatch/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HeadMatch `version` command.

Prints the HeadMatch version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from headmatch.cli.cmd_common import get_console
from headmatch.constants import HEADMATCH_VERSION


@click.command(name="version", help="Show the current version of HeadMatch.")
def version_command() -> None:
    """Show the current version of HeadMatch."""
    get_console().print(HEADMATCH_VERSION)
