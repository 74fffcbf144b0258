# topmark:header:start
#
#   project      : HeadMatch
#   file         : errors.py
#   file_relpath : src/headmatch/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the HeadMatch CLI.

Raise these from commands to stop with a standardized message and exit code
(see [`ExitCode`][headmatch.core.exit_codes.ExitCode]).
"""

from __future__ import annotations

from typing import IO, Any

import click

from headmatch.core.exit_codes import ExitCode


class HeadmatchCliError(click.ClickException):
    """Base class for all HeadMatch CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console when one is set up."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        console = ctx.obj.get("console") if ctx is not None and isinstance(ctx.obj, dict) else None
        if console is None:
            super().show(file)
            return
        console.error(f"Error: {self.format_message()}")


class HeadmatchUsageError(HeadmatchCliError):
    """Invalid flags or arguments."""

    exit_code = ExitCode.USAGE_ERROR


class HeadmatchConfigCliError(HeadmatchCliError):
    """Missing, invalid or malformed configuration."""

    exit_code = ExitCode.CONFIG_ERROR


class HeadmatchFileNotFoundError(HeadmatchCliError):
    """An input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class HeadmatchIOError(HeadmatchCliError):
    """Reading or writing a file failed."""

    exit_code = ExitCode.IO_ERROR


class HeadmatchEncodingError(HeadmatchCliError):
    """A file is not valid UTF-8."""

    exit_code = ExitCode.ENCODING_ERROR
