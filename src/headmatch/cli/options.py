# topmark:header:start
#
#   project      : HeadMatch
#   file         : options.py
#   file_relpath : src/headmatch/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared Click options and their resolution."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, ParamSpec, TypeVar

import click

from headmatch.cli.errors import HeadmatchUsageError

if TYPE_CHECKING:
    from collections.abc import Callable

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Return the program-output verbosity level.

    ``-v`` raises the level to 1 (report files without violations too), ``-q``
    lowers it to -1 (violations only, no summary); the default is 0.

    Raises:
        HeadmatchUsageError: If both ``--verbose`` and ``--quiet`` are given.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise HeadmatchUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if verbose_count:
        return min(verbose_count, 2)
    if quiet_count:
        return -1
    return 0


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only report violations.",
    )(f)
    return f


def config_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config FILE`` (``headmatch.toml`` or ``pyproject.toml``)."""
    return click.option(
        "--config",
        "config_path",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        default=None,
        help="Configuration file. Defaults to the nearest headmatch.toml or "
        "pyproject.toml with a [tool.headmatch] table.",
    )(f)


def paths_argument(f: Callable[P, R]) -> Callable[P, R]:
    """Add the positional ``PATHS...`` argument."""
    return click.argument("paths", nargs=-1, type=click.Path(path_type=Path))(f)
