# topmark:header:start
#
#   project      : HeadMatch
#   file         : cmd_common.py
#   file_relpath : src/headmatch/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by the HeadMatch subcommands.

They translate library exceptions into the CLI errors of
[`headmatch.cli.errors`][headmatch.cli.errors] so every command exits with the
same codes for the same problems.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from headmatch.cli.errors import (
    HeadmatchConfigCliError,
    HeadmatchEncodingError,
    HeadmatchFileNotFoundError,
    HeadmatchIOError,
)
from headmatch.config.logging import get_logger
from headmatch.config.model import load_config
from headmatch.core.diagnostics import DiagnosticLevel
from headmatch.core.errors import HeadmatchConfigError
from headmatch.files import missing_paths, read_source, write_source

if TYPE_CHECKING:
    from collections.abc import Sequence

    from headmatch.cli.console import ClickConsole
    from headmatch.config.logging import HeadmatchLogger
    from headmatch.config.model import HeaderConfig, MutableHeaderConfig

logger: HeadmatchLogger = get_logger(__name__)


def get_console() -> ClickConsole:
    """Return the console set up by the ``headmatch`` group."""
    ctx: click.Context = click.get_current_context()
    return ctx.find_root().obj["console"]


def get_verbosity() -> int:
    """Return the program-output verbosity resolved by the ``headmatch`` group."""
    ctx: click.Context = click.get_current_context()
    return int(ctx.find_root().obj.get("verbosity_level", 0))


def load_header_config(
    config_path: Path | None, overrides: MutableHeaderConfig | None = None
) -> HeaderConfig:
    """Load the effective configuration and print its diagnostics.

    Raises:
        HeadmatchConfigCliError: If the configuration is missing or invalid.
    """
    try:
        config: HeaderConfig = load_config(config_path, overrides=overrides)
    except HeadmatchConfigError as exc:
        raise HeadmatchConfigCliError(str(exc)) from exc
    console: ClickConsole = get_console()
    for diagnostic in config.diagnostics:
        if diagnostic.level is not DiagnosticLevel.INFO:
            console.warn(f"[{diagnostic.level.value}] {diagnostic.message}")
    return config


def config_root(config: HeaderConfig) -> Path:
    """Return the directory ``[files]`` patterns are relative to."""
    if config.config_files:
        return Path(config.config_files[-1]).parent
    return Path.cwd()


def ensure_paths_exist(paths: Sequence[Path]) -> None:
    """Raise [`HeadmatchFileNotFoundError`][] for the first missing path."""
    missing: list[Path] = missing_paths(paths)
    if missing:
        raise HeadmatchFileNotFoundError(f"No such file or directory: {missing[0]}")


def read_file(path: Path) -> str:
    """Read a source file, mapping failures to CLI errors."""
    try:
        return read_source(path)
    except UnicodeDecodeError as exc:
        raise HeadmatchEncodingError(f"{path}: not valid UTF-8 ({exc.reason})") from exc
    except OSError as exc:
        raise HeadmatchIOError(f"{path}: {exc.strerror or exc}") from exc


def write_file(path: Path, text: str) -> None:
    """Write a source file, mapping failures to CLI errors."""
    try:
        write_source(path, text)
    except OSError as exc:
        raise HeadmatchIOError(f"{path}: {exc.strerror or exc}") from exc
