# topmark:header:start
#
#   project      : HeadMatch
#   file         : logging.py
#   file_relpath : src/headmatch/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HeadMatch logging with a TRACE level and colored output.

Every module obtains its logger through [`get_logger`][headmatch.config.logging.get_logger]
so the matcher can emit very chatty regex dumps at TRACE without polluting
DEBUG output. The CLI configures the root logger once via
[`setup_logging`][headmatch.config.logging.setup_logging]; library callers
keep full control of handlers.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, TextIO, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV: Final[str] = "HEADMATCH_LOG_LEVEL"

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = (
    "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"
)

LEVEL_NAMES: Final[Mapping[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


class HeadmatchLogger(logging.Logger):
    """Logger with an extra ``trace()`` method below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` with severity TRACE.

        Args:
            msg (object): The message format string.
            *args (object): Arguments merged into ``msg``.
            extra (Mapping[str, object] | None): Extra attributes for the record.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    logging.TRACE = TRACE_LEVEL  # type: ignore[attr-defined]

logging.setLoggerClass(HeadmatchLogger)


class ChalkFormatter(logging.Formatter):
    """Formatter coloring each record according to its severity."""

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and colorize the result.

        Args:
            record (logging.LogRecord): The record to format.

        Returns:
            str: The colorized message.
        """
        message: str = super().format(record)
        return _color_for(record.levelno)(message)


def _color_for(level: int) -> Callable[[str], str]:
    if level >= logging.CRITICAL:
        return chalk.red_bright
    if level >= logging.ERROR:
        return chalk.red
    if level >= logging.WARNING:
        return chalk.yellow
    if level >= logging.INFO:
        return chalk.green
    if level >= logging.DEBUG:
        return chalk.gray
    if level >= TRACE_LEVEL:
        return chalk.blue
    return chalk.dim.red


def parse_log_level(value: str | None) -> int | None:
    """Return the numeric level for a name (``"TRACE"``) or number (``"10"``)."""
    if not value:
        return None
    v: str = value.strip().upper()
    if v.isdigit():
        return int(v)
    return LEVEL_NAMES.get(v)


def resolve_env_log_level() -> int | None:
    """Return the level requested through ``HEADMATCH_LOG_LEVEL``, if any."""
    return parse_log_level(os.environ.get(LOG_LEVEL_ENV))


def setup_logging(level: int | None = None, *, stream: TextIO | None = None) -> None:
    """Configure the root logger with a single colored stream handler.

    Args:
        level (int | None): Log level; when ``None`` the environment is consulted
            and CRITICAL is used if it is silent.
        stream (TextIO | None): Output stream, ``sys.stderr`` by default.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root: logging.Logger = logging.getLogger()
    root.setLevel(level)
    for old in root.handlers[:]:
        root.removeHandler(old)

    handler = logging.StreamHandler(stream or sys.stderr)
    fmt: str = LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT
    handler.setFormatter(ChalkFormatter(fmt))
    root.addHandler(handler)


def get_logger(name: str) -> HeadmatchLogger:
    """Return the [`HeadmatchLogger`][] named ``name``."""
    return cast("HeadmatchLogger", logging.getLogger(name))
