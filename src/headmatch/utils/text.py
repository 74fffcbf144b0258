# topmark:header:start
#
#   project      : HeadMatch
#   file         : text.py
#   file_relpath : src/headmatch/utils/text.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Text helpers shared by the matcher, the formatter and the rule adapters.

All helpers are pure and operate on ``str`` values only:

- EOL detection and normalization (``\\r\\n``, ``\\r``, U+2028 and U+2029 are
  all treated as line breaks equivalent to ``\\n``),
- trailing newline padding,
- regex-safe escaping of literal text,
- offset to (line, column) mapping for reporting.
"""

from __future__ import annotations

import os
import re
from typing import Final, NamedTuple

LF: Final[str] = "\n"
CR: Final[str] = "\r"
CRLF: Final[str] = "\r\n"

_RE_EOL: Final[re.Pattern[str]] = re.compile(r"\r\n|\r|\n")
_RE_ANY_LINE_BREAK: Final[re.Pattern[str]] = re.compile(r"\r\n|\r|\u2028|\u2029")
_RE_CRLF: Final[re.Pattern[str]] = re.compile(r"\r\n")


class Position(NamedTuple):
    """1-based line and 0-based column of an offset in a text."""

    line: int
    column: int


def detect_eol(text: str, default: str | None = None) -> str:
    r"""Return the first newline sequence found in ``text``.

    Args:
        text (str): Text to inspect.
        default (str | None): Value returned when ``text`` holds no newline;
            falls back to ``os.linesep`` when ``None``.

    Returns:
        str: One of ``"\r\n"``, ``"\r"`` or ``"\n"`` (or ``default``).
    """
    m: re.Match[str] | None = _RE_EOL.search(text)
    if m is not None:
        return m.group(0)
    return os.linesep if default is None else default


def normalize_eol(text: str) -> str:
    """Return a copy of ``text`` where every line break is ``\\n``."""
    return _RE_ANY_LINE_BREAK.sub(LF, text)


def raw_offset(raw: str, offset: int) -> int:
    """Map an offset in ``normalize_eol(raw)`` back to an offset in ``raw``.

    Only ``\\r\\n`` changes length under normalization, so every CRLF pair that
    precedes ``offset`` in normalized terms shifts the raw offset by one.
    """
    shift: int = 0
    for m in _RE_CRLF.finditer(raw):
        if m.start() - shift >= offset:
            break
        shift += 1
    return offset + shift


def append_newlines(text: str, eol: str, count: int) -> str:
    """Return ``text`` followed by ``count`` copies of ``eol``."""
    return text + eol * max(count, 0)


def escape_regex(text: str) -> str:
    """Escape ``text`` so it matches itself literally inside a regex."""
    return re.escape(text)


def offset_to_position(text: str, offset: int) -> Position:
    """Return the (line, column) of ``offset`` in ``text``.

    Lines are 1-based and columns 0-based. Any of ``\\r\\n``, ``\\r`` or ``\\n``
    terminates a line.
    """
    line: int = 1
    line_start: int = 0
    for m in _RE_EOL.finditer(text, 0, offset):
        if m.end() > offset:
            break
        line += 1
        line_start = m.end()
    return Position(line=line, column=offset - line_start)
