# topmark:header:start
#
#   project      : HeadMatch
#   file         : pragmas.py
#   file_relpath : src/headmatch/template/pragmas.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Directive ("pragma") lines found in existing headers.

Other tools embed directives in the leading comment of a file, e.g.
``@jest-environment jsdom`` or ``@ts-check``. When a header is replaced these
lines are carried over after the template body so they are not lost.

A directive line is a line whose content, once any leading non-word
decoration (``*``, ``//``, spaces) is stripped, starts with ``@identifier``.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from headmatch.utils.text import normalize_eol

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

_RE_PRAGMA: Final[re.Pattern[str]] = re.compile(r"^\W*?(@\w.*)$")


def pragma_of(line: str) -> str | None:
    """Return the directive carried by ``line``, or ``None``."""
    m: re.Match[str] | None = _RE_PRAGMA.match(line)
    return m.group(1) if m else None


def extract_pragmas(text: str, eol: str = "\n") -> list[str]:
    """Return the directive lines of ``text`` in their original order.

    Args:
        text (str): Header comment content.
        eol (str): Line separator of ``text``. Other line break variants are
            tolerated as well.

    Returns:
        list[str]: The directives, starting at ``@``, with their trailing text.
    """
    chunks: list[str] = text.split(eol) if eol else [text]
    return extract_pragmas_from_lines(
        line for chunk in chunks for line in normalize_eol(chunk).split("\n")
    )


def extract_pragmas_from_lines(lines: Iterable[str]) -> list[str]:
    """Return the directive lines of ``lines`` in order."""
    return [pragma for pragma in map(pragma_of, lines) if pragma is not None]


def merge_pragma_lines(lines: Sequence[str], pragmas: Sequence[str]) -> tuple[str, ...]:
    """Append a blank separator line and ``pragmas`` to template ``lines``.

    Returns ``lines`` unchanged when there is nothing to append.
    """
    if not pragmas:
        return tuple(lines)
    return (*lines, "", *pragmas)


def merge_into_footer(body: str, pragmas: Sequence[str], eol: str = "\n") -> str:
    """Append ``pragmas`` after ``body`` separated by one blank line.

    Args:
        body (str): Template body text (lines joined with ``eol``).
        pragmas (Sequence[str]): Directive lines, in order.
        eol (str): Line separator.

    Returns:
        str: The merged text.
    """
    return eol.join(merge_pragma_lines(body.split(eol), pragmas))
