# topmark:header:start
#
#   project      : HeadMatch
#   file         : scanner.py
#   file_relpath : src/headmatch/source/scanner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Locate the leading comment of a source file.

The scanner is deliberately lexical: it does not parse the host language. It
skips an optional ``#!`` shebang line and any whitespace, then recognizes the
header comment at that position:

- one ``/* ... */`` block comment;
- a run of ``//`` line comments, where consecutive comments are separated by
  exactly one line break (a blank line or indentation ends the run);
- one ``<!-- ... -->`` markup comment.

An unterminated block or markup comment is treated as "no header".
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from headmatch.config.logging import get_logger
from headmatch.template.fragments import CommentFragment
from headmatch.template.shape import CommentStyle
from headmatch.utils.text import LF, detect_eol

if TYPE_CHECKING:
    from headmatch.config.logging import HeadmatchLogger
    from headmatch.template.shape import CommentShape

logger: HeadmatchLogger = get_logger(__name__)

SHEBANG: Final[str] = "#!"

_RE_LINE_END: Final[re.Pattern[str]] = re.compile(r"\r\n|\r|\n|$")
_RE_SINGLE_EOL: Final[re.Pattern[str]] = re.compile(r"\r\n|\r|\n")
_RE_NON_WS: Final[re.Pattern[str]] = re.compile(r"\S")


@dataclass(frozen=True)
class LeadingComments:
    """The header comment found at the top of a source file.

    Attributes:
        kind (CommentStyle): Which kind of comment was found.
        fragments (tuple[CommentFragment, ...]): Comment content without
            delimiters, one fragment per ``//`` line or a single fragment for
            block and markup comments. Spans are offsets into the source.
        start (int): Offset of the first comment delimiter.
        end (int): Offset just past the last comment delimiter.
        content_offset (int | None): Offset of the first non-whitespace
            character after the header, ``None`` when only whitespace follows.
    """

    kind: CommentStyle
    fragments: tuple[CommentFragment, ...]
    start: int
    end: int
    content_offset: int | None


def shebang_end(text: str) -> int:
    """Return the offset just past the shebang line text (before its EOL), or 0."""
    if not text.startswith(SHEBANG):
        return 0
    m: re.Match[str] | None = _RE_LINE_END.search(text)
    return m.start() if m else len(text)


def find_insertion_offset(text: str) -> int:
    """Return where a missing header is inserted.

    That is after the shebang line (if any) and before the first non-whitespace
    character; at the end of the text when nothing but whitespace follows.
    """
    m: re.Match[str] | None = _RE_NON_WS.search(text, shebang_end(text))
    return m.start() if m else len(text)


def _next_content(text: str, pos: int) -> int | None:
    m: re.Match[str] | None = _RE_NON_WS.search(text, pos)
    return m.start() if m else None


def _scan_delimited(text: str, pos: int, kind: CommentStyle) -> LeadingComments | None:
    body_start: int = pos + len(kind.opener)
    body_end: int = text.find(kind.closer, body_start)
    if body_end < 0:
        logger.debug("Unterminated %s comment at offset %d", kind.value, pos)
        return None
    end: int = body_end + len(kind.closer)
    return LeadingComments(
        kind=kind,
        fragments=(CommentFragment(text[body_start:body_end], (body_start, body_end)),),
        start=pos,
        end=end,
        content_offset=_next_content(text, end),
    )


def _scan_line_run(text: str, pos: int) -> LeadingComments:
    opener: str = CommentStyle.LINE.opener
    fragments: list[CommentFragment] = []
    start: int = pos
    end: int = pos
    while text.startswith(opener, pos):
        body_start: int = pos + len(opener)
        line_end: re.Match[str] | None = _RE_LINE_END.search(text, body_start)
        body_end: int = line_end.start() if line_end else len(text)
        fragments.append(CommentFragment(text[body_start:body_end], (body_start, body_end)))
        end = body_end
        eol: re.Match[str] | None = _RE_SINGLE_EOL.match(text, body_end)
        if eol is None:
            break
        pos = eol.end()
    return LeadingComments(
        kind=CommentStyle.LINE,
        fragments=tuple(fragments),
        start=start,
        end=end,
        content_offset=_next_content(text, end),
    )


def scan_leading_comments(text: str) -> LeadingComments | None:
    """Return the header comment of ``text``, or ``None`` when there is none.

    Args:
        text (str): Full source text, with its original line breaks.

    Returns:
        LeadingComments | None: The header comment and its location.
    """
    pos: int | None = _next_content(text, shebang_end(text))
    if pos is None:
        return None
    if text.startswith(CommentStyle.BLOCK.opener, pos):
        return _scan_delimited(text, pos, CommentStyle.BLOCK)
    if text.startswith(CommentStyle.LINE.opener, pos):
        return _scan_line_run(text, pos)
    if text.startswith(CommentStyle.MARKUP.opener, pos):
        return _scan_delimited(text, pos, CommentStyle.MARKUP)
    return None


def parse_comment_lines(text: str, shape: CommentShape) -> list[str]:
    """Split comment content into lines with the shape's decoration removed.

    ``block_prefix`` and ``block_suffix`` are removed once from the start and
    end of ``text``; ``line_prefix`` is removed from every line starting with
    it. Lines are split on the first line break variant found in ``text``.
    """
    stripped: str = text
    if shape.block_prefix and stripped.startswith(shape.block_prefix):
        stripped = stripped[len(shape.block_prefix) :]
    if shape.block_suffix and stripped.endswith(shape.block_suffix):
        stripped = stripped[: len(stripped) - len(shape.block_suffix)]
    prefix: str = shape.line_prefix
    return [
        line[len(prefix) :] if prefix and line.startswith(prefix) else line
        for line in stripped.split(detect_eol(stripped, LF))
    ]
