# topmark:header:start
#
#   project      : HeadMatch
#   file         : fragments.py
#   file_relpath : src/headmatch/template/fragments.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Comment fragments and their normalized concatenation.

A *fragment* is one raw unit of comment content as supplied by the host: the
inside of a ``/* ... */`` comment, the text after ``//`` on one line, and so on.
The matcher works on the concatenation of the normalized fragment values and
uses [`FragmentText`][headmatch.template.fragments.FragmentText] to map any
position of that concatenation back to a ``(fragment_index, char_offset)``
cursor and to a raw offset in the source.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

from headmatch.template.shape import CommentStyle
from headmatch.utils.text import LF, normalize_eol, raw_offset

if TYPE_CHECKING:
    from collections.abc import Sequence


@dataclass(frozen=True)
class CommentFragment:
    """One raw piece of comment content.

    Attributes:
        text (str): Comment content without the comment delimiters.
        span (tuple[int, int] | None): Raw ``(start, end)`` offsets of ``text``
            in the source. Opaque to the engine; only carried through.
    """

    text: str
    span: tuple[int, int] | None = None


class Cursor(NamedTuple):
    """Immutable position inside a fragment sequence (normalized offsets)."""

    fragment_index: int
    char_offset: int


@dataclass(frozen=True)
class FragmentText:
    """Normalized fragment values joined into a single string.

    Attributes:
        fragments (tuple[CommentFragment, ...]): The raw fragments.
        values (tuple[str, ...]): EOL-normalized fragment values.
        text (str): ``separator.join(values)``.
        starts (tuple[int, ...]): Offset of every fragment value in ``text``.
    """

    fragments: tuple[CommentFragment, ...]
    values: tuple[str, ...]
    text: str
    starts: tuple[int, ...]

    @classmethod
    def join(cls, fragments: Sequence[CommentFragment], separator: str = "") -> FragmentText:
        """Normalize and concatenate ``fragments`` with ``separator`` in between."""
        values: tuple[str, ...] = tuple(normalize_eol(f.text) for f in fragments)
        starts: list[int] = []
        pos: int = 0
        for i, value in enumerate(values):
            if i:
                pos += len(separator)
            starts.append(pos)
            pos += len(value)
        return cls(
            fragments=tuple(fragments),
            values=values,
            text=separator.join(values),
            starts=tuple(starts),
        )

    def cursor_at(self, pos: int) -> Cursor:
        """Return the cursor of position ``pos`` of ``text``.

        A position falling on a separator is reported at the end of the
        preceding fragment.
        """
        if not self.values:
            return Cursor(0, 0)
        index: int = max(bisect_right(self.starts, pos) - 1, 0)
        offset: int = min(pos - self.starts[index], len(self.values[index]))
        return Cursor(index, offset)

    def raw_offset_at(self, pos: int) -> int | None:
        """Return the raw source offset of position ``pos``, if spans are known."""
        if not self.fragments:
            return None
        cursor: Cursor = self.cursor_at(pos)
        fragment: CommentFragment = self.fragments[cursor.fragment_index]
        if fragment.span is None:
            return None
        return fragment.span[0] + raw_offset(fragment.text, cursor.char_offset)


def separator_for(style: CommentStyle) -> str:
    """Return the string inserted between fragments of ``style``.

    Line comments carry one source line each; block and markup fragments are
    concatenated as-is since they may be split anywhere.
    """
    return LF if style is CommentStyle.LINE else ""


def fragments_from_comment(comment: str, style: CommentStyle) -> list[CommentFragment]:
    """Split rendered comment text back into fragments.

    Spans are offsets into ``comment``. Block and markup comments yield a single
    fragment (empty list when the delimiters are missing); line comments yield
    one fragment per ``//`` line.
    """
    if style is CommentStyle.LINE:
        fragments: list[CommentFragment] = []
        pos: int = 0
        for line in comment.splitlines(keepends=True):
            body: str = line.rstrip("\r\n")
            if body.startswith(style.opener):
                start: int = pos + len(style.opener)
                end: int = pos + len(body)
                fragments.append(CommentFragment(body[len(style.opener) :], (start, end)))
            pos += len(line)
        return fragments
    if not (comment.startswith(style.opener) and comment.endswith(style.closer)):
        return []
    if len(comment) < len(style.opener) + len(style.closer):
        return []
    start = len(style.opener)
    end = len(comment) - len(style.closer)
    return [CommentFragment(comment[start:end], (start, end))]
