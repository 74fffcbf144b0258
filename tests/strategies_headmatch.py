# topmark:header:start
#
#   project      : HeadMatch
#   file         : strategies_headmatch.py
#   file_relpath : tests/strategies_headmatch.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for generating templates, shapes and source files.

Template text is drawn from printable ASCII so generated lines never contain
a line break of their own; every comment style and line ending is covered.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from hypothesis import strategies as st

from headmatch.template.shape import CommentShape, CommentStyle, resolve_shape

Draw = Callable[[st.SearchStrategy[Any]], Any]

LINE_ENDINGS: tuple[str, ...] = ("\n", "\r\n")

SHEBANGS: tuple[str, ...] = (
    "#!/usr/bin/env node",
    "#!/usr/bin/env -S deno run",
)

_PRINTABLE = st.characters(min_codepoint=0x20, max_codepoint=0x7E)


def s_template_line() -> st.SearchStrategy[str]:
    """A template line: printable ASCII, possibly empty."""
    return st.text(alphabet=_PRINTABLE, max_size=40)


def s_template() -> st.SearchStrategy[list[str]]:
    """A template of one to five lines."""
    return st.lists(s_template_line(), min_size=1, max_size=5)


@st.composite
def s_shape(draw: Draw) -> CommentShape:
    """A comment shape for any style and line ending, with default decoration."""
    style: CommentStyle = draw(st.sampled_from(list(CommentStyle)))
    eol: str = draw(st.sampled_from(LINE_ENDINGS))
    return resolve_shape(style, eol=eol)


# Decoration text avoids whitespace at the edges and comment delimiters.
_DECORATION = st.text(alphabet="=#~+xyz", min_size=1, max_size=4)


@st.composite
def s_decoration(draw: Draw, style: CommentStyle, eol: str, *, leading: bool) -> str:
    """A block prefix or suffix; block and markup ones may carry a line break."""
    text: str = draw(st.one_of(st.just(""), _DECORATION))
    if style is CommentStyle.LINE or not draw(st.booleans()):
        return text
    return text + eol if leading else eol + text


@st.composite
def s_decorated_shape(draw: Draw, style: CommentStyle | None = None) -> CommentShape:
    """A comment shape with custom block prefix, block suffix and line prefix."""
    if style is None:
        style = draw(st.sampled_from(list(CommentStyle)))
    eol: str = draw(st.sampled_from(LINE_ENDINGS))
    return resolve_shape(
        style,
        eol=eol,
        block_prefix=draw(s_decoration(style, eol, leading=True)),
        block_suffix=draw(s_decoration(style, eol, leading=False)),
        line_prefix=draw(st.one_of(st.just(""), _DECORATION.map(lambda s: s + " "))),
    )


def s_code_line() -> st.SearchStrategy[str]:
    """A line of code that does not start a comment."""
    return st.from_regex(r"[a-z][a-z0-9 =;().]{0,30}", fullmatch=True)


@st.composite
def s_source_file(draw: Draw) -> str:
    """A source file without header: optional shebang, code lines, one line ending style."""
    eol: str = draw(st.sampled_from(LINE_ENDINGS))
    lines: list[str] = draw(st.lists(s_code_line(), max_size=6))
    if draw(st.booleans()):
        lines.insert(0, draw(st.sampled_from(SHEBANGS)))
    text: str = eol.join(lines)
    if lines and draw(st.booleans()):
        text += eol
    return text
