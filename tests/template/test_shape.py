# topmark:header:start
#
#   project      : HeadMatch
#   file         : test_shape.py
#   file_relpath : tests/template/test_shape.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Comment styles, default decorations and overrides."""

from __future__ import annotations

import pytest

from headmatch.template.shape import CommentShape, CommentStyle, default_shape, resolve_shape
from headmatch.utils.text import CRLF, LF
from tests.conftest import parametrize


@parametrize(
    ("value", "expected"),
    [
        ("block", CommentStyle.BLOCK),
        ("jsdoc", CommentStyle.BLOCK),
        ("LINE", CommentStyle.LINE),
        (" markup ", CommentStyle.MARKUP),
        ("html", CommentStyle.MARKUP),
    ],
)
def test_parse_style(value: str, expected: CommentStyle) -> None:
    assert CommentStyle.parse(value) is expected


def test_parse_unknown_style() -> None:
    with pytest.raises(ValueError):
        CommentStyle.parse("hash")


def test_delimiters() -> None:
    assert (CommentStyle.BLOCK.opener, CommentStyle.BLOCK.closer) == ("/*", "*/")
    assert (CommentStyle.LINE.opener, CommentStyle.LINE.closer) == ("//", "")
    assert (CommentStyle.MARKUP.opener, CommentStyle.MARKUP.closer) == ("<!--", "-->")


def test_default_shapes_embed_eol() -> None:
    assert default_shape(CommentStyle.BLOCK, CRLF) == CommentShape(
        CommentStyle.BLOCK, "*\r\n", "\r\n ", " * ", CRLF
    )
    assert default_shape(CommentStyle.LINE) == CommentShape(CommentStyle.LINE, "", "", " ", LF)
    assert default_shape(CommentStyle.MARKUP) == CommentShape(
        CommentStyle.MARKUP, LF, LF, "  ", LF
    )


def test_resolve_shape_honors_empty_overrides() -> None:
    """``None`` keeps the default; an empty string replaces it."""
    shape = resolve_shape(CommentStyle.BLOCK, block_prefix="", line_prefix=None)
    assert shape.block_prefix == ""
    assert shape.block_suffix == "\n "
    assert shape.line_prefix == " * "


def test_normalized_shape_uses_lf() -> None:
    shape = resolve_shape(CommentStyle.BLOCK, eol=CRLF, line_prefix=" |\r\n").normalized()
    assert shape.block_prefix == "*\n"
    assert shape.block_suffix == "\n "
    assert shape.line_prefix == " |\n"
    assert shape.eol == LF
