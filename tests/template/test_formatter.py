# topmark:header:start
#
#   project      : HeadMatch
#   file         : test_formatter.py
#   file_relpath : tests/template/test_formatter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Template formatter: rendering per style and placeholder filling."""

from __future__ import annotations

from headmatch.template.formatter import TemplateFormatter, format_template
from headmatch.template.patterns import PatternDefinition, PatternRegistry
from headmatch.template.shape import CommentStyle, default_shape, resolve_shape
from headmatch.utils.text import CRLF
from tests.conftest import parametrize

LINE = default_shape(CommentStyle.LINE)

REGISTRY = PatternRegistry(
    [
        PatternDefinition("year", r"\d{4}", "2024"),
        PatternDefinition("author", r"\w+"),
    ]
)


@parametrize(
    ("style", "expected"),
    [
        (CommentStyle.BLOCK, "/**\n * Copyright 2024.\n *\n * MIT\n */"),
        (CommentStyle.LINE, "// Copyright 2024.\n//\n// MIT"),
        (CommentStyle.MARKUP, "<!--\n  Copyright 2024.\n\n  MIT\n-->"),
    ],
)
def test_default_rendering(style: CommentStyle, expected: str) -> None:
    template = ["Copyright 2024.", "", "MIT"]
    assert format_template(template, default_shape(style)) == expected


def test_rendering_uses_shape_eol() -> None:
    comment = format_template(["a", "b"], default_shape(CommentStyle.BLOCK, CRLF))
    assert comment == "/**\r\n * a\r\n * b\r\n */"


def test_custom_decoration() -> None:
    shape = resolve_shape(
        CommentStyle.BLOCK, block_prefix="\n", block_suffix="\n", line_prefix="  "
    )
    assert format_template(["License: MIT"], shape) == "/*\n  License: MIT\n*/"


def test_output_is_right_trimmed() -> None:
    shape = resolve_shape(CommentStyle.LINE, block_suffix="   ")
    assert format_template(["x   "], shape) == "// x\n//"


def test_values_are_used_in_template_order() -> None:
    formatter = TemplateFormatter(("(year)-(year) (author)",), LINE, REGISTRY)
    assert formatter.format({"year": ["2019", "2021"], "author": ["Ada"]}) == "// 2019-2021 Ada"


def test_missing_and_none_values_fall_back_to_defaults() -> None:
    formatter = TemplateFormatter(("(year)-(year)",), LINE, REGISTRY)
    assert formatter.format({"year": [None, "2021"]}) == "// 2024-2021"
    assert formatter.format({"year": ["2019"]}) == "// 2019-2024"
    assert formatter.format() == "// 2024-2024"


def test_placeholder_without_value_or_default_is_kept() -> None:
    formatter = TemplateFormatter(("By (author).",), LINE, REGISTRY)
    assert formatter.format() == "// By (author)."
    assert formatter.unresolved() == ["author"]
    assert formatter.unresolved({"author": ["Ada"]}) == []
    assert formatter.unresolved({"author": [None]}) == ["author"]


def test_unknown_placeholders_are_literal() -> None:
    formatter = TemplateFormatter(("(c) (year)",), LINE, REGISTRY)
    assert formatter.format() == "// (c) 2024"
    assert formatter.unresolved() == []


def test_with_lines_keeps_shape() -> None:
    formatter = TemplateFormatter(("a",), LINE)
    assert formatter.with_lines(["b", "c"]).format() == "// b\n// c"
    assert formatter.format() == "// a"
