# topmark:header:start
#
#   project      : HeadMatch
#   file         : test_pragmas.py
#   file_relpath : tests/template/test_pragmas.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Directive line extraction and merging."""

from __future__ import annotations

from headmatch.template.pragmas import (
    extract_pragmas,
    extract_pragmas_from_lines,
    merge_into_footer,
    merge_pragma_lines,
    pragma_of,
)
from tests.conftest import parametrize


@parametrize(
    ("line", "expected"),
    [
        (" * @jest-environment jsdom", "@jest-environment jsdom"),
        ("@ts-check", "@ts-check"),
        ("// @flow strict", "@flow strict"),
        (" * Copyright 2024.", None),
        (" * mail me @ home", None),
        (" * @", None),
        ("", None),
    ],
)
def test_pragma_of(line: str, expected: str | None) -> None:
    assert pragma_of(line) == expected


def test_extract_pragmas_keeps_order_across_line_breaks() -> None:
    text = "*\r\n * Header\r\n * @b one\r\n * @a two\r\n "
    assert extract_pragmas(text, "\r\n") == ["@b one", "@a two"]
    assert extract_pragmas(text.replace("\r\n", "\n")) == ["@b one", "@a two"]


def test_extract_pragmas_from_lines() -> None:
    assert extract_pragmas_from_lines(["x", " * @ts-check", "y"]) == ["@ts-check"]
    assert extract_pragmas_from_lines([]) == []


def test_merge_pragma_lines() -> None:
    assert merge_pragma_lines(["Copyright 2024."], ["@ts-check"]) == (
        "Copyright 2024.",
        "",
        "@ts-check",
    )
    assert merge_pragma_lines(["Copyright 2024."], []) == ("Copyright 2024.",)


def test_merge_into_footer() -> None:
    assert merge_into_footer("a\r\nb", ["@x", "@y"], "\r\n") == "a\r\nb\r\n\r\n@x\r\n@y"
    assert merge_into_footer("a", []) == "a"
