# topmark:header:start
#
#   project      : HeadMatch
#   file         : test_rule_types.py
#   file_relpath : tests/rules/test_rule_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Violation records and fix application."""

from __future__ import annotations

from headmatch.rules.types import Fix, MessageId, Violation, apply_fixes
from headmatch.utils.text import Position


def test_violation_positions() -> None:
    source = "ab\ncd"
    violation = Violation.at(source, MessageId.MISSING_HEADER, 3, 5)
    assert violation.position == Position(2, 0)
    assert violation.end_position == Position(2, 2)
    assert violation.message == "No header found."


def test_violation_message_with_detail() -> None:
    violation = Violation.at("", MessageId.INVALID_PATTERN_VALUE, 0, 0, detail="year")
    assert violation.message == "Header value does not satisfy its pattern. (year)"


def test_message_ids_are_stable() -> None:
    assert [m.value for m in MessageId] == [
        "missing-header",
        "header-content-mismatch",
        "invalid-pattern-value",
        "trailing-newlines-mismatch",
        "file-missing-header",
    ]


def test_fix_apply() -> None:
    assert Fix(1, 3, "XY").apply("abcd") == "aXYd"
    assert Fix(0, 0, "> ").apply("abcd") == "> abcd"


def test_apply_fixes_in_source_order() -> None:
    source = "0123456789"
    violations = [
        Violation.at(source, MessageId.TRAILING_NEWLINES_MISMATCH, 8, 9, fix=Fix(8, 9, "x")),
        Violation.at(source, MessageId.MISSING_HEADER, 0, 0, fix=Fix(0, 0, "H")),
        Violation.at(source, MessageId.INVALID_PATTERN_VALUE, 2, 4),
    ]
    assert apply_fixes(source, violations) == "H01234567x9"


def test_apply_fixes_skips_overlaps() -> None:
    source = "0123456789"
    violations = [
        Violation.at(source, MessageId.HEADER_CONTENT_MISMATCH, 0, 5, fix=Fix(0, 5, "A")),
        Violation.at(source, MessageId.TRAILING_NEWLINES_MISMATCH, 3, 6, fix=Fix(3, 6, "B")),
    ]
    assert apply_fixes(source, violations) == "A56789"


def test_apply_fixes_without_fixes() -> None:
    assert apply_fixes("abc", []) == "abc"
