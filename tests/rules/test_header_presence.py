# topmark:header:start
#
#   project      : HeadMatch
#   file         : test_header_presence.py
#   file_relpath : tests/rules/test_header_presence.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Header-presence rule: a file must start with a block comment."""

from __future__ import annotations

from headmatch.rules.header_presence import HeaderPresenceRule, has_header_comment
from headmatch.rules.types import MessageId
from headmatch.utils.text import Position
from tests.conftest import parametrize


@parametrize(
    ("source", "expected"),
    [
        ("/* header */\ncode();\n", True),
        ("/**\n * header\n */", True),
        ("#!/usr/bin/env node\n/* header */\n", True),
        ("#!/usr/bin/env node\r\n/* header */\r\n", True),
        (" /* indented */\n", False),
        ("\n/* after a blank line */\n", False),
        ("// line comment\n", False),
        ("#!/usr/bin/env node", False),
        ("", False),
    ],
)
def test_has_header_comment(source: str, expected: bool) -> None:
    assert has_header_comment(source) is expected


def test_violation_spans_the_whole_file() -> None:
    source = "code();\nmore();"
    violations = HeaderPresenceRule().check(source)
    assert len(violations) == 1
    violation = violations[0]
    assert violation.message_id is MessageId.FILE_MISSING_HEADER
    assert violation.message == "File missing header."
    assert (violation.start, violation.end) == (0, len(source))
    assert violation.end_position == Position(2, 7)
    assert not violation.fixable


def test_no_violation_with_header() -> None:
    assert HeaderPresenceRule().check("/* ok */") == []
