# topmark:header:start
#
#   project      : HeadMatch
#   file         : header_presence.py
#   file_relpath : src/headmatch/rules/header_presence.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Verify that a file starts with a block comment.

A much simpler check than the header-format rule: after an optional shebang
line, the file must start with ``/*``. Whitespace before the comment is not
skipped and nothing is offered as a fix.
"""

from __future__ import annotations

import re
from typing import Final

from headmatch.rules.types import MessageId, Violation
from headmatch.source.scanner import SHEBANG
from headmatch.template.shape import CommentStyle

RULE_NAME: Final[str] = "header-presence"

_RE_FIRST_EOL: Final[re.Pattern[str]] = re.compile(r"\r\n|\r|\n")


def has_header_comment(source: str) -> bool:
    """Return True if ``source`` (after a shebang line) starts with ``/*``."""
    text: str = source
    if text.startswith(SHEBANG):
        m: re.Match[str] | None = _RE_FIRST_EOL.search(text)
        if m:
            text = text[m.end() :]
    return text.startswith(CommentStyle.BLOCK.opener)


class HeaderPresenceRule:
    """Report files that do not start with a block comment."""

    name: Final[str] = RULE_NAME

    def check(self, source: str) -> list[Violation]:
        """Return a ``file-missing-header`` violation spanning ``source``, if any."""
        if has_header_comment(source):
            return []
        return [Violation.at(source, MessageId.FILE_MISSING_HEADER, 0, len(source))]
