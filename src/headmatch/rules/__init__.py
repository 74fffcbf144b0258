# topmark:header:start
#
#   project      : HeadMatch
#   file         : __init__.py
#   file_relpath : src/headmatch/rules/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lint rules applying the header engine to whole source files.

- [`HeaderFormatRule`][headmatch.rules.header_format.HeaderFormatRule] checks
  the leading comment against the configured template and offers fixes.
- [`HeaderPresenceRule`][headmatch.rules.header_presence.HeaderPresenceRule]
  only checks that a block comment comes first.
"""

from __future__ import annotations

from headmatch.rules.header_format import HeaderFormatRule
from headmatch.rules.header_presence import HeaderPresenceRule
from headmatch.rules.types import Fix, MessageId, Violation, apply_fixes

__all__ = [
    "Fix",
    "HeaderFormatRule",
    "HeaderPresenceRule",
    "MessageId",
    "Violation",
    "apply_fixes",
]
