# topmark:header:start
#
#   project      : HeadMatch
#   file         : types.py
#   file_relpath : src/headmatch/rules/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Violation and fix records produced by the HeadMatch rules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from headmatch.config.logging import get_logger
from headmatch.utils.text import Position, offset_to_position

if TYPE_CHECKING:
    from collections.abc import Iterable

    from headmatch.config.logging import HeadmatchLogger

logger: HeadmatchLogger = get_logger(__name__)


class MessageId(str, Enum):
    """Stable identifiers of every violation a rule can report."""

    MISSING_HEADER = "missing-header"
    HEADER_CONTENT_MISMATCH = "header-content-mismatch"
    INVALID_PATTERN_VALUE = "invalid-pattern-value"
    TRAILING_NEWLINES_MISMATCH = "trailing-newlines-mismatch"
    FILE_MISSING_HEADER = "file-missing-header"

    @property
    def message(self) -> str:
        """Human readable message for this violation."""
        return _MESSAGES[self]


_MESSAGES: dict[MessageId, str] = {
    MessageId.MISSING_HEADER: "No header found.",
    MessageId.HEADER_CONTENT_MISMATCH: "Header does not include expected content.",
    MessageId.INVALID_PATTERN_VALUE: "Header value does not satisfy its pattern.",
    MessageId.TRAILING_NEWLINES_MISMATCH: "Mismatched trailing newlines",
    MessageId.FILE_MISSING_HEADER: "File missing header.",
}


@dataclass(frozen=True)
class Fix:
    """Replace ``source[start:end]`` with ``text``."""

    start: int
    end: int
    text: str

    def apply(self, source: str) -> str:
        """Return ``source`` with this fix applied."""
        return source[: self.start] + self.text + source[self.end :]


@dataclass(frozen=True)
class Violation:
    """One problem found in a source file.

    Attributes:
        message_id (MessageId): What kind of problem this is.
        start (int): Source offset where the problem starts.
        end (int): Source offset where the problem ends.
        position (Position): ``start`` as (1-based line, 0-based column).
        end_position (Position): ``end`` as (1-based line, 0-based column).
        fix (Fix | None): Automatic fix, when one can be offered.
        detail (str | None): Extra context appended to the message.
    """

    message_id: MessageId
    start: int
    end: int
    position: Position
    end_position: Position
    fix: Fix | None = None
    detail: str | None = None

    @classmethod
    def at(
        cls,
        source: str,
        message_id: MessageId,
        start: int,
        end: int,
        *,
        fix: Fix | None = None,
        detail: str | None = None,
    ) -> Violation:
        """Create a violation for ``source[start:end]`` with computed positions."""
        return cls(
            message_id=message_id,
            start=start,
            end=end,
            position=offset_to_position(source, start),
            end_position=offset_to_position(source, end),
            fix=fix,
            detail=detail,
        )

    @property
    def message(self) -> str:
        """The message, with ``detail`` appended when present."""
        if self.detail:
            return f"{self.message_id.message} ({self.detail})"
        return self.message_id.message

    @property
    def fixable(self) -> bool:
        """Whether this violation carries a fix."""
        return self.fix is not None


def apply_fixes(source: str, violations: Iterable[Violation]) -> str:
    """Apply every non-overlapping fix of ``violations`` to ``source``.

    Fixes are applied in source order; a fix overlapping one already taken is
    skipped (it is expected to be found again by a subsequent check).
    """
    fixes: list[Fix] = sorted(
        (v.fix for v in violations if v.fix is not None), key=lambda f: (f.start, f.end)
    )
    parts: list[str] = []
    cursor: int = 0
    for fix in fixes:
        if fix.start < cursor:
            logger.debug("Skipping overlapping fix at %d-%d", fix.start, fix.end)
            continue
        parts.append(source[cursor : fix.start])
        parts.append(fix.text)
        cursor = fix.end
    parts.append(source[cursor:])
    return "".join(parts)
