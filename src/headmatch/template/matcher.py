# topmark:header:start
#
#   project      : HeadMatch
#   file         : matcher.py
#   file_relpath : src/headmatch/template/matcher.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Template matcher: does an existing header comment satisfy the template?

The matcher works on the *concatenation* of the EOL-normalized comment
fragments rather than walking fragments one by one, so the expected prefix,
body and suffix may straddle fragment boundaries arbitrarily (a docblock
opener may be its own fragment, line comments arrive one per source line).

Matching is decided by three anchored checks on the same concatenation:

1. the text starts with ``block_prefix``;
2. the text ends with ``block_suffix`` and the two do not overlap;
3. the remaining middle starts with the composite body regex, built from
   ``line_prefix`` + template line (right-trimmed), literal runs escaped once
   and placeholders replaced by their pattern regex in a named group. The
   body must end on a line boundary; further lines before the suffix (such
   as ``@directive`` lines added by other tools) are accepted.

Every captured value is then validated again in isolation against its own
pattern regex. A value failing that second pass is recorded as ``None`` in its
slot; the header still counts as matched (the *shape* is right, the *value*
is not) and it is up to the caller to decide what that means for autofix.

When the strict match fails, a lenient regex (placeholders capture any text on
their line) is tried so valid existing values can be carried over into a
replacement header.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Final

from headmatch.config.logging import get_logger
from headmatch.template.fragments import (
    CommentFragment,
    Cursor,
    FragmentText,
    fragments_from_comment,
    separator_for,
)
from headmatch.template.patterns import (
    EMPTY_REGISTRY,
    GroupNamer,
    build_pattern_regex,
    locate_patterns,
)
from headmatch.template.shape import CommentShape, CommentStyle
from headmatch.utils.text import LF, normalize_eol

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from headmatch.config.logging import HeadmatchLogger
    from headmatch.template.patterns import PatternDefinition

logger: HeadmatchLogger = get_logger(__name__)

# Trailing horizontal whitespace tolerated at the end of every template line.
_TRAILING_WS: Final[str] = r"[ \t]*"
_LINE_JOIN: Final[str] = r"\n"
_LINE_BOUNDARY: Final[str] = r"(?=\n|\Z)"

PatternValues = dict[str, list[str | None]]


class MismatchKind(str, Enum):
    """Which part of the expected header failed to match."""

    PREFIX = "prefix"
    BODY = "body"
    SUFFIX = "suffix"


@dataclass(frozen=True)
class Mismatch:
    """Where the actual header first departs from the expected one.

    Attributes:
        kind (MismatchKind): Failing part of the header.
        position (int): Offset in the normalized fragment concatenation.
        cursor (Cursor): ``position`` as ``(fragment_index, char_offset)``.
        raw_offset (int | None): ``position`` as a source offset, when the
            fragments carry spans.
    """

    kind: MismatchKind
    position: int
    cursor: Cursor
    raw_offset: int | None


@dataclass(frozen=True)
class MatchOutcome:
    """Result of matching fragments against a template.

    Attributes:
        matched (bool): Whether prefix, body and suffix all matched.
        pattern_values (PatternValues): Captured values per pattern name, one slot
            per placeholder occurrence in template order (``None`` = invalid).
            For a failed match the values come from the lenient capture and may
            be empty.
        mismatch (Mismatch | None): Location of the failure when not matched.
    """

    matched: bool
    pattern_values: PatternValues = field(default_factory=dict)
    mismatch: Mismatch | None = None

    def as_result(self) -> PatternValues | None:
        """Return the pattern values on a match, ``None`` otherwise."""
        return self.pattern_values if self.matched else None

    @property
    def invalid_values(self) -> list[tuple[str, int]]:
        """Return ``(pattern name, occurrence index)`` of every ``None`` slot."""
        return [
            (name, i)
            for name, values in self.pattern_values.items()
            for i, value in enumerate(values)
            if value is None
        ]


class TemplateMatcher:
    """Match comment fragments against a template under a comment shape.

    The composite regexes are compiled once per instance; an instance holds no
    per-call state and can be reused for any number of headers.

    Args:
        template (Sequence[str]): Expected lines (literal text and placeholders).
        shape (CommentShape): Resolved comment decoration.
        registry (Mapping[str, PatternDefinition]): Known patterns.
    """

    def __init__(
        self,
        template: Sequence[str],
        shape: CommentShape,
        registry: Mapping[str, PatternDefinition] = EMPTY_REGISTRY,
    ) -> None:
        self.shape: CommentShape = shape.normalized()
        self.registry: Mapping[str, PatternDefinition] = registry
        self.template: tuple[str, ...] = tuple(normalize_eol(line) for line in template)
        self.separator: str = separator_for(self.shape.style)

        self.expected_lines: tuple[str, ...] = tuple(
            f"{self.shape.line_prefix}{line}".rstrip() for line in self.template
        )
        self.prefix, self.suffix = self._anchors()

        namer = GroupNamer()
        self._body_re: re.Pattern[str] = re.compile(self._body_source(namer, lenient=False))
        self._groups: list[tuple[str, str]] = namer.groups

        lenient_namer = GroupNamer()
        self._lenient_re: re.Pattern[str] = re.compile(
            self._body_source(lenient_namer, lenient=True)
        )
        self._lenient_groups: list[tuple[str, str]] = lenient_namer.groups

        self._line_res: list[re.Pattern[str]] = [
            re.compile(build_pattern_regex(line, registry, GroupNamer()) + _TRAILING_WS)
            for line in self.expected_lines
        ]
        logger.trace(
            "Body regex for %s template: %s", self.shape.style.value, self._body_re.pattern
        )

    def _anchors(self) -> tuple[str, str]:
        prefix: str = self.shape.block_prefix
        suffix: str = self.shape.block_suffix
        if self.shape.style is not CommentStyle.LINE:
            return prefix, suffix
        # Line style: prefix and suffix are whole lines of their own, and the
        # trailing suffix line is compared right-trimmed like the rendered output.
        has_suffix: bool = bool(suffix)
        suffix = suffix.rstrip()
        if self.expected_lines:
            return (prefix + LF if prefix else ""), (LF + suffix if has_suffix else "")
        if prefix and has_suffix:
            return prefix + LF, suffix
        return prefix.rstrip(), suffix

    def _body_source(self, namer: GroupNamer, *, lenient: bool) -> str:
        if not self.expected_lines:
            return ""
        body: str = _LINE_JOIN.join(
            build_pattern_regex(line, self.registry, namer, lenient=lenient) + _TRAILING_WS
            for line in self.expected_lines
        )
        return body + _LINE_BOUNDARY

    # ---- Public API ----------------------------------------------------------

    def match_fragments(self, fragments: Sequence[CommentFragment]) -> MatchOutcome:
        """Match ``fragments`` against the template.

        Args:
            fragments (Sequence[CommentFragment]): The header comment content.

        Returns:
            MatchOutcome: The match verdict, captured values and mismatch info.
        """
        joined: FragmentText = FragmentText.join(fragments, self.separator)
        text: str = joined.text
        if self.shape.style is CommentStyle.LINE:
            text = text.rstrip(" \t")
        start: int = len(self.prefix)
        end: int = len(text) - len(self.suffix)

        if not text.startswith(self.prefix):
            pos: int = len(os.path.commonprefix([self.prefix, text]))
            return self._mismatch(joined, MismatchKind.PREFIX, pos)

        if end < start or not text.endswith(self.suffix):
            return self._mismatch(joined, MismatchKind.SUFFIX, max(end, start))

        m: re.Match[str] | None = self._body_re.match(text, start, end)
        if m is None:
            lenient: re.Match[str] | None = self._lenient_re.match(text, start, end)
            values: PatternValues = (
                self._collect(lenient, self._lenient_groups)
                if lenient is not None
                else self._empty_values()
            )
            return self._mismatch(
                joined,
                MismatchKind.BODY,
                self._locate_divergence(text, start, end),
                values,
            )

        values = self._collect(m, self._groups)
        logger.debug("Header matched; captured values: %s", values)
        return MatchOutcome(matched=True, pattern_values=values)

    def match_comment(self, comment: str) -> MatchOutcome:
        """Match a complete rendered comment (delimiters included)."""
        return self.match_fragments(fragments_from_comment(comment, self.shape.style))

    # ---- Internals -----------------------------------------------------------

    def _mismatch(
        self,
        joined: FragmentText,
        kind: MismatchKind,
        pos: int,
        values: PatternValues | None = None,
    ) -> MatchOutcome:
        mismatch = Mismatch(
            kind=kind,
            position=pos,
            cursor=joined.cursor_at(pos),
            raw_offset=joined.raw_offset_at(pos),
        )
        logger.debug("Header mismatch: %s", mismatch)
        return MatchOutcome(
            matched=False,
            pattern_values=self._empty_values() if values is None else values,
            mismatch=mismatch,
        )

    def _empty_values(self) -> PatternValues:
        return {name: [] for name in self.registry}

    def _collect(self, m: re.Match[str], groups: list[tuple[str, str]]) -> PatternValues:
        values: PatternValues = self._empty_values()
        for group, name in groups:
            captured: str | None = m.group(group)
            if captured is not None and self.registry[name].validates(captured):
                values[name].append(captured)
            else:
                logger.debug("Value %r does not satisfy pattern %r", captured, name)
                values[name].append(None)
        return values

    def _locate_divergence(self, text: str, start: int, end: int) -> int:
        """Return the first position of the body where matching fails line by line."""
        pos: int = start
        for i, line_re in enumerate(self._line_res):
            if i:
                if pos >= end or text[pos] != LF:
                    return pos
                pos += 1
            m: re.Match[str] | None = line_re.match(text, pos, end)
            if m is None:
                expected: str = self.expected_lines[i]
                if not locate_patterns(expected, self.registry):
                    pos += len(os.path.commonprefix([expected, text[pos:end]]))
                return pos
            pos = m.end()
        return pos


def match(
    fragments: Sequence[CommentFragment],
    template: Sequence[str],
    shape: CommentShape,
    registry: Mapping[str, PatternDefinition] = EMPTY_REGISTRY,
) -> PatternValues | None:
    """Match ``fragments`` against ``template``.

    Args:
        fragments (Sequence[CommentFragment]): Header comment content.
        template (Sequence[str]): Expected lines.
        shape (CommentShape): Resolved comment decoration.
        registry (Mapping[str, PatternDefinition]): Known patterns.

    Returns:
        PatternValues | None: Captured values per pattern on a match, ``None``
            when the header does not match.
    """
    return TemplateMatcher(template, shape, registry).match_fragments(fragments).as_result()
