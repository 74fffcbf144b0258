# topmark:header:start
#
#   project      : HeadMatch
#   file         : header_format.py
#   file_relpath : src/headmatch/rules/header_format.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Verify the content and format of a file's leading comment.

[`HeaderFormatRule`][headmatch.rules.header_format.HeaderFormatRule] wires the
template engine to whole source files:

1. locate the leading comment with
   [`scan_leading_comments`][headmatch.source.scanner.scan_leading_comments];
2. match it against the configured template;
3. report a violation per problem and, where every placeholder can be filled
   (a valid captured value or a pattern default), attach a fix.

Rendered headers use the line break style detected in the source.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from headmatch.config.logging import get_logger
from headmatch.rules.types import Fix, MessageId, Violation, apply_fixes
from headmatch.source.scanner import (
    LeadingComments,
    find_insertion_offset,
    parse_comment_lines,
    scan_leading_comments,
)
from headmatch.template.formatter import TemplateFormatter
from headmatch.template.matcher import MatchOutcome, TemplateMatcher
from headmatch.template.pragmas import extract_pragmas_from_lines, merge_pragma_lines
from headmatch.template.shape import CommentShape, CommentStyle, default_shape
from headmatch.utils.text import LF, append_newlines, detect_eol, normalize_eol, offset_to_position

if TYPE_CHECKING:
    from headmatch.config.logging import HeadmatchLogger
    from headmatch.config.model import HeaderConfig
    from headmatch.template.matcher import Mismatch, PatternValues

logger: HeadmatchLogger = get_logger(__name__)

RULE_NAME: Final[str] = "header-format"


class HeaderFormatRule:
    """Check and fix the leading header comment of source files.

    The rule is stateless between calls; one instance can check any number
    of files with the same configuration.

    Args:
        config (HeaderConfig): Frozen header configuration.
    """

    name: Final[str] = RULE_NAME

    def __init__(self, config: HeaderConfig) -> None:
        self.config: HeaderConfig = config
        self.template: tuple[str, ...] = config.template_lines
        # Matching is EOL-agnostic: the matcher normalizes the shape to "\n".
        self.matcher: TemplateMatcher = TemplateMatcher(
            self.template, config.shape(LF), config.patterns
        )

    def formatter(self, eol: str) -> TemplateFormatter:
        """Return the formatter rendering the template with line breaks ``eol``."""
        return TemplateFormatter(self.template, self.config.shape(eol), self.config.patterns)

    def render(self, eol: str = LF) -> str:
        """Render the header with pattern defaults filled in."""
        return self.formatter(eol).format()

    # ---- Checking ------------------------------------------------------------

    def check(self, source: str) -> list[Violation]:
        """Return the violations found in ``source``, in source order."""
        eol: str = detect_eol(source)
        header: LeadingComments | None = scan_leading_comments(source)
        if header is None:
            return [self._missing_header(source, eol)]

        violations: list[Violation] = []
        if header.kind is not self.config.style:
            logger.debug(
                "Header is a %s comment, expected %s", header.kind.value, self.config.style.value
            )
            violations.append(self._content_mismatch(source, header, eol, {}, None))
        else:
            outcome: MatchOutcome = self.matcher.match_fragments(header.fragments)
            if not outcome.matched:
                violations.append(
                    self._content_mismatch(
                        source, header, eol, outcome.pattern_values, outcome.mismatch
                    )
                )
            elif outcome.invalid_values:
                names: str = ", ".join(sorted({name for name, _ in outcome.invalid_values}))
                violations.append(
                    Violation.at(
                        source,
                        MessageId.INVALID_PATTERN_VALUE,
                        header.start,
                        header.end,
                        detail=names,
                    )
                )

        trailing: Violation | None = self._trailing_newlines(source, header, eol)
        if trailing is not None:
            violations.append(trailing)
        return violations

    def fix(self, source: str) -> str:
        """Return ``source`` with every available fix applied."""
        return apply_fixes(source, self.check(source))

    # ---- Violations ----------------------------------------------------------

    def _missing_header(self, source: str, eol: str) -> Violation:
        offset: int = find_insertion_offset(source)
        formatter: TemplateFormatter = self.formatter(eol)
        fix: Fix | None = None
        if formatter.unresolved():
            logger.info("Missing header cannot be fixed: patterns without default values")
        else:
            count: int = (
                1 if self.config.trailing_newlines is None else self.config.trailing_newlines
            )
            text: str = append_newlines(formatter.format(), eol, count)
            if offset and source[offset - 1] not in "\r\n":
                # Shebang line without a line break of its own.
                text = eol + text
            fix = Fix(offset, offset, text)
        return Violation.at(source, MessageId.MISSING_HEADER, offset, offset, fix=fix)

    def _content_mismatch(
        self,
        source: str,
        header: LeadingComments,
        eol: str,
        values: PatternValues,
        mismatch: Mismatch | None,
    ) -> Violation:
        lines: tuple[str, ...] = self.template
        if self.config.preserve_pragmas:
            pragmas: list[str] = [
                p for p in self._header_pragmas(header, eol) if p not in self.template
            ]
            lines = merge_pragma_lines(lines, pragmas)
        formatter: TemplateFormatter = self.formatter(eol).with_lines(lines)

        fix: Fix | None = None
        unresolved: list[str] = formatter.unresolved(values)
        if unresolved:
            logger.info("Header cannot be fixed: no value for %s", ", ".join(unresolved))
        else:
            fix = Fix(header.start, header.end, formatter.format(values))

        detail: str | None = None
        if mismatch is not None and mismatch.raw_offset is not None:
            where = offset_to_position(source, mismatch.raw_offset)
            detail = f"{mismatch.kind.value} differs at {where.line}:{where.column}"
        return Violation.at(
            source,
            MessageId.HEADER_CONTENT_MISMATCH,
            header.start,
            header.end,
            fix=fix,
            detail=detail,
        )

    def _trailing_newlines(
        self, source: str, header: LeadingComments, eol: str
    ) -> Violation | None:
        required: int | None = self.config.trailing_newlines
        if not required or header.content_offset is None:
            return None
        expected: str = eol * required
        if source[header.end : header.content_offset] == expected:
            return None
        return Violation.at(
            source,
            MessageId.TRAILING_NEWLINES_MISMATCH,
            header.end,
            header.content_offset,
            fix=Fix(header.end, header.content_offset, expected),
        )

    def _header_pragmas(self, header: LeadingComments, eol: str) -> list[str]:
        if header.kind is CommentStyle.LINE:
            lines: list[str] = [f.text for f in header.fragments]
        else:
            # A comment of another kind is read with that kind's default decoration.
            shape: CommentShape = (
                self.config.shape(eol)
                if header.kind is self.config.style
                else default_shape(header.kind, eol)
            )
            text: str = normalize_eol("".join(f.text for f in header.fragments))
            lines = parse_comment_lines(text, shape.normalized())
        return extract_pragmas_from_lines(lines)
