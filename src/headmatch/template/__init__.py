# topmark:header:start
#
#   project      : HeadMatch
#   file         : __init__.py
#   file_relpath : src/headmatch/template/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Header template engine: matching, formatting and pragma handling.

Everything in this package is a pure, stateless transformation over its
inputs. Configuration objects (shapes, pattern registries) are immutable and
may be shared between calls and threads.
"""

from __future__ import annotations

from headmatch.template.formatter import TemplateFormatter, format_template
from headmatch.template.fragments import CommentFragment, Cursor, fragments_from_comment
from headmatch.template.matcher import (
    MatchOutcome,
    Mismatch,
    MismatchKind,
    PatternValues,
    TemplateMatcher,
    match,
)
from headmatch.template.patterns import (
    PatternDefinition,
    PatternLocation,
    PatternRegistry,
    locate_patterns,
    substitute_variables,
)
from headmatch.template.pragmas import extract_pragmas, merge_into_footer, merge_pragma_lines
from headmatch.template.shape import CommentShape, CommentStyle, default_shape, resolve_shape

__all__ = [
    "CommentFragment",
    "CommentShape",
    "CommentStyle",
    "Cursor",
    "MatchOutcome",
    "Mismatch",
    "MismatchKind",
    "PatternDefinition",
    "PatternLocation",
    "PatternRegistry",
    "PatternValues",
    "TemplateFormatter",
    "TemplateMatcher",
    "default_shape",
    "extract_pragmas",
    "format_template",
    "fragments_from_comment",
    "locate_patterns",
    "match",
    "merge_into_footer",
    "merge_pragma_lines",
    "resolve_shape",
    "substitute_variables",
]
