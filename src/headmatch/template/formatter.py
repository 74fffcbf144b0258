# topmark:header:start
#
#   project      : HeadMatch
#   file         : formatter.py
#   file_relpath : src/headmatch/template/formatter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Template formatter: render a template into concrete comment text.

The formatter is the inverse of
[`TemplateMatcher`][headmatch.template.matcher.TemplateMatcher]: for any
template and shape, feeding the rendered comment back into the matcher (with
the same template, shape and registry) reports a match as long as every
placeholder receives a value that satisfies its pattern.

Rendering per style (``bp``/``bs``/``lp`` = block prefix/suffix, line prefix):

- block:  ``/*`` + bp + lines joined by eol + bs + ``*/``
- line:   ``//`` + bp (only if set), ``//`` + each line, ``//`` + bs (only if set),
  joined by eol
- markup: ``<!--`` + bp + lines joined by eol + bs + ``-->``

Each line is ``lp + template line`` right-trimmed. Placeholders are then filled
left to right, per pattern name, with the next supplied value or the pattern
default; an occurrence without either keeps its ``(name)`` text. The final
output is right-trimmed once.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from headmatch.config.logging import get_logger
from headmatch.template.patterns import EMPTY_REGISTRY, locate_patterns
from headmatch.template.shape import CommentShape, CommentStyle

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from headmatch.config.logging import HeadmatchLogger
    from headmatch.template.patterns import PatternDefinition

logger: HeadmatchLogger = get_logger(__name__)


class _ValueQueue:
    """Per-call accumulator handing out values in template-scan order."""

    def __init__(
        self,
        registry: Mapping[str, PatternDefinition],
        pattern_values: Mapping[str, Sequence[str | None]] | None,
    ) -> None:
        self._registry = registry
        self._queues: dict[str, list[str | None]] = {
            name: list(values) for name, values in (pattern_values or {}).items()
        }

    def next(self, name: str) -> str | None:
        queue: list[str | None] = self._queues.get(name, [])
        value: str | None = queue.pop(0) if queue else None
        if value is None:
            value = self._registry[name].default_value
        return value


@dataclass(frozen=True)
class TemplateFormatter:
    """Render a template for a comment shape.

    Attributes:
        template (tuple[str, ...]): Template lines.
        shape (CommentShape): Resolved comment decoration (its ``eol`` is used).
        registry (Mapping[str, PatternDefinition]): Known patterns.
    """

    template: tuple[str, ...]
    shape: CommentShape
    registry: Mapping[str, PatternDefinition] = EMPTY_REGISTRY

    def with_lines(self, lines: Sequence[str]) -> TemplateFormatter:
        """Return a formatter for other template lines and the same shape."""
        return replace(self, template=tuple(lines))

    def format(self, pattern_values: Mapping[str, Sequence[str | None]] | None = None) -> str:
        """Render the comment.

        Args:
            pattern_values (Mapping[str, Sequence[str | None]] | None): Values per
                pattern name, consumed in template-scan order; ``None`` entries
                and missing entries fall back to the pattern default.

        Returns:
            str: The complete comment text, delimiters included.
        """
        queue = _ValueQueue(self.registry, pattern_values)
        prefix: str = self.shape.line_prefix
        body: list[str] = [self._fill(f"{prefix}{line}".rstrip(), queue) for line in self.template]
        shape: CommentShape = self.shape
        style: CommentStyle = shape.style
        if style is CommentStyle.LINE:
            lines: list[str] = []
            if shape.block_prefix:
                lines.append(f"{style.opener}{shape.block_prefix}")
            lines.extend(f"{style.opener}{line}" for line in body)
            if shape.block_suffix:
                lines.append(f"{style.opener}{shape.block_suffix}")
            text: str = shape.eol.join(lines)
        else:
            text = (
                f"{style.opener}{shape.block_prefix}{shape.eol.join(body)}"
                f"{shape.block_suffix}{style.closer}"
            )
        return text.rstrip()

    def unresolved(
        self, pattern_values: Mapping[str, Sequence[str | None]] | None = None
    ) -> list[str]:
        """Return the pattern names of occurrences that would stay unfilled.

        An occurrence is unresolved when it gets neither a supplied value nor a
        default. The list is in template-scan order and may repeat names.
        """
        queue = _ValueQueue(self.registry, pattern_values)
        missing: list[str] = []
        for line in self.template:
            for loc in locate_patterns(f"{self.shape.line_prefix}{line}", self.registry):
                if queue.next(loc.name) is None:
                    missing.append(loc.name)
        return missing

    def _fill(self, line: str, queue: _ValueQueue) -> str:
        parts: list[str] = []
        cursor: int = 0
        for loc in locate_patterns(line, self.registry):
            parts.append(line[cursor : loc.index])
            value: str | None = queue.next(loc.name)
            if value is None:
                logger.debug("No value or default for pattern %r; keeping placeholder", loc.name)
                value = line[loc.index : loc.end]
            parts.append(value)
            cursor = loc.end
        parts.append(line[cursor:])
        return "".join(parts)


def format_template(
    template: Sequence[str],
    shape: CommentShape,
    registry: Mapping[str, PatternDefinition] = EMPTY_REGISTRY,
    pattern_values: Mapping[str, Sequence[str | None]] | None = None,
) -> str:
    """Render ``template`` as comment text for ``shape``.

    Args:
        template (Sequence[str]): Template lines.
        shape (CommentShape): Resolved comment decoration.
        registry (Mapping[str, PatternDefinition]): Known patterns.
        pattern_values (Mapping[str, Sequence[str | None]] | None): Values per
            pattern name; see [`TemplateFormatter.format`][].

    Returns:
        str: The rendered comment.
    """
    return TemplateFormatter(tuple(template), shape, registry).format(pattern_values)
