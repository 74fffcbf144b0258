# topmark:header:start
#
#   project      : HeadMatch
#   file         : patterns.py
#   file_relpath : src/headmatch/template/patterns.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Named patterns and the placeholder grammar of header templates.

Template text may embed *placeholders* of the form ``(name)``. A placeholder
is only recognized when ``name`` is registered in the
[`PatternRegistry`][headmatch.template.patterns.PatternRegistry]; any other
parenthesized word (``(bad)``, ``(c)``) is literal text.

Two substitution layers exist and must not be confused:

- ``{name}`` *variables* are plain string substitutions applied to the raw
  template text before anything else (see
  [`substitute_variables`][headmatch.template.patterns.substitute_variables]);
- ``(name)`` *patterns* are regex fragments used by the matcher to capture
  values and by the formatter to insert values or defaults.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from headmatch.config.logging import get_logger
from headmatch.core.errors import HeadmatchConfigError
from headmatch.utils.text import escape_regex

if TYPE_CHECKING:
    from collections.abc import Iterable

    from headmatch.config.logging import HeadmatchLogger

logger: HeadmatchLogger = get_logger(__name__)

_RE_PLACEHOLDER: Final[re.Pattern[str]] = re.compile(r"\((\w+)\)")
_RE_PATTERN_NAME: Final[re.Pattern[str]] = re.compile(r"^\w+$")
# Back-references and conditionals address groups by number or name, which
# shift once a pattern is embedded in a composite regex.
_RE_GROUP_REFERENCE: Final[re.Pattern[str]] = re.compile(
    r"(?<!\\)(?:\\\\)*(?:\\[1-9]|\(\?P=|\(\?\()"
)


@dataclass(frozen=True)
class PatternDefinition:
    """A named regex fragment with an optional default value.

    Attributes:
        name (str): Identifier referenced as ``(name)`` from template text.
        regex (str): Regex fragment; inserted unescaped into composite regexes.
        default_value (str | None): Value rendered by the formatter when no
            captured value is available.
    """

    name: str
    regex: str
    default_value: str | None = None

    def validates(self, value: str) -> bool:
        """Return True if ``value`` on its own fully matches this pattern."""
        return re.fullmatch(self.regex, value) is not None


@dataclass(frozen=True)
class PatternLocation:
    """Location of one placeholder occurrence inside a string."""

    name: str
    index: int
    length: int

    @property
    def end(self) -> int:
        """Offset just past the closing parenthesis."""
        return self.index + self.length


class PatternRegistry(Mapping[str, PatternDefinition]):
    """Immutable mapping of pattern name to [`PatternDefinition`][].

    The registry is validated once at construction time: names must be plain
    word identifiers, a name may only be defined once and each regex must compile
    on its own and stay valid when embedded in a composite regex.
    It is never mutated afterwards and can be shared freely.
    """

    __slots__ = ("_patterns",)

    def __init__(self, definitions: Iterable[PatternDefinition] = ()) -> None:
        patterns: dict[str, PatternDefinition] = {}
        for definition in definitions:
            if not _RE_PATTERN_NAME.match(definition.name):
                raise HeadmatchConfigError(
                    f"Invalid pattern name {definition.name!r}: expected word characters only"
                )
            if definition.name in patterns:
                raise HeadmatchConfigError(f"Pattern {definition.name!r} is defined twice")
            _check_embeddable(definition)
            patterns[definition.name] = definition
        self._patterns: Mapping[str, PatternDefinition] = patterns

    @classmethod
    def from_mapping(cls, table: Mapping[str, Mapping[str, str]]) -> PatternRegistry:
        """Build a registry from a ``{name: {pattern, default_value?}}`` table."""
        definitions: list[PatternDefinition] = []
        for name, entry in table.items():
            regex: str | None = entry.get("pattern")
            if regex is None:
                raise HeadmatchConfigError(f"Pattern {name!r} is missing its 'pattern' key")
            definitions.append(
                PatternDefinition(name=name, regex=regex, default_value=entry.get("default_value"))
            )
        return cls(definitions)

    def __getitem__(self, name: str) -> PatternDefinition:
        return self._patterns[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._patterns)

    def __len__(self) -> int:
        return len(self._patterns)

    def __repr__(self) -> str:
        return f"PatternRegistry({list(self._patterns.values())!r})"

    def __hash__(self) -> int:
        return hash(tuple(self._patterns.values()))


def _check_embeddable(definition: PatternDefinition) -> None:
    """Raise unless ``definition.regex`` can be embedded in a composite regex.

    Plain (numbered) groups are fine. Named groups clash when a placeholder is
    used twice, and group references point elsewhere once embedded.

    Raises:
        HeadmatchConfigError: If the regex does not compile, defines a named
            group or refers to a group.
    """
    where: str = f"Pattern {definition.name!r} ({definition.regex!r})"
    try:
        compiled: re.Pattern[str] = re.compile(definition.regex)
    except re.error as exc:
        raise HeadmatchConfigError(f"{where} has an invalid regex: {exc}") from exc
    if compiled.groupindex:
        names: str = ", ".join(compiled.groupindex)
        raise HeadmatchConfigError(
            f"{where} defines named group(s) {names}: use plain or (?:...) groups"
        )
    if _RE_GROUP_REFERENCE.search(definition.regex):
        raise HeadmatchConfigError(f"{where} refers to a group by number or name")


EMPTY_REGISTRY: Final[PatternRegistry] = PatternRegistry()


def locate_patterns(
    text: str, registry: Mapping[str, PatternDefinition]
) -> list[PatternLocation]:
    """Return the registered placeholders of ``text`` in left-to-right order.

    Placeholders whose name is not in ``registry`` are skipped (they are
    literal text). Matches never overlap.
    """
    return [
        PatternLocation(name=m.group(1), index=m.start(), length=m.end() - m.start())
        for m in _RE_PLACEHOLDER.finditer(text)
        if m.group(1) in registry
    ]


def split_placeholders(
    text: str, registry: Mapping[str, PatternDefinition]
) -> list[str | PatternLocation]:
    """Split ``text`` into literal runs and placeholder locations.

    Empty literal runs are omitted.
    """
    parts: list[str | PatternLocation] = []
    cursor: int = 0
    for loc in locate_patterns(text, registry):
        if loc.index > cursor:
            parts.append(text[cursor : loc.index])
        parts.append(loc)
        cursor = loc.end
    if cursor < len(text):
        parts.append(text[cursor:])
    return parts


class GroupNamer:
    """Hand out unique regex group names, one per placeholder occurrence.

    Occurrence ``n`` of the whole template gets group ``_hm<n>``; the caller
    keeps the ordered ``(group, pattern name)`` list to read captures back.
    """

    def __init__(self) -> None:
        self.groups: list[tuple[str, str]] = []

    def next(self, pattern_name: str) -> str:
        """Reserve and return the group name for the next occurrence."""
        group: str = f"_hm{len(self.groups)}"
        self.groups.append((group, pattern_name))
        return group


def build_pattern_regex(
    text: str,
    registry: Mapping[str, PatternDefinition],
    namer: GroupNamer,
    *,
    lenient: bool = False,
) -> str:
    """Return a regex source matching ``text`` with its placeholders.

    Every literal run is escaped exactly once; every placeholder becomes a named
    capturing group holding the pattern regex unescaped. With ``lenient=True``
    placeholders capture any run of characters on the line instead, which lets
    callers recover values that violate their pattern.
    """
    segments: list[str] = []
    for part in split_placeholders(text, registry):
        if isinstance(part, str):
            segments.append(escape_regex(part))
            continue
        group: str = namer.next(part.name)
        body: str = ".*?" if lenient else f"(?:{registry[part.name].regex})"
        segments.append(f"(?P<{group}>{body})")
    return "".join(segments)


def substitute_variables(text: str, variables: Mapping[str, str] | None) -> str:
    """Replace every ``{name}`` in ``text`` with ``variables[name]``.

    Unknown ``{name}`` references are left untouched.
    """
    if not variables:
        return text
    for name, value in variables.items():
        text = text.replace(f"{{{name}}}", value)
    logger.trace("Substituted %d variable(s)", len(variables))
    return text
