# topmark:header:start
#
#   project      : HeadMatch
#   file         : model.py
#   file_relpath : src/headmatch/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `HeaderConfig`: an immutable, validated snapshot consumed by the rules.
    - `MutableHeaderConfig`: a mutable builder used while loading and merging
      configuration layers; it is frozen into `HeaderConfig`.

Freezing is where validation happens. A frozen config always has a template,
a known comment style and a compiled
[`PatternRegistry`][headmatch.template.patterns.PatternRegistry];
any problem is raised as [`HeadmatchConfigError`][headmatch.core.errors.HeadmatchConfigError]
before a single file is matched.

Variables (``[variables]``) are substituted into the template text and into
the three decoration strings at freeze time. Decoration strings left unset
stay ``None`` so the per-style defaults (which embed the source EOL) can be
resolved per file by [`HeaderConfig.shape`][headmatch.config.model.HeaderConfig.shape].
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any

from headmatch.config.getters import (
    get_bool_checked,
    get_int_checked,
    get_string_checked,
    get_string_list_checked,
    get_string_map_checked,
    get_table_checked,
)
from headmatch.config.keys import Toml
from headmatch.config.loaders import (
    find_config_file,
    load_config_table,
    load_template_text,
)
from headmatch.config.logging import get_logger
from headmatch.core.diagnostics import Diagnostic, DiagnosticLog
from headmatch.core.errors import HeadmatchConfigError
from headmatch.template.patterns import PatternRegistry, substitute_variables
from headmatch.template.shape import CommentShape, CommentStyle, resolve_shape
from headmatch.utils.text import LF, normalize_eol

if TYPE_CHECKING:
    from collections.abc import Mapping

    from headmatch.config.logging import HeadmatchLogger
    from headmatch.config.loaders import TomlTable

logger: HeadmatchLogger = get_logger(__name__)


class TemplateSource(str, Enum):
    """Where the header template text comes from."""

    STRING = "string"
    FILE = "file"


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True)
class HeaderConfig:
    """Immutable, validated header configuration.

    Attributes:
        source (TemplateSource): Origin of the template text.
        template_path (Path | None): Template file for ``source = "file"``.
        template_text (str): Template text with variables substituted.
        style (CommentStyle): Comment style of the header.
        block_prefix (str | None): Explicit block prefix (``None`` = style default).
        block_suffix (str | None): Explicit block suffix (``None`` = style default).
        line_prefix (str | None): Explicit line prefix (``None`` = style default).
        preserve_pragmas (bool): Carry directive lines over when replacing a header.
        trailing_newlines (int | None): Required line breaks between the header
            and the first content; ``None`` disables the check.
        variables (Mapping[str, str]): ``{name}`` substitutions.
        patterns (PatternRegistry): Named patterns for ``(name)`` placeholders.
        include_patterns (tuple[str, ...]): Gitwildmatch patterns selecting files.
        exclude_patterns (tuple[str, ...]): Gitwildmatch patterns excluding files.
        config_files (tuple[str, ...]): Config files merged into this snapshot.
        diagnostics (tuple[Diagnostic, ...]): Warnings collected while loading.
    """

    source: TemplateSource
    template_path: Path | None
    template_text: str
    style: CommentStyle
    block_prefix: str | None
    block_suffix: str | None
    line_prefix: str | None
    preserve_pragmas: bool
    trailing_newlines: int | None
    variables: Mapping[str, str]
    patterns: PatternRegistry
    include_patterns: tuple[str, ...]
    exclude_patterns: tuple[str, ...]
    config_files: tuple[str, ...]
    diagnostics: tuple[Diagnostic, ...]

    @property
    def template_lines(self) -> tuple[str, ...]:
        """The template split into lines (any line break variant)."""
        return tuple(normalize_eol(self.template_text).split(LF))

    def shape(self, eol: str = LF) -> CommentShape:
        """Return the resolved comment shape for a file using ``eol``."""
        return resolve_shape(
            self.style,
            eol=eol,
            block_prefix=self.block_prefix,
            block_suffix=self.block_suffix,
            line_prefix=self.line_prefix,
        )

    def thaw(self) -> MutableHeaderConfig:
        """Return a mutable copy of this snapshot (template text already resolved)."""
        return MutableHeaderConfig(
            source=TemplateSource.STRING.value,
            content=self.template_text,
            style=self.style.value,
            block_prefix=self.block_prefix,
            block_suffix=self.block_suffix,
            line_prefix=self.line_prefix,
            preserve_pragmas=self.preserve_pragmas,
            trailing_newlines=self.trailing_newlines,
            patterns={
                name: _pattern_entry(p.regex, p.default_value)
                for name, p in self.patterns.items()
            },
            include_patterns=list(self.include_patterns),
            exclude_patterns=list(self.exclude_patterns),
            config_files=list(self.config_files),
            diagnostics=DiagnosticLog.from_iterable(self.diagnostics),
        )


def _pattern_entry(regex: str, default_value: str | None) -> dict[str, str]:
    entry: dict[str, str] = {Toml.KEY_PATTERN: regex}
    if default_value is not None:
        entry[Toml.KEY_DEFAULT_VALUE] = default_value
    return entry


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableHeaderConfig:
    """Mutable configuration used while loading and merging layers.

    Every scalar is tri-state: ``None`` means "not set by this layer" and lets
    [`merge_with`][headmatch.config.model.MutableHeaderConfig.merge_with] keep
    the value of the layer below.
    """

    source: str | None = None
    content: str | None = None
    path: Path | None = None

    style: str | None = None
    block_prefix: str | None = None
    block_suffix: str | None = None
    line_prefix: str | None = None

    preserve_pragmas: bool | None = None
    trailing_newlines: int | None = None

    variables: dict[str, str] = field(default_factory=lambda: {})
    patterns: dict[str, dict[str, str]] = field(default_factory=lambda: {})

    include_patterns: list[str] = field(default_factory=lambda: [])
    exclude_patterns: list[str] = field(default_factory=lambda: [])

    # Provenance
    config_files: list[str] = field(default_factory=lambda: [])

    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> HeaderConfig:
        """Validate this draft and freeze it into a [`HeaderConfig`][].

        Raises:
            HeadmatchConfigError: If no template is configured, the template
                file cannot be read, the style is unknown, a line-style decoration spans
                several lines, ``trailing_newlines`` is negative or a pattern
                is invalid.
        """
        source: TemplateSource = self._resolve_source()
        if source is TemplateSource.FILE:
            if self.path is None:
                raise HeadmatchConfigError("source = 'file' requires a 'path'")
            raw_text: str = load_template_text(self.path)
        else:
            if self.content is None:
                raise HeadmatchConfigError("source = 'string' requires 'content'")
            raw_text = self.content

        try:
            style: CommentStyle = CommentStyle.parse(self.style or CommentStyle.BLOCK.value)
        except ValueError as exc:
            raise HeadmatchConfigError(
                f"Unknown comment style {self.style!r}: expected one of "
                f"{', '.join(s.value for s in CommentStyle)}"
            ) from exc

        if self.trailing_newlines is not None and self.trailing_newlines < 0:
            raise HeadmatchConfigError(
                f"trailing_newlines must not be negative (got {self.trailing_newlines})"
            )

        registry: PatternRegistry = PatternRegistry.from_mapping(self.patterns)
        variables: dict[str, str] = dict(self.variables)

        def _vars(value: str | None) -> str | None:
            return None if value is None else substitute_variables(value, variables)

        decorations: dict[str, str | None] = {
            Toml.KEY_BLOCK_PREFIX: _vars(self.block_prefix),
            Toml.KEY_BLOCK_SUFFIX: _vars(self.block_suffix),
            Toml.KEY_LINE_PREFIX: _vars(self.line_prefix),
        }
        if style is CommentStyle.LINE:
            # Every line comment holds exactly one line of decoration.
            for key, value in decorations.items():
                if value is not None and LF in normalize_eol(value):
                    raise HeadmatchConfigError(
                        f"{key} must not contain a line break with style = 'line'"
                    )

        frozen = HeaderConfig(
            source=source,
            template_path=self.path if source is TemplateSource.FILE else None,
            template_text=substitute_variables(raw_text, variables),
            style=style,
            block_prefix=decorations[Toml.KEY_BLOCK_PREFIX],
            block_suffix=decorations[Toml.KEY_BLOCK_SUFFIX],
            line_prefix=decorations[Toml.KEY_LINE_PREFIX],
            preserve_pragmas=True if self.preserve_pragmas is None else self.preserve_pragmas,
            trailing_newlines=self.trailing_newlines,
            variables=variables,
            patterns=registry,
            include_patterns=tuple(self.include_patterns),
            exclude_patterns=tuple(self.exclude_patterns),
            config_files=tuple(self.config_files),
            diagnostics=tuple(self.diagnostics.items),
        )
        logger.debug(
            "Frozen header config: style=%s, %d template line(s), %d pattern(s)",
            frozen.style.value,
            len(frozen.template_lines),
            len(registry),
        )
        return frozen

    def _resolve_source(self) -> TemplateSource:
        if self.source is None:
            # Infer from whichever template key is present; content wins.
            if self.content is not None:
                return TemplateSource.STRING
            if self.path is not None:
                return TemplateSource.FILE
            raise HeadmatchConfigError(
                "No header template configured: set 'content' or 'path'"
            )
        try:
            return TemplateSource(self.source)
        except ValueError as exc:
            raise HeadmatchConfigError(
                f"Unknown template source {self.source!r}: expected 'string' or 'file'"
            ) from exc

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableHeaderConfig:
        """Return the built-in defaults (block style, pragmas preserved)."""
        return cls(style=CommentStyle.BLOCK.value, preserve_pragmas=True)

    @classmethod
    def from_toml_dict(
        cls, data: TomlTable, config_file: Path | None = None
    ) -> MutableHeaderConfig:
        """Create a draft from a parsed HeadMatch table.

        A relative template ``path`` is resolved against the directory of
        ``config_file`` (or the current directory when there is none). Unknown
        keys and values of the wrong type are reported as warnings and ignored.

        Args:
            data (TomlTable): The ``[tool.headmatch]`` table or a
                ``headmatch.toml`` document.
            config_file (Path | None): File ``data`` was read from.

        Returns:
            MutableHeaderConfig: The resulting draft.
        """
        draft: MutableHeaderConfig = cls()
        diagnostics: DiagnosticLog = draft.diagnostics
        origin: str = str(config_file) if config_file else "<dict>"

        for key in data:
            if key not in Toml.known_top_level_keys():
                diagnostics.add_warning(f"Unknown configuration key '{key}' in {origin}")

        draft.source = get_string_checked(data, Toml.KEY_SOURCE, diagnostics)
        draft.content = get_string_checked(data, Toml.KEY_CONTENT, diagnostics)
        raw_path: str | None = get_string_checked(data, Toml.KEY_PATH, diagnostics)
        if raw_path is not None:
            base: Path = config_file.parent if config_file else Path.cwd()
            draft.path = (base / raw_path).resolve()

        draft.style = get_string_checked(data, Toml.KEY_STYLE, diagnostics)
        draft.block_prefix = get_string_checked(data, Toml.KEY_BLOCK_PREFIX, diagnostics)
        draft.block_suffix = get_string_checked(data, Toml.KEY_BLOCK_SUFFIX, diagnostics)
        draft.line_prefix = get_string_checked(data, Toml.KEY_LINE_PREFIX, diagnostics)

        draft.preserve_pragmas = get_bool_checked(data, Toml.KEY_PRESERVE_PRAGMAS, diagnostics)
        draft.trailing_newlines = get_int_checked(data, Toml.KEY_TRAILING_NEWLINES, diagnostics)

        draft.variables = get_string_map_checked(data, Toml.SECTION_VARIABLES, diagnostics)
        draft.patterns = _parse_patterns(
            get_table_checked(data, Toml.SECTION_PATTERNS, diagnostics), diagnostics
        )

        files_tbl: TomlTable = get_table_checked(data, Toml.SECTION_FILES, diagnostics)
        draft.include_patterns = get_string_list_checked(files_tbl, Toml.KEY_INCLUDE, diagnostics)
        draft.exclude_patterns = get_string_list_checked(files_tbl, Toml.KEY_EXCLUDE, diagnostics)

        if config_file is not None:
            draft.config_files = [str(config_file)]
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableHeaderConfig:
        """Load a draft from ``headmatch.toml`` or ``pyproject.toml``."""
        logger.info("Loading configuration from %s", path)
        return cls.from_toml_dict(load_config_table(path), config_file=path)

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableHeaderConfig) -> MutableHeaderConfig:
        """Return a new draft where values set in ``other`` override this draft.

        Tables (``variables``, ``patterns``) are merged key-wise; file pattern
        lists are replaced when ``other`` defines any. Setting a template in
        ``other`` (``content`` or ``path``) replaces the template source as a
        whole.
        """
        template_owner: MutableHeaderConfig = (
            other
            if other.source is not None or other.content is not None or other.path is not None
            else self
        )
        diagnostics = DiagnosticLog.from_iterable(self.diagnostics.items)
        diagnostics.extend(other.diagnostics.items)
        return MutableHeaderConfig(
            source=template_owner.source,
            content=template_owner.content,
            path=template_owner.path,
            style=other.style if other.style is not None else self.style,
            block_prefix=other.block_prefix
            if other.block_prefix is not None
            else self.block_prefix,
            block_suffix=other.block_suffix
            if other.block_suffix is not None
            else self.block_suffix,
            line_prefix=other.line_prefix if other.line_prefix is not None else self.line_prefix,
            preserve_pragmas=other.preserve_pragmas
            if other.preserve_pragmas is not None
            else self.preserve_pragmas,
            trailing_newlines=other.trailing_newlines
            if other.trailing_newlines is not None
            else self.trailing_newlines,
            variables={**self.variables, **other.variables},
            patterns={**self.patterns, **other.patterns},
            include_patterns=other.include_patterns or self.include_patterns,
            exclude_patterns=other.exclude_patterns or self.exclude_patterns,
            config_files=self.config_files + other.config_files,
            diagnostics=diagnostics,
        )


def _parse_patterns(table: TomlTable, diagnostics: DiagnosticLog) -> dict[str, dict[str, str]]:
    patterns: dict[str, dict[str, str]] = {}
    for name, entry in table.items():
        if not isinstance(entry, dict):
            diagnostics.add_warning(f"Ignoring pattern '{name}': expected a table")
            continue
        values: dict[str, Any] = entry
        parsed: dict[str, str] = {}
        for key in (Toml.KEY_PATTERN, Toml.KEY_DEFAULT_VALUE):
            value: str | None = get_string_checked(values, key, diagnostics)
            if value is not None:
                parsed[key] = value
        for key in values:
            if key not in (Toml.KEY_PATTERN, Toml.KEY_DEFAULT_VALUE):
                diagnostics.add_warning(f"Unknown key '{key}' in pattern '{name}'")
        patterns[name] = parsed
    return patterns


def load_config(
    config_file: Path | None = None,
    *,
    start: Path | None = None,
    overrides: MutableHeaderConfig | None = None,
) -> HeaderConfig:
    """Load, merge and freeze the effective configuration.

    Layers, lowest precedence first: built-in defaults, ``config_file`` (or
    the first configuration found walking up from ``start``), ``overrides``.

    Raises:
        HeadmatchConfigError: If the merged configuration is invalid.
    """
    draft: MutableHeaderConfig = MutableHeaderConfig.from_defaults()
    path: Path | None = config_file or find_config_file(start or Path.cwd())
    if path is not None:
        draft = draft.merge_with(MutableHeaderConfig.from_toml_file(path))
    else:
        logger.info("No configuration file found")
    if overrides is not None:
        draft = draft.merge_with(overrides)
    return draft.freeze()
