# topmark:header:start
#
#   project      : HeadMatch
#   file         : keys.py
#   file_relpath : src/headmatch/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for HeadMatch configuration.

These constants are the external configuration schema as it appears in
``headmatch.toml`` and in ``[tool.headmatch]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by HeadMatch configuration."""

    # Discovery
    TOOL_SECTION: Final[str] = "tool"
    TOOL_NAME: Final[str] = "headmatch"

    # Template source
    KEY_SOURCE: Final[str] = "source"
    KEY_CONTENT: Final[str] = "content"
    KEY_PATH: Final[str] = "path"

    # Comment shape
    KEY_STYLE: Final[str] = "style"
    KEY_BLOCK_PREFIX: Final[str] = "block_prefix"
    KEY_BLOCK_SUFFIX: Final[str] = "block_suffix"
    KEY_LINE_PREFIX: Final[str] = "line_prefix"

    # Rule behavior
    KEY_PRESERVE_PRAGMAS: Final[str] = "preserve_pragmas"
    KEY_TRAILING_NEWLINES: Final[str] = "trailing_newlines"

    # [variables] and [patterns]
    SECTION_VARIABLES: Final[str] = "variables"
    SECTION_PATTERNS: Final[str] = "patterns"

    KEY_PATTERN: Final[str] = "pattern"
    KEY_DEFAULT_VALUE: Final[str] = "default_value"

    # [files]
    SECTION_FILES: Final[str] = "files"

    KEY_INCLUDE: Final[str] = "include"
    KEY_EXCLUDE: Final[str] = "exclude"

    @classmethod
    def known_top_level_keys(cls) -> frozenset[str]:
        """Return every key accepted at the top level of the config table."""
        return frozenset(
            {
                cls.KEY_SOURCE,
                cls.KEY_CONTENT,
                cls.KEY_PATH,
                cls.KEY_STYLE,
                cls.KEY_BLOCK_PREFIX,
                cls.KEY_BLOCK_SUFFIX,
                cls.KEY_LINE_PREFIX,
                cls.KEY_PRESERVE_PRAGMAS,
                cls.KEY_TRAILING_NEWLINES,
                cls.SECTION_VARIABLES,
                cls.SECTION_PATTERNS,
                cls.SECTION_FILES,
            }
        )
