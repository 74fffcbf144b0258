# topmark:header:start
#
#   project      : HeadMatch
#   file         : getters.py
#   file_relpath : src/headmatch/config/getters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Checked value getters for parsed TOML tables.

Every getter validates the expected shape of one key. A value of the wrong
type is ignored (the getter returns ``None`` or an empty container) and a
warning is recorded in the supplied `DiagnosticLog`, so a user mistake is
surfaced without aborting configuration loading.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from headmatch.config.logging import get_logger

if TYPE_CHECKING:
    from headmatch.config.logging import HeadmatchLogger
    from headmatch.core.diagnostics import DiagnosticLog

    from .loaders import TomlTable

logger: HeadmatchLogger = get_logger(__name__)


def _type_warning(diagnostics: DiagnosticLog, where: str, expected: str, value: Any) -> None:
    diagnostics.add_warning(
        f"Ignoring {where}: expected {expected}, got {type(value).__name__} ({value!r})"
    )


def get_string_checked(table: TomlTable, key: str, diagnostics: DiagnosticLog) -> str | None:
    """Return ``table[key]`` when it is a string, ``None`` otherwise.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        diagnostics (DiagnosticLog): Receives a warning for a non-string value.

    Returns:
        str | None: The string value, or ``None`` when absent or of another type.
    """
    value: Any = table.get(key)
    if value is None or isinstance(value, str):
        return value
    _type_warning(diagnostics, f"'{key}'", "a string", value)
    return None


def get_bool_checked(table: TomlTable, key: str, diagnostics: DiagnosticLog) -> bool | None:
    """Return ``table[key]`` when it is a boolean, ``None`` otherwise."""
    value: Any = table.get(key)
    if value is None or isinstance(value, bool):
        return value
    _type_warning(diagnostics, f"'{key}'", "a boolean", value)
    return None


def get_int_checked(table: TomlTable, key: str, diagnostics: DiagnosticLog) -> int | None:
    """Return ``table[key]`` when it is an integer (booleans excluded)."""
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    _type_warning(diagnostics, f"'{key}'", "an integer", value)
    return None


def get_string_list_checked(
    table: TomlTable, key: str, diagnostics: DiagnosticLog
) -> list[str]:
    """Return the string items of the list ``table[key]``.

    Non-string items are dropped with a warning; a non-list value yields ``[]``.
    """
    value: Any = table.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        _type_warning(diagnostics, f"'{key}'", "a list of strings", value)
        return []
    items: list[str] = []
    for item in value:
        if isinstance(item, str):
            items.append(item)
        else:
            _type_warning(diagnostics, f"item of '{key}'", "a string", item)
    return items


def get_table_checked(table: TomlTable, key: str, diagnostics: DiagnosticLog) -> TomlTable:
    """Return the sub-table ``table[key]``, or ``{}`` when absent or not a table."""
    value: Any = table.get(key)
    if value is None:
        return {}
    if isinstance(value, dict):
        logger.trace("TOML [%s]: %s", key, value)
        return value
    _type_warning(diagnostics, f"[{key}]", "a table", value)
    return {}


def get_string_map_checked(
    table: TomlTable, key: str, diagnostics: DiagnosticLog
) -> dict[str, str]:
    """Return the ``{name: string}`` entries of the sub-table ``table[key]``."""
    result: dict[str, str] = {}
    for name, value in get_table_checked(table, key, diagnostics).items():
        if isinstance(value, str):
            result[name] = value
        else:
            _type_warning(diagnostics, f"'{key}.{name}'", "a string", value)
    return result
