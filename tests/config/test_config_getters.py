# topmark:header:start
#
#   project      : HeadMatch
#   file         : test_config_getters.py
#   file_relpath : tests/config/test_config_getters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Checked TOML getters: type validation with diagnostics instead of errors."""

from __future__ import annotations

from typing import Any

from headmatch.config.getters import (
    get_bool_checked,
    get_int_checked,
    get_string_checked,
    get_string_list_checked,
    get_string_map_checked,
    get_table_checked,
)
from headmatch.core.diagnostics import DiagnosticLevel, DiagnosticLog

TABLE: dict[str, Any] = {
    "name": "headmatch",
    "flag": True,
    "count": 3,
    "items": ["a", 1, "b"],
    "table": {"x": "1", "y": 2},
}


def test_getters_return_values_of_the_expected_type() -> None:
    log = DiagnosticLog()
    assert get_string_checked(TABLE, "name", log) == "headmatch"
    assert get_bool_checked(TABLE, "flag", log) is True
    assert get_int_checked(TABLE, "count", log) == 3
    assert get_table_checked(TABLE, "table", log) == {"x": "1", "y": 2}
    assert len(log) == 0


def test_absent_keys_are_silent() -> None:
    log = DiagnosticLog()
    assert get_string_checked(TABLE, "missing", log) is None
    assert get_bool_checked(TABLE, "missing", log) is None
    assert get_int_checked(TABLE, "missing", log) is None
    assert get_string_list_checked(TABLE, "missing", log) == []
    assert get_table_checked(TABLE, "missing", log) == {}
    assert get_string_map_checked(TABLE, "missing", log) == {}
    assert len(log) == 0


def test_wrong_types_are_ignored_with_a_warning() -> None:
    log = DiagnosticLog()
    assert get_string_checked(TABLE, "count", log) is None
    assert get_bool_checked(TABLE, "name", log) is None
    assert get_int_checked(TABLE, "flag", log) is None
    assert get_string_list_checked(TABLE, "name", log) == []
    assert get_table_checked(TABLE, "items", log) == {}
    assert len(log) == 5
    assert all(d.level is DiagnosticLevel.WARNING for d in log.items)
    assert "expected an integer, got bool" in log.items[2].message


def test_collections_drop_bad_items() -> None:
    log = DiagnosticLog()
    assert get_string_list_checked(TABLE, "items", log) == ["a", "b"]
    assert get_string_map_checked(TABLE, "table", log) == {"x": "1"}
    assert len(log) == 2
    assert "'table.y'" in log.items[1].message
