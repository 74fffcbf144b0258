# topmark:header:start
#
#   project      : HeadMatch
#   file         : test_fix_idempotence_property.py
#   file_relpath : tests/rules/test_fix_idempotence_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for header insertion across styles, shebangs and line endings.

For generated source files without a header this suite asserts:
1) after one fix the file has no violations left, and
2) fixing again leaves the file unchanged.
"""

from __future__ import annotations

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from headmatch.rules.header_format import HeaderFormatRule
from headmatch.template.shape import CommentStyle
from tests.conftest import make_config
from tests.strategies_headmatch import s_source_file

# Mark the entire test module
pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow


@settings(suppress_health_check=[HealthCheck.too_slow], deadline=None, max_examples=100)
@given(
    source=s_source_file(),
    style=st.sampled_from(list(CommentStyle)),
    trailing=st.sampled_from([None, 1, 2]),
)
def test_fix_is_idempotent(source: str, style: CommentStyle, trailing: int | None) -> None:
    rule = HeaderFormatRule(
        make_config(
            content="Copyright (year) Acme.\n\nSPDX-License-Identifier: MIT",
            style=style.value,
            trailing_newlines=trailing,
            patterns={"year": {"pattern": r"\d{4}", "default_value": "2024"}},
        )
    )
    fixed: str = rule.fix(source)
    assert rule.check(fixed) == [], fixed
    assert rule.fix(fixed) == fixed
