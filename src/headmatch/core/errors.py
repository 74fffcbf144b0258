# topmark:header:start
#
#   project      : HeadMatch
#   file         : errors.py
#   file_relpath : src/headmatch/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the HeadMatch engine and its adapters.

Only *configuration* problems are exceptions. Properties of linted content
(mismatching headers, invalid pattern values, missing pragmas) are reported
as data by the matcher and the rules.
"""

from __future__ import annotations


class HeadmatchError(Exception):
    """Base class for all HeadMatch errors."""


class HeadmatchConfigError(HeadmatchError):
    """Invalid, missing or inconsistent configuration.

    Raised when a configuration is frozen, before any match or format call.
    """


class HeadmatchTemplateFileError(HeadmatchConfigError):
    """A file-sourced template could not be read."""
