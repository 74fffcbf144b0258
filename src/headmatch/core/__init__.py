# topmark:header:start
#
#   project      : HeadMatch
#   file         : __init__.py
#   file_relpath : src/headmatch/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core types shared across HeadMatch: errors, diagnostics and exit codes."""

from __future__ import annotations
