# topmark:header:start
#
#   project      : HeadMatch
#   file         : __init__.py
#   file_relpath : src/headmatch/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command line interface of HeadMatch (built on Click)."""

from __future__ import annotations
