# topmark:header:start
#
#   project      : HeadMatch
#   file         : __init__.py
#   file_relpath : src/headmatch/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HeadMatch CLI subcommands."""

from __future__ import annotations
