# topmark:header:start
#
#   project      : HeadMatch
#   file         : __init__.py
#   file_relpath : src/headmatch/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HeadMatch package.

HeadMatch verifies and repairs the leading header comment of source files
against a configured template. Templates may embed named regex placeholders
whose captured values survive an automatic repair.
"""

from __future__ import annotations
