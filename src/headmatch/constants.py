# topmark:header:start
#
#   project      : HeadMatch
#   file         : constants.py
#   file_relpath : src/headmatch/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HeadMatch Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

HEADMATCH_VERSION: str = get_version("headmatch")
