# topmark:header:start
#
#   project      : HeadMatch
#   file         : __main__.py
#   file_relpath : src/headmatch/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Allow ``python -m headmatch``."""

from __future__ import annotations

from headmatch.cli.main import cli

if __name__ == "__main__":
    cli()
