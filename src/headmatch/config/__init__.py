# topmark:header:start
#
#   project      : HeadMatch
#   file         : __init__.py
#   file_relpath : src/headmatch/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for HeadMatch.

Submodules:
    - ``keys``: canonical TOML key names.
    - ``loaders``: TOML discovery and parsing (tomlkit) and template files.
    - ``getters``: checked value getters recording diagnostics.
    - ``model``: `MutableHeaderConfig` builder and frozen `HeaderConfig`.
    - ``logging``: the HeadMatch logger with its TRACE level.
"""

from __future__ import annotations
