# topmark:header:start
#
#   project      : HeadMatch
#   file         : loaders.py
#   file_relpath : src/headmatch/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load HeadMatch configuration and template files.

Configuration lives either in a dedicated ``headmatch.toml`` (top-level keys)
or in the ``[tool.headmatch]`` table of ``pyproject.toml``. Parsing is done
with `tomlkit` and returned as plain ``dict`` structures.

Template files referenced by ``source = "file"`` are read here as well.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Final, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from headmatch.config.keys import Toml
from headmatch.config.logging import get_logger
from headmatch.core.errors import HeadmatchConfigError, HeadmatchTemplateFileError

if TYPE_CHECKING:
    from headmatch.config.logging import HeadmatchLogger

logger: HeadmatchLogger = get_logger(__name__)

TomlTable = dict[str, Any]

HEADMATCH_TOML: Final[str] = "headmatch.toml"
PYPROJECT_TOML: Final[str] = "pyproject.toml"


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file.

    Args:
        path (Path): TOML document to read (UTF-8).

    Returns:
        TomlTable: The parsed document as plain Python values.

    Raises:
        HeadmatchConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as exc:
        logger.error("Error loading TOML from %s: %s", path, exc)
        raise HeadmatchConfigError(f"Cannot read {path}: {exc}") from exc
    except TomlkitParseError as exc:
        logger.error("Error decoding TOML from %s: %s", path, exc)
        raise HeadmatchConfigError(f"Invalid TOML in {path}: {exc}") from exc
    data: Any = doc.unwrap()
    return cast("TomlTable", data) if isinstance(data, dict) else {}


def extract_headmatch_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the HeadMatch table of a parsed config file.

    ``pyproject.toml`` contributes its ``[tool.headmatch]`` table (``None`` when
    absent); any other file is taken as a whole.
    """
    if path.name != PYPROJECT_TOML:
        return data
    tool: Any = data.get(Toml.TOOL_SECTION, {})
    table: Any = tool.get(Toml.TOOL_NAME) if isinstance(tool, dict) else None
    return cast("TomlTable", table) if isinstance(table, dict) else None


def find_config_file(start: Path) -> Path | None:
    """Walk up from ``start`` looking for a HeadMatch configuration.

    In every directory ``headmatch.toml`` wins over ``pyproject.toml``; the
    latter only counts when it holds a ``[tool.headmatch]`` table.
    """
    current: Path = start.resolve()
    if current.is_file():
        current = current.parent
    for directory in (current, *current.parents):
        candidate: Path = directory / HEADMATCH_TOML
        if candidate.is_file():
            logger.debug("Found config file %s", candidate)
            return candidate
        pyproject: Path = directory / PYPROJECT_TOML
        if pyproject.is_file() and extract_headmatch_table(pyproject, load_toml_dict(pyproject)):
            logger.debug("Found [tool.headmatch] in %s", pyproject)
            return pyproject
    return None


def load_config_table(path: Path) -> TomlTable:
    """Return the HeadMatch table stored in ``path``.

    Raises:
        HeadmatchConfigError: If ``path`` is a ``pyproject.toml`` without a
            ``[tool.headmatch]`` table, or cannot be parsed.
    """
    table: TomlTable | None = extract_headmatch_table(path, load_toml_dict(path))
    if table is None:
        raise HeadmatchConfigError(f"No [tool.headmatch] table in {path}")
    return table


def load_template_text(path: Path) -> str:
    """Read a file-sourced template as UTF-8, right-trimmed.

    Raises:
        HeadmatchTemplateFileError: If the file cannot be read or decoded.
    """
    try:
        return path.read_text(encoding="utf-8").rstrip()
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Cannot read template file %s: %s", path, exc)
        raise HeadmatchTemplateFileError(f"Cannot read template file {path}: {exc}") from exc
