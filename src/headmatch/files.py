# topmark:header:start
#
#   project      : HeadMatch
#   file         : files.py
#   file_relpath : src/headmatch/files.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""File discovery and source I/O for the CLI.

Paths given on the command line are expanded (directories recursively, globs
relative to the current directory), then filtered with gitwildmatch patterns
from ``[files]``:

1. only files are kept;
2. when include patterns exist, a file must match at least one of them;
3. a file matching any exclude pattern is dropped;
4. the result is sorted for deterministic output.

Patterns are matched against the path relative to ``root`` (the directory of
the configuration file, or the current directory).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from headmatch.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from headmatch.config.logging import HeadmatchLogger

logger: HeadmatchLogger = get_logger(__name__)


def _rel_for_match(path: Path, base: Path) -> str:
    """Return a POSIX-style relative path (or absolute as fallback) for PathSpec matching."""
    try:
        return path.resolve().relative_to(base.resolve()).as_posix()
    except ValueError:
        return path.as_posix()


def _expand_path(p: Path) -> list[Path]:
    if "*" in str(p):
        return list(Path(".").glob(str(p)))
    if p.is_dir():
        return list(p.rglob("*"))
    if p.is_file():
        return [p]
    return []


def missing_paths(paths: Iterable[str | Path]) -> list[Path]:
    """Return the literal (non-glob) ``paths`` that do not exist."""
    return [Path(p) for p in paths if "*" not in str(p) and not Path(p).exists()]


def resolve_file_list(
    paths: Sequence[str | Path],
    *,
    include: Sequence[str] = (),
    exclude: Sequence[str] = (),
    root: Path | None = None,
) -> list[Path]:
    """Return the files selected by ``paths`` and the include/exclude filters.

    Args:
        paths (Sequence[str | Path]): Files, directories or glob patterns.
        include (Sequence[str]): Gitwildmatch patterns; when non-empty, only
            matching files are kept.
        exclude (Sequence[str]): Gitwildmatch patterns of files to drop.
        root (Path | None): Base directory patterns are relative to; the
            current directory when ``None``.

    Returns:
        list[Path]: Sorted list of files to process.
    """
    base: Path = root or Path.cwd()
    candidates: set[Path] = set()
    for raw in paths:
        expanded: list[Path] = _expand_path(Path(raw))
        if not expanded:
            logger.warning("No files matched: %s", raw)
        candidates.update(expanded)

    files: set[Path] = {p for p in candidates if p.is_file()}

    if include:
        spec_in: PathSpec = PathSpec.from_lines(GitWildMatchPattern, list(include))
        files = {p for p in files if spec_in.match_file(_rel_for_match(p, base))}
    if exclude:
        spec_out: PathSpec = PathSpec.from_lines(GitWildMatchPattern, list(exclude))
        files = {p for p in files if not spec_out.match_file(_rel_for_match(p, base))}

    result: list[Path] = sorted(files)
    logger.trace("Files to process: %d -- %s", len(result), result)
    return result


def read_source(path: Path) -> str:
    """Read ``path`` as UTF-8 keeping its line breaks untouched.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    with path.open("r", encoding="utf-8", newline="") as fh:
        return fh.read()


def write_source(path: Path, text: str) -> None:
    """Write ``text`` to ``path`` as UTF-8 without translating line breaks."""
    with path.open("w", encoding="utf-8", newline="") as fh:
        fh.write(text)
    logger.debug("Wrote %s", path)
