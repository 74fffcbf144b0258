# topmark:header:start
#
#   project      : HeadMatch
#   file         : diff.py
#   file_relpath : src/headmatch/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unified diff generation and colorized rendering for ``headmatch check --diff``."""

from __future__ import annotations

import difflib
from collections.abc import Sequence

from yachalk import chalk

from headmatch.config.logging import get_logger
from headmatch.utils.text import detect_eol

logger = get_logger(__name__)


def unified_diff(before: str, after: str, name: str) -> list[str]:
    """Return the unified diff lines turning ``before`` into ``after``.

    Line breaks are kept as found in the source; an empty list means the two
    texts are identical.
    """
    patch_lines: list[str] = list(
        difflib.unified_diff(
            before.splitlines(keepends=True),
            after.splitlines(keepends=True),
            fromfile=f"{name} (current)",
            tofile=f"{name} (updated)",
            n=3,
            lineterm=detect_eol(before),
        )
    )
    logger.trace("Diff for %s: %d line(s)", name, len(patch_lines))
    return patch_lines


def render_patch(patch: Sequence[str] | str, show_line_numbers: bool = False) -> str:
    """Render a colorized preview of a unified diff.

    Args:
        patch: A unified diff as **either** a sequence of lines **or** a single
            multiline string.
        show_line_numbers: Whether to prefix output with line numbers.

    Returns:
        The formatted, colorized diff preview.
    """
    if isinstance(patch, str):
        lines: list[str] = patch.splitlines(keepends=False)
    else:
        lines = [line.rstrip("\r\n") for line in patch]

    # Show control characters explicitly.
    def process_line(line: str) -> str:
        content: str = line.replace("\r", "\\r").replace("\n", "\\n")
        match line[:1]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return chalk.bold.white(content)

    if show_line_numbers:
        return chalk.gray(
            "".join(f"{i:04d}|{process_line(line)}\n" for i, line in enumerate(lines, 1))
        )
    return chalk.gray("".join(f"{process_line(line)}\n" for line in lines))
