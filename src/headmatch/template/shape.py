# topmark:header:start
#
#   project      : HeadMatch
#   file         : shape.py
#   file_relpath : src/headmatch/template/shape.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Comment styles and the resolved comment shape.

A [`CommentShape`][headmatch.template.shape.CommentShape] is the fully
resolved decoration used to render and match a header:

```text
block   /*<block_prefix><line_prefix>line 1<eol><line_prefix>line 2<block_suffix>*/
line    //<block_prefix>                          (only when block_prefix is set)
        //<line_prefix>line 1
        //<block_suffix>                          (only when block_suffix is set)
markup  <!--<block_prefix><line_prefix>line 1<block_suffix>-->
```

Unset decoration strings take the per-style defaults below; an explicit empty
string is honored and overrides the default.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from headmatch.utils.text import LF, normalize_eol


class CommentStyle(str, Enum):
    """Comment style a header is rendered in."""

    BLOCK = "block"
    LINE = "line"
    MARKUP = "markup"

    @property
    def opener(self) -> str:
        """Comment opening delimiter."""
        return {CommentStyle.BLOCK: "/*", CommentStyle.LINE: "//", CommentStyle.MARKUP: "<!--"}[
            self
        ]

    @property
    def closer(self) -> str:
        """Comment closing delimiter (empty for line comments)."""
        return {CommentStyle.BLOCK: "*/", CommentStyle.LINE: "", CommentStyle.MARKUP: "-->"}[self]

    @classmethod
    def parse(cls, value: str) -> CommentStyle:
        """Return the style named ``value``; ``jsdoc`` and ``html`` are aliases.

        Raises:
            ValueError: If ``value`` names no known style.
        """
        aliases: dict[str, CommentStyle] = {"jsdoc": cls.BLOCK, "html": cls.MARKUP}
        key: str = value.strip().lower()
        if key in aliases:
            return aliases[key]
        return cls(key)


@dataclass(frozen=True)
class CommentShape:
    """Resolved decoration of a header comment.

    Attributes:
        style (CommentStyle): The comment style.
        block_prefix (str): Text directly after the opener (block/markup) or the
            content of an extra leading line comment (line style).
        block_suffix (str): Text directly before the closer (block/markup) or the
            content of an extra trailing line comment (line style).
        line_prefix (str): Decoration in front of every template line.
        eol (str): Line separator used when rendering.
    """

    style: CommentStyle
    block_prefix: str
    block_suffix: str
    line_prefix: str
    eol: str = LF

    def normalized(self) -> CommentShape:
        """Return a copy with every decoration string normalized to ``\\n``."""
        return replace(
            self,
            block_prefix=normalize_eol(self.block_prefix),
            block_suffix=normalize_eol(self.block_suffix),
            line_prefix=normalize_eol(self.line_prefix),
            eol=LF,
        )


def default_shape(style: CommentStyle, eol: str = LF) -> CommentShape:
    """Return the default decoration for ``style``."""
    if style is CommentStyle.BLOCK:
        return CommentShape(
            style, block_prefix=f"*{eol}", block_suffix=f"{eol} ", line_prefix=" * ", eol=eol
        )
    if style is CommentStyle.LINE:
        return CommentShape(style, block_prefix="", block_suffix="", line_prefix=" ", eol=eol)
    return CommentShape(style, block_prefix=eol, block_suffix=eol, line_prefix="  ", eol=eol)


def resolve_shape(
    style: CommentStyle,
    *,
    eol: str = LF,
    block_prefix: str | None = None,
    block_suffix: str | None = None,
    line_prefix: str | None = None,
) -> CommentShape:
    """Return the shape for ``style`` with the given overrides applied.

    ``None`` means "use the default"; any string, including ``""``, wins.
    """
    base: CommentShape = default_shape(style, eol)
    return replace(
        base,
        block_prefix=base.block_prefix if block_prefix is None else block_prefix,
        block_suffix=base.block_suffix if block_suffix is None else block_suffix,
        line_prefix=base.line_prefix if line_prefix is None else line_prefix,
    )
