"""Locate, render, and splice the sentinel-delimited ``__all__`` block."""

from __future__ import annotations

import io
from collections.abc import Sequence

from pydantic import BaseModel, Field, model_validator

from .constants import ALL_NAME, END_SENTINEL, INDENT, START_SENTINEL


class ExportBlock(BaseModel):
    """Half-open ``[start, end)`` character range of an existing generated block."""

    start: int = Field(ge=0)
    end: int = Field(ge=0)

    @model_validator(mode="after")
    def validate_order(self) -> ExportBlock:
        """Ensure the start sentinel precedes the end sentinel."""
        if self.start >= self.end:
            raise ValueError("export block start must be before its end")
        return self


def _lines(src: str) -> list[str]:
    """Split on real line breaks only, keeping each terminator."""
    return list(io.StringIO(src, newline=""))


def detect_newline(src: str) -> str:
    """Return the terminator of the first line of ``src``, defaulting to ``\\n``."""
    for line in _lines(src):
        if line.endswith("\r\n"):
            return "\r\n"
        if line.endswith(("\n", "\r")):
            return line[-1]
    return "\n"


def find_export_block(src: str) -> ExportBlock | None:
    """Scan ``src`` for a start sentinel followed by an end sentinel.

    The last occurrence of each sentinel wins. A reversed or incomplete pair
    means the file has no block.
    """
    start: int | None = None
    end: int | None = None
    offset = 0
    for line in _lines(src):
        text = line.rstrip()
        if text == START_SENTINEL:
            start = offset
        elif text == END_SENTINEL:
            end = offset + len(line)
        offset += len(line)

    if start is not None and end is not None and start < end:
        return ExportBlock(start=start, end=end)
    return None


def render_export_block(names: Sequence[str], newline: str = "\n") -> str:
    """Render the managed block listing ``names`` in the given order."""
    lines = [START_SENTINEL, f"{ALL_NAME} = ["]
    lines.extend(f'{INDENT}"{name}",' for name in names)
    lines.extend(["]", END_SENTINEL, ""])
    return newline.join(lines)


def insert_export_block(src: str, block: str, newline: str = "\n") -> str:
    """Append ``block`` after two blank lines."""
    return f"{src}{newline}{newline}{block}"


def update_export_block(src: str, region: ExportBlock, block: str) -> str:
    """Replace ``region`` of ``src`` with ``block``, keeping any trailing content."""
    tail = src[region.end :] if region.end < len(src) else ""
    return f"{src[: region.start]}{block}{tail}"


def apply_export_block(src: str, names: Sequence[str]) -> str | None:
    """Return ``src`` with a fresh block for ``names``, or None when there are none.

    The block uses the same line terminator as the first line of ``src``.
    """
    if not names:
        return None
    newline = detect_newline(src)
    block = render_export_block(names, newline=newline)
    region = find_export_block(src)
    if region is None:
        return insert_export_block(src, block, newline=newline)
    return update_export_block(src, region, block)


__all__ = [
    "ExportBlock",
    "detect_newline",
    "find_export_block",
    "render_export_block",
    "insert_export_block",
    "update_export_block",
    "apply_export_block",
]
