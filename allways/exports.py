"""Source-to-source pipeline that refreshes a module's ``__all__`` block."""

from __future__ import annotations

import ast
import logging
from collections.abc import Iterable

from .editor import apply_export_block
from .errors import SourceParseError
from .names import collect_names

LOGGER = logging.getLogger(__name__)

UTF8_BOM = "\ufeff"


def parse_source(src: str, filename: str = "<unknown>") -> ast.Module:
    """Parse Python source, converting syntax failures into ``SourceParseError``.

    A leading byte-order mark is ignored for parsing only; callers keep
    splicing the original text.
    """
    try:
        return ast.parse(src.removeprefix(UTF8_BOM), filename=filename)
    except SyntaxError as exc:
        raise SourceParseError(filename, exc.lineno, exc.msg) from exc
    except ValueError as exc:
        # source containing NUL bytes
        raise SourceParseError(filename, None, str(exc)) from exc


def name_sort_key(name: str) -> tuple[str, str]:
    """Order case-insensitively, breaking ties by exact string order."""
    return name.lower(), name


def sort_names(names: Iterable[str]) -> list[str]:
    """Return ``names`` in canonical export order."""
    return sorted(names, key=name_sort_key)


def is_public(name: str) -> bool:
    """Return whether ``name`` belongs in the export list."""
    return not name.startswith("_")


def get_public_names(src: str, filename: str = "<unknown>") -> list[str]:
    """Collect, filter, and sort the public module-scope names of ``src``."""
    names = collect_names(parse_source(src, filename=filename))
    public = sort_names(name for name in names if is_public(name))
    LOGGER.debug(
        "Collected %d names (%d public) from %s",
        len(names),
        len(public),
        filename,
        extra={"evt": "NAMES_COLLECTED", "file": filename, "names": len(public)},
    )
    return public


def update_exports(src: str, filename: str = "<unknown>") -> str | None:
    """Return ``src`` with a refreshed ``__all__`` block, or None without public names."""
    return apply_export_block(src, get_public_names(src, filename=filename))


__all__ = [
    "parse_source",
    "name_sort_key",
    "sort_names",
    "is_public",
    "get_public_names",
    "update_exports",
]
