"""Batch driver: path preconditions, per-file rewrite, and exit status."""

from __future__ import annotations

import codecs
import io
import logging
import re
import tokenize
from collections.abc import Sequence
from pathlib import Path

from pydantic import BaseModel, Field

from .config import AllwaysConfig
from .constants import EXIT_CHANGED, EXIT_UNCHANGED
from .editor import apply_export_block
from .errors import PathNotFoundError, SourceParseError
from .exports import get_public_names

LOGGER = logging.getLogger(__name__)

CODING_COOKIE = re.compile(rb"^[ \t\f]*#.*?coding[:=][ \t]*[-\w.]+", re.MULTILINE)


class FileResult(BaseModel):
    """Outcome of processing one source file."""

    path: str
    changed: bool
    names: list[str] = Field(default_factory=list)


class BatchResult(BaseModel):
    """Outcome of a whole run."""

    files: list[FileResult] = Field(default_factory=list)
    exit_code: int = EXIT_UNCHANGED

    @property
    def changed_files(self) -> list[str]:
        """Paths of files that were (or would be) rewritten."""
        return [item.path for item in self.files if item.changed]


def check_paths(paths: Sequence[Path]) -> None:
    """Fail before touching anything if any path is missing."""
    for path in paths:
        if not path.exists():
            raise PathNotFoundError(path)


def detect_source_encoding(
    raw: bytes, *, fallback: str = "utf-8", filename: str = "<unknown>"
) -> str:
    """Return the encoding declared by a BOM or coding cookie, else ``fallback``."""
    head = b"\n".join(raw.splitlines()[:2])
    if not raw.startswith(codecs.BOM_UTF8) and not CODING_COOKIE.search(head):
        return fallback
    try:
        encoding, _ = tokenize.detect_encoding(io.BytesIO(raw).readline)
    except SyntaxError as exc:
        raise SourceParseError(filename, exc.lineno, exc.msg) from exc
    return encoding


def process_file(path: Path, *, check: bool = False, encoding: str = "utf-8") -> FileResult:
    """Refresh the ``__all__`` block of one file, writing only on change."""
    raw = path.read_bytes()
    source_encoding = detect_source_encoding(raw, fallback=encoding, filename=str(path))
    try:
        src = raw.decode(source_encoding)
    except UnicodeDecodeError as exc:
        message = f"cannot decode as {source_encoding}: {exc}"
        raise SourceParseError(str(path), None, message) from exc
    names = get_public_names(src, filename=str(path))
    new_src = apply_export_block(src, names)

    if new_src is None:
        LOGGER.info(
            "No public names in %s",
            path,
            extra={"evt": "FILE_NO_PUBLIC_NAMES", "file": str(path), "names": 0},
        )
        return FileResult(path=str(path), changed=False)

    if new_src == src:
        LOGGER.info(
            "__all__ statement already up to date in %s",
            path,
            extra={"evt": "FILE_UNCHANGED", "file": str(path), "names": len(names)},
        )
        return FileResult(path=str(path), changed=False, names=names)

    if check:
        print(f"Would update __all__ statement in {path}")
    else:
        print(f"Updating __all__ statement in {path}")
        path.write_bytes(new_src.encode(source_encoding))
    LOGGER.info(
        "Refreshed __all__ statement in %s",
        path,
        extra={"evt": "FILE_UPDATED", "file": str(path), "names": len(names)},
    )
    return FileResult(path=str(path), changed=True, names=names)


def run_batch(paths: Sequence[Path], config: AllwaysConfig | None = None) -> BatchResult:
    """Process every path and accumulate the exit status."""
    config = config or AllwaysConfig()
    check_paths(paths)

    result = BatchResult()
    for path in paths:
        outcome = process_file(path, check=config.check, encoding=config.encoding)
        result.files.append(outcome)
        if outcome.changed:
            result.exit_code |= EXIT_CHANGED

    LOGGER.info(
        "Processed %d files (%d changed)",
        len(result.files),
        len(result.changed_files),
        extra={"evt": "BATCH_DONE"},
    )
    return result


__all__ = [
    "FileResult",
    "BatchResult",
    "check_paths",
    "detect_source_encoding",
    "process_file",
    "run_batch",
]
