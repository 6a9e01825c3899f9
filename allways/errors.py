"""Error types raised by the allways driver."""

from __future__ import annotations

from pathlib import Path


class AllwaysError(RuntimeError):
    """Base class for fatal, user-reported allways failures."""


class PathNotFoundError(AllwaysError):
    """Raised when an input path does not exist."""

    def __init__(self, path: Path):
        """Record the missing path."""
        self.path = path
        super().__init__(f"Path {str(path)!r} does not exist!")


class SourceParseError(AllwaysError):
    """Raised when a source file is not valid Python."""

    def __init__(self, filename: str, lineno: int | None, msg: str):
        """Record where parsing failed."""
        self.filename = filename
        self.lineno = lineno
        self.msg = msg
        location = filename if lineno is None else f"{filename}:{lineno}"
        super().__init__(f"Failed to parse {location}: {msg}")


class ConfigError(AllwaysError):
    """Raised when a configuration source cannot be loaded or validated."""


__all__ = [
    "AllwaysError",
    "PathNotFoundError",
    "SourceParseError",
    "ConfigError",
]
