"""allways package public API."""

from .config import AllwaysConfig, resolve_config
from .editor import apply_export_block, find_export_block, render_export_block
from .errors import AllwaysError, ConfigError, PathNotFoundError, SourceParseError
from .exports import get_public_names, sort_names, update_exports
from .names import collect_names
from .runner import process_file, run_batch

__all__ = [
    "collect_names",
    "get_public_names",
    "sort_names",
    "update_exports",
    "find_export_block",
    "render_export_block",
    "apply_export_block",
    "process_file",
    "run_batch",
    "AllwaysConfig",
    "resolve_config",
    "AllwaysError",
    "ConfigError",
    "PathNotFoundError",
    "SourceParseError",
]
