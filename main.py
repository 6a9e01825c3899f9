"""CLI entrypoint for refreshing ``__all__`` blocks in Python files."""

from __future__ import annotations

import argparse
import logging
import sys
from importlib import metadata
from pathlib import Path

from allways.config import AllwaysConfig, LogStyle, resolve_config
from allways.constants import EXIT_FAILURE
from allways.errors import AllwaysError
from allways.logging_utils import EventContextFilter, build_formatter
from allways.runner import run_batch

LOGGER = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _get_version() -> str:
    """Get the current version of allways."""
    try:
        return metadata.version("allways")
    except metadata.PackageNotFoundError:
        return "unknown"


def _build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    version = _get_version()
    parser = argparse.ArgumentParser(
        prog="allways",
        description="Automatically update __all__ statements in python libraries.",
    )
    parser.add_argument(
        "--version", action="version", version=f"allways {version}", help="Show version and exit"
    )
    parser.add_argument("paths", nargs="+", type=Path, help="Any number of python files")
    parser.add_argument(
        "--check",
        action="store_true",
        default=None,
        help="Report files whose __all__ block is stale without rewriting them",
    )
    parser.add_argument("--config", type=Path, help="YAML configuration file")
    parser.add_argument("--encoding", help="Source file encoding")
    parser.add_argument("--log-level", help="Python logging level")
    parser.add_argument(
        "--log-style",
        choices=[style.value for style in LogStyle],
        help="Terminal log style: concise (default) or event (full context)",
    )
    parser.add_argument(
        "--color", action="store_true", default=None, help="Enable colored logging output"
    )
    return parser


def _configure_logging(level: str, use_color: bool = False, log_style: str = "concise") -> None:
    """Configure root logging format and level."""
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))
    handler = logging.StreamHandler()
    handler.setFormatter(build_formatter(log_style, use_color, LOG_FORMAT))
    handler.addFilter(EventContextFilter())
    root.addHandler(handler)


def _resolve_config(args: argparse.Namespace) -> AllwaysConfig:
    """Merge config sources with explicitly passed CLI flags."""
    return resolve_config(
        config_path=args.config,
        overrides={
            "check": args.check,
            "encoding": args.encoding,
            "log_level": args.log_level,
            "log_style": args.log_style,
            "color": args.color,
        },
    )


def run_cli(argv: list[str] | None = None) -> int:
    """Execute CLI entrypoint logic and return process exit code."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        config = _resolve_config(args)
    except AllwaysError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_FAILURE
    _configure_logging(config.log_level, use_color=config.color, log_style=config.log_style)

    try:
        result = run_batch(args.paths, config)
    except AllwaysError as exc:
        LOGGER.debug("Run aborted", exc_info=True, extra={"evt": "RUN_ABORTED"})
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_FAILURE
    return result.exit_code


if __name__ == "__main__":
    sys.exit(run_cli())
