"""Constants for export block generation and CLI output."""

import logging

ALL_NAME = "__all__"
"""Module attribute holding the public export list."""

START_SENTINEL = "# allways: start"
"""Comment line opening the managed ``__all__`` block."""

END_SENTINEL = "# allways: end"
"""Comment line closing the managed ``__all__`` block."""

INDENT = "    "
"""Indentation unit for each exported name."""

PYPROJECT_FILENAME = "pyproject.toml"
"""File searched in the working directory for a ``[tool.allways]`` table."""

PYPROJECT_TOOL_KEY = "allways"
"""Key under ``[tool]`` holding allways settings."""

EXIT_UNCHANGED = 0
"""Exit status when no file needed an update."""

EXIT_CHANGED = 1
"""Exit status bit set when at least one file was (or would be) updated."""

EXIT_FAILURE = 2
"""Exit status for missing paths, parse errors, and invalid configuration."""

COLOR_DEBUG = "\033[36m"
"""ANSI color code for DEBUG level logs (light blue/cyan)."""

COLOR_INFO = "\033[32m"
"""ANSI color code for INFO level logs (green)."""

COLOR_WARNING = "\033[33m"
"""ANSI color code for WARNING level logs (yellow)."""

COLOR_ERROR = "\033[31m"
"""ANSI color code for ERROR level logs (red)."""

COLOR_CRITICAL = "\033[31m"
"""ANSI color code for CRITICAL level logs (red)."""

COLOR_RESET = "\033[0m"
"""ANSI color reset code."""

LOG_LEVEL_COLORS = {
    logging.DEBUG: COLOR_DEBUG,
    logging.INFO: COLOR_INFO,
    logging.WARNING: COLOR_WARNING,
    logging.ERROR: COLOR_ERROR,
    logging.CRITICAL: COLOR_CRITICAL,
}
"""Mapping of logging levels to their ANSI color codes."""
