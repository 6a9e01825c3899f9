"""Logging filter and formatters carrying per-file event context."""

from __future__ import annotations

import logging

from .constants import COLOR_RESET, LOG_LEVEL_COLORS

DEFAULT_EVENT = "GEN"
"""Event code assigned to records logged without an explicit ``evt``."""

EMPTY_FIELD = "-"
"""Placeholder for context fields a record does not set."""

CONTEXT_FIELDS = ("evt", "file", "names")
"""Structured fields appended to formatted records, in render order."""


class EventContextFilter(logging.Filter):
    """Fill missing structured context fields with defaults."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "evt"):
            record.evt = DEFAULT_EVENT
        for field in CONTEXT_FIELDS[1:]:
            if not hasattr(record, field):
                setattr(record, field, EMPTY_FIELD)
        return True


def _context_value(record: logging.LogRecord, field: str) -> str:
    default = DEFAULT_EVENT if field == "evt" else EMPTY_FIELD
    return str(getattr(record, field, default))


class EventFormatter(logging.Formatter):
    """Append every context field as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        suffix = " ".join(f"{field}={_context_value(record, field)}" for field in CONTEXT_FIELDS)
        return f"{base} {suffix}"


class ConciseEventFormatter(logging.Formatter):
    """Append only the context fields that carry information."""

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        parts = []
        for field in CONTEXT_FIELDS:
            value = _context_value(record, field)
            if value == EMPTY_FIELD or (field == "evt" and value == DEFAULT_EVENT):
                continue
            parts.append(f"{field}={value}")
        if not parts:
            return base
        return f"{base} {' '.join(parts)}"


class _ColoredLevelMixin:
    """Wrap the level name in its ANSI color while formatting."""

    def format(self, record: logging.LogRecord) -> str:
        color = LOG_LEVEL_COLORS.get(record.levelno)
        if color is None:
            return super().format(record)
        original = record.levelname
        record.levelname = f"{color}{original}{COLOR_RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


class ColoredEventFormatter(_ColoredLevelMixin, EventFormatter):
    """EventFormatter with colored level names."""


class ColoredConciseEventFormatter(_ColoredLevelMixin, ConciseEventFormatter):
    """ConciseEventFormatter with colored level names."""


def build_formatter(log_style: str, use_color: bool, fmt: str) -> logging.Formatter:
    """Pick the formatter for a log style and color setting."""
    if log_style == "event":
        return ColoredEventFormatter(fmt) if use_color else EventFormatter(fmt)
    return ColoredConciseEventFormatter(fmt) if use_color else ConciseEventFormatter(fmt)


__all__ = [
    "EventContextFilter",
    "EventFormatter",
    "ConciseEventFormatter",
    "ColoredEventFormatter",
    "ColoredConciseEventFormatter",
    "build_formatter",
]
