"""Module-tagged diagnostic messages written to the standard streams."""

from __future__ import annotations

import enum
import sys

__all__ = ["Level", "report", "error", "warning", "info"]


class Level(enum.Enum):
    """Severity of a diagnostic message."""

    INFO = "info"
    WARN = "warn"
    FATAL = "fatal"


def report(level: Level, module: str, message: str) -> str:
    """Write ``[module] message`` and return the line written.

    Informational messages go to standard output, everything else to
    standard error.
    """
    line = f"[{module}] {message}"
    stream = sys.stdout if level is Level.INFO else sys.stderr
    print(line, file=stream)
    return line


def error(module: str, message: str) -> str:
    """Report a fatal error."""
    return report(Level.FATAL, module, message)


def warning(module: str, message: str) -> str:
    """Report a warning."""
    return report(Level.WARN, module, message)


def info(module: str, message: str) -> str:
    """Report an informational message."""
    return report(Level.INFO, module, message)