#!/usr/bin/env python3
"""
console.py
----------
Colored terminal output for refcheck.

The reporter accepts (message, severity) pairs. Severity only selects how a
message is presented:

    error    red, written to stderr
    success  green
    notice   yellow
    verbose  prefixed with "[verbose]: "
    plain    unchanged

Usage:
    from refcheck.core.console import ConsoleReporter

    reporter = ConsoleReporter()
    reporter.emit("✓ All checks passed.", "success")
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Callable, Optional

# --- Third party imports ---
import click


SEVERITY_COLORS = {
    "error": "red",
    "success": "green",
    "notice": "yellow",
}


class ConsoleReporter:
    """Writes messages to the terminal, styled by severity."""

    def __init__(self, color: Optional[bool] = None) -> None:
        """
        Args:
            color: True/False to force styling on or off; None lets Click
                strip styles when output is not a terminal
        """
        self.color = color

    def emit(self, message: str, severity: str = "plain") -> None:
        """
        Print a message.

        Args:
            message: Text to print
            severity: error, success, notice, verbose or plain; unknown values print as plain text
        """
        if severity == "verbose":
            click.echo(f"[verbose]: {message}", color=self.color)
            return

        fg = SEVERITY_COLORS.get(severity)
        if fg:
            message = click.style(message, fg=fg)
        click.echo(message, err=severity == "error", color=self.color)

    def verbose_sink(self) -> Callable[[str], None]:
        """Return a diagnostic sink that prints verbose messages."""
        return lambda message: self.emit(message, "verbose")
