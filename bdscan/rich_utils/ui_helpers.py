import os
import sys
from typing import Optional

from rich.console import Console

from bdscan.utils.exceptions import ScanWrapperError

def is_ci_environment():
    return (
        os.getenv('CI') is not None or
        os.getenv('GITHUB_ACTIONS') is not None or
        not sys.stderr.isatty()
    )

def get_console() -> Console:
    """Detect environment and create a console bound to stderr."""
    if is_ci_environment():
        # CI/pipeline run - no colors, no interactive elements
        return Console(stderr=True, force_terminal=False, no_color=True)
    return Console(stderr=True)


class Reporter:
    """Prints the wrapper's INFO/WARN/ERROR lines to the diagnostic stream."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or get_console()

    def _emit(self, prefix: str, message: str, style: str) -> None:
        self.console.print(
            f"{prefix}: {message}",
            style=style,
            markup=False,
            highlight=False,
            soft_wrap=True,
        )

    def info(self, message: str) -> None:
        self._emit("INFO", message, "blue")

    def warn(self, message: str) -> None:
        self._emit("WARN", message, "yellow")

    def error(self, message: str, hint: Optional[str] = None) -> None:
        self._emit("ERROR", message, "bold red")
        if hint:
            self.console.print(f"   {hint}", style="dim", markup=False, highlight=False, soft_wrap=True)

    def report_error(self, error: ScanWrapperError) -> None:
        """Print a wrapper error with its cause and suggested action."""
        message = error.message
        if error.original_exception is not None:
            message = f"{message} ({error.original_exception})"
        self.error(message, hint=error.suggested_action)
