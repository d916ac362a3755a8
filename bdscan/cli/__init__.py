"""
CLI module for bdscan.

Provides the command-line entry point. The raw command line is checked left
to right before Typer parses it, so the first bad token is the one reported.
Any usage error Typer still raises is reported like every other wrapper error.
"""
import sys
from typing import List, Optional

import click
import typer

from bdscan.cli.app import app as _app
from bdscan.core.options import check_command_line, failure_exit_status, wants_failure_status
from bdscan.rich_utils.ui_helpers import Reporter
from bdscan.utils.exceptions import MissingFlagValue, ScanWrapperError

# Typer releases that bundle their own copy of click raise that copy's
# exceptions; BadParameter subclasses UsageError in both.
USAGE_ERRORS = tuple({click.UsageError, typer.BadParameter.__mro__[1]})


def usage_error_to_wrapper_error(error: Exception) -> ScanWrapperError:
    option_name = getattr(error, "option_name", None)
    if option_name:
        return MissingFlagValue(option_name)
    return ScanWrapperError(error.format_message())


# Export app function for pyproject.toml entry point
def app(argv: Optional[List[str]] = None):
    """Entry point function for pyproject.toml scripts."""
    argv = sys.argv[1:] if argv is None else list(argv)
    try:
        check_command_line(argv)
        exit_code = _app(args=argv, prog_name="bdscan", standalone_mode=False)
    except ScanWrapperError as e:
        Reporter().report_error(e)
        exit_code = failure_exit_status(wants_failure_status(argv))
    except USAGE_ERRORS as e:
        Reporter().report_error(usage_error_to_wrapper_error(e))
        exit_code = failure_exit_status(wants_failure_status(argv))
    sys.exit(exit_code or 0)

__all__ = ['app']
