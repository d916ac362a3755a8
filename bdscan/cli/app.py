"""
Main CLI application for bdscan.

Defines the Typer application. Unknown options are collected into
``ctx.args`` instead of being rejected by click, so they can be reported with
the wrapper's own error format and exit status policy.
"""
import typer

from bdscan.cli.commands.scan import scan_command


# Initialize Typer app
app = typer.Typer(
    help="bdscan - Black Duck Detect scan wrapper",
    add_completion=False,
)

# Single command: invoked directly as `bdscan --projectType ...`
app.command(
    "scan",
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)(scan_command)
