"""Root Typer application, mounts sub-commands."""

from __future__ import annotations

import typer

from status_check.cli.logs import configure_logging
from status_check.cli.options import VerboseOption

app = typer.Typer(
    name="statuscheck",
    help="Status Check - Report diagnostics to the console and as a GitHub check run.",
    no_args_is_help=True,
)


@app.callback()
def configure(verbose: bool = VerboseOption) -> None:
    configure_logging(verbose)


def _register_commands() -> None:
    from status_check.cli.commands.report_cmd import report
    from status_check.cli.commands.validate_cmd import validate

    # Plain commands rather than sub-apps so options may follow the file argument.
    app.command(name="report", help="Report diagnostics and publish a check run")(report)
    app.command(name="validate", help="Check a diagnostics file without reporting it")(validate)


_register_commands()


def main() -> None:
    app()
