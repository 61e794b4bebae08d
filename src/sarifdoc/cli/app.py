# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Typer CLI application root."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer

from sarifdoc.cli.exit_codes import ExitCode, error_to_exit_code
from sarifdoc.core.exceptions import SarifError
from sarifdoc.models.log import Log

app = typer.Typer(
    name="sarifdoc",
    help="Validate and inspect SARIF 2.1.0 documents",
    no_args_is_help=True,
)


@app.callback()
def main() -> None:
    """Configure logging from the environment before any command runs."""
    from sarifdoc.core.config import get_settings
    from sarifdoc.core.logging import setup_logging

    settings = get_settings()
    setup_logging(level=settings.log_level, fmt=settings.log_format)


def _load(path: Path) -> Log:
    from sarifdoc.codec.decoder import decode_file

    try:
        return decode_file(path)
    except SarifError as exc:
        typer.echo(f"{path}: {exc}", err=True)
        raise typer.Exit(int(error_to_exit_code(exc))) from exc


@app.command()
def validate(
    files: Annotated[
        list[Path], typer.Argument(help="SARIF files to validate")
    ],
) -> None:
    """Check that each file is a readable SARIF 2.1.0 document."""
    from sarifdoc.codec.decoder import decode_file

    worst = ExitCode.OK
    for path in files:
        try:
            log = decode_file(path)
        except SarifError as exc:
            typer.echo(f"FAIL {path}: {exc}", err=True)
            worst = max(worst, error_to_exit_code(exc))
            continue
        result_count = sum(len(run.results) for run in log.runs)
        typer.echo(f"OK   {path} ({len(log.runs)} run(s), {result_count} result(s))")

    if worst != ExitCode.OK:
        raise typer.Exit(int(worst))


@app.command()
def show(
    file: Annotated[Path, typer.Argument(help="SARIF file to display")],
) -> None:
    """List the results in a SARIF file with their resolved rules."""
    from sarifdoc.cli.formatters.console import print_results

    print_results(_load(file))


@app.command()
def rules(
    file: Annotated[Path, typer.Argument(help="SARIF file to display")],
) -> None:
    """List the rules declared by every tool driver in a SARIF file."""
    from sarifdoc.cli.formatters.console import print_rules

    print_rules(_load(file))


@app.command()
def normalize(
    file: Annotated[Path, typer.Argument(help="SARIF file to normalize")],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file path"),
    ] = None,
) -> None:
    """Re-encode a SARIF file with defaults applied and empty fields dropped."""
    from sarifdoc.codec.encoder import encode, encode_file
    from sarifdoc.core.config import get_settings

    log = _load(file)
    indent = get_settings().encode_indent

    try:
        if output:
            encode_file(log, output, indent=indent)
            typer.echo(f"Output written to {output}")
        else:
            sys.stdout.write(encode(log, indent=indent).decode("utf-8") + "\n")
    except SarifError as exc:
        typer.echo(f"{output or '<stdout>'}: {exc}", err=True)
        raise typer.Exit(int(error_to_exit_code(exc))) from exc
