"""CLI principal (Typer).

Por qué Typer:
- Flags tipados y ayuda autogenerada sin boilerplate.
- `CliRunner` permite testear el flujo completo sin terminal.

Sin subcomando, la CLI actúa como driver: lee tokens de stdin (o `--input`),
imprime el primero tal cual y los siguientes con su veredicto.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.json_exporter import render_verdicts_json
from adapters.token_reader import InsufficientInputError, read_tokens
from cli import doctor
from cli.ui_components import build_verdicts_table
from core.config import AppSettings
from core.logging_setup import configure_logging
from core.services.address_pipeline import build_addresses, render_lines, validate_all

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Validate IPv4 dotted-quad literals.",
    add_completion=False,
)
app.add_typer(doctor.app, name="doctor")

_console = Console()


def _load_settings() -> AppSettings:
    try:
        return AppSettings()
    except ValidationError as exc:
        typer.echo(f"Error: invalid configuration\n{exc}", err=True)
        raise typer.Exit(code=2)


def _resolve_strict(flag: bool | None, settings: AppSettings) -> bool:
    return settings.strict_zero_padding if flag is None else flag


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    input_path: Optional[Path] = typer.Option(
        None,
        "--input",
        "-i",
        exists=True,
        dir_okay=False,
        readable=True,
        help="Read tokens from FILE instead of stdin.",
    ),
    strict: Optional[bool] = typer.Option(
        None,
        "--strict/--lenient",
        help="Reject zero-padded segments such as '01'. Default: lenient.",
    ),
    as_json: bool = typer.Option(False, "--json", help="Write verdicts as a JSON array."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr."),
) -> None:
    """Read addresses and print the first as typed, the rest with a verdict."""

    settings = _load_settings()
    configure_logging(logging.DEBUG if verbose else settings.log_level)
    ctx.obj = settings

    if ctx.invoked_subcommand is not None:
        if input_path is not None or strict is not None or as_json:
            raise typer.BadParameter(
                "--input, --strict/--lenient and --json apply only when no command is given; "
                f"pass them after '{ctx.invoked_subcommand}' instead."
            )
        return

    try:
        if input_path is not None:
            with input_path.open(encoding="utf-8") as stream:
                tokens = read_tokens(stream, settings.token_count)
        else:
            tokens = read_tokens(sys.stdin, settings.token_count)
    except InsufficientInputError as exc:
        logger.debug("Input exhausted after %d token(s)", exc.received)
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)

    addresses = build_addresses(tokens, strict=_resolve_strict(strict, settings))

    if as_json:
        typer.echo(render_verdicts_json(addresses), nl=False)
        return
    for line in render_lines(addresses):
        typer.echo(line)


@app.command()
def check(
    ctx: typer.Context,
    literals: List[str] = typer.Argument(..., help="Literals to validate."),
    strict: Optional[bool] = typer.Option(
        None,
        "--strict/--lenient",
        help="Reject zero-padded segments such as '01'. Default: lenient.",
    ),
    as_json: bool = typer.Option(False, "--json", help="Write verdicts as a JSON array."),
) -> None:
    """Validate every LITERAL and show a verdict table."""

    settings: AppSettings = ctx.obj
    addresses = validate_all(literals, strict=_resolve_strict(strict, settings))

    if as_json:
        typer.echo(render_verdicts_json(addresses), nl=False)
        return
    _console.print(build_verdicts_table(addresses))


def run() -> None:
    # Workaround for UnicodeEncodeError on Windows terminals/CI (cp1252 vs utf-8).
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")
    app()
