"""Doctor command for configuration diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from core.config import AppSettings
from core.services.ipv4_validator import validate

app = typer.Typer(no_args_is_help=True, help="Configuration diagnostics and self-checks.")

_console = Console()

_SELF_CHECKS: tuple[tuple[str, bool], ...] = (
    ("192.168.0.1", True),
    ("0.0.0.0", True),
    ("255.255.255.255", True),
    ("256.1.1.1", False),
    ("1.2.3", False),
    ("1..1.1", False),
    ("1.-1.1.1", False),
)


def _self_check() -> tuple[bool, str]:
    failures = [literal for literal, expected in _SELF_CHECKS if validate(literal) is not expected]
    if failures:
        return False, "unexpected verdict for: " + ", ".join(failures)
    return True, f"{len(_SELF_CHECKS)} samples OK"


@app.command()
def run() -> None:
    """Show the effective configuration and run validator self-checks."""

    settings = AppSettings()

    table = Table(title="dotquad doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    mode = "strict" if settings.strict_zero_padding else "lenient"
    table.add_row("Zero padding", "OK", f"{mode} (DOTQUAD_STRICT_ZERO_PADDING)")
    table.add_row("Token count", "OK", str(settings.token_count))
    table.add_row("Log level", "OK", settings.log_level)

    ok, detail = _self_check()
    table.add_row("Validator", "OK" if ok else "FAIL", detail)

    _console.print(table)

    if not ok:
        raise typer.Exit(code=1)
