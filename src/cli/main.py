"""CLI principal (Typer).

Comandos:
- `lookup DOMAIN`: consulta GetUserRealm y muestra el realm.
- `doctor ...`: diagnósticos y configuración.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from adapters.json_exporter import export_realm_json
from adapters.logging_diagnostics import configure_logging
from cli import doctor
from cli.ui_components import build_realm_table, print_banner
from core.config import AppSettings
from core.domain.response_format import ResponseFormat
from core.errors import RealmLookupError
from core.services.realm_lookup import lookup_realm

app = typer.Typer(no_args_is_help=True, help="Microsoft GetUserRealm OSINT lookups.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


@app.command()
def lookup(
    domain: str = typer.Argument(..., help="Domain to query (e.g. example.com)."),
    response_format: Optional[ResponseFormat] = typer.Option(
        None,
        "--format",
        "-f",
        case_sensitive=False,
        help="Response format requested from the endpoint (default from config).",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the raw mapping as JSON."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the result to a JSON file."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
) -> None:
    """Query how DOMAIN handles authentication (federated, managed, unknown)."""

    settings = AppSettings()
    configure_logging("DEBUG" if verbose else settings.log_level)

    try:
        realm = lookup_realm(domain, response_format, settings=settings)
    except RealmLookupError as exc:
        _err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    mapping = realm.to_mapping()
    if output is not None:
        path = export_realm_json(domain=domain, realm=mapping, output_path=output)
        _err_console.print(f"[green]Saved:[/green] {path}")

    if as_json:
        typer.echo(json.dumps(mapping, ensure_ascii=False, indent=2))
        return

    print_banner(_console)
    _console.print(build_realm_table(domain, realm))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
