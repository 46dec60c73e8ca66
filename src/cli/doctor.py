"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from core.config import AppSettings, write_user_env_vars
from core.domain.response_format import ResponseFormat
from core.errors import RealmLookupError
from core.services.realm_lookup import get_realm_async

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()

_PROBE_DOMAIN = "example.com"


async def _check_endpoint(settings: AppSettings) -> tuple[bool, str]:
    try:
        realm = await get_realm_async(_PROBE_DOMAIN, ResponseFormat.JSON, settings=settings)
    except RealmLookupError as exc:
        return False, str(exc)
    return True, f"NameSpaceType={realm.get('NameSpaceType', '?')}"


@app.command()
def run() -> None:
    """Run baseline diagnostics against the GetUserRealm endpoint."""

    settings = AppSettings()

    table = Table(title="realm-osint Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("Endpoint", "OK", settings.endpoint_url)
    table.add_row("Default format", "OK", settings.default_format.value)
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")

    # Connectivity (best-effort)
    ok_http, detail_http = asyncio.run(_check_endpoint(settings))
    table.add_row("GetUserRealm", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not ok_http:
        raise typer.Exit(code=1)


@app.command(name="set-format")
def set_format(
    response_format: ResponseFormat = typer.Argument(..., case_sensitive=False, help="xml or json"),
) -> None:
    """Store the default response format in the user config .env."""

    env_path = write_user_env_vars({"REALM_OSINT_DEFAULT_FORMAT": response_format.value})
    _console.print(f"[green]Saved default format to:[/green] {env_path}")
