"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from cli.ui_components import print_banner
from core.config import AppSettings
from core.errors import InvalidUrlError
from core.services.url_validator import validate_url

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_target_url(url: str) -> tuple[bool, str]:
    try:
        return True, validate_url(url)
    except InvalidUrlError as exc:
        return False, exc.message


async def _check_http(
    url: str,
    settings: AppSettings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> tuple[bool, str]:
    """Best-effort GET against the target; any failure is a FAIL row, not a crash."""

    try:
        async with build_async_client(settings, transport=transport) as client:
            response = await client.get(url)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        return False, str(exc) or type(exc).__name__
    return response.is_success, f"HTTP {response.status_code}"


def build_doctor_table(
    settings: AppSettings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Table:
    table = Table(title="API-Fetcher Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    ok_url, detail_url = _check_target_url(settings.target_url)
    table.add_row("Target URL", "OK" if ok_url else "FAIL", detail_url)
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("Log level", "OK", settings.log_level)

    # Connectivity (best-effort)
    if ok_url:
        ok_http, detail_http = asyncio.run(_check_http(detail_url, settings, transport))
        table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)
    else:
        table.add_row("HTTP connectivity", "SKIPPED", "Target URL is invalid")
    return table


@app.command()
def run() -> None:
    """Run baseline diagnostics for the configured endpoint."""

    settings = AppSettings()
    print_banner(_console)
    _console.print(build_doctor_table(settings))
