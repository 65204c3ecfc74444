"""CLI principal (Typer).

Por qué la CLI es fina:
- Solo traduce flags a `AppSettings`, configura logging y conecta la salida
  Rich con el pipeline mediante `PipelineHooks`.
- Sin argumentos hace exactamente una consulta al endpoint configurado.

Exit code:
- Por defecto termina con 0 aunque el pipeline haya reportado un error (la
  línea `Error: ...` es la única señal). `--strict` lo cambia a 1.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import typer
from rich.console import Console

from adapters.http_client import HttpJsonFetcher
from cli import doctor
from cli.ui_components import present_data, print_error
from core.config import AppSettings
from core.services import fetch_pipeline

app = typer.Typer(
    add_completion=False,
    help="Fetch a JSON endpoint and print a summary of its records.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def configure_logging(settings: AppSettings, *, verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level)
    logging.basicConfig(level=level, format="%(message)s", force=True)


def _build_settings(url: str | None, timeout: float | None) -> AppSettings:
    overrides: dict[str, object] = {}
    if url is not None:
        overrides["target_url"] = url
    if timeout is not None:
        overrides["http_timeout_seconds"] = timeout
    return AppSettings(**overrides)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    url: Optional[str] = typer.Option(None, "--url", help="Override the configured target URL."),
    timeout: Optional[float] = typer.Option(
        None, "--timeout", min=0.001, help="Override the request timeout (seconds)."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    strict: bool = typer.Option(False, "--strict", help="Exit with code 1 when the fetch fails."),
) -> None:
    """Validate the target URL, fetch it once and print its records."""

    if ctx.invoked_subcommand is not None:
        return

    settings = _build_settings(url, timeout)
    configure_logging(settings, verbose=verbose)

    hooks = fetch_pipeline.PipelineHooks(
        present=lambda data: present_data(data, _console),
        error=lambda message: print_error(_err_console, message),
    )
    ok = asyncio.run(
        fetch_pipeline.run(
            settings.target_url,
            fetcher=HttpJsonFetcher(settings),
            hooks=hooks,
        )
    )
    if strict and not ok:
        raise typer.Exit(code=1)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
