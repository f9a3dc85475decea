"""Doctor command for environment diagnostics."""

from __future__ import annotations

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.pipelines_client import PipelineClient
from cli.context import current_settings, state
from core.config import AppSettings, write_user_env_vars
from core.errors import ATCError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_api(settings: AppSettings) -> tuple[bool, str]:
    try:
        with PipelineClient(settings=settings, base_url=state.url) as client:
            pipelines = client.list_pipelines()
        return True, f"{len(pipelines)} pipelines visible"
    except (ATCError, httpx.HTTPError) as exc:
        return False, str(exc)


@app.command()
def run() -> None:
    """Show the effective configuration and check the pipelines API."""

    settings = current_settings()

    table = Table(title="atc-pipelines Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("ATC URL", "OK", state.url or settings.atc_url)
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    if settings.insecure_skip_verify:
        table.add_row("TLS", "WARN", "certificate verification disabled")
    else:
        table.add_row("TLS", "OK", "certificate verification enabled")

    ok_api, detail_api = _check_api(settings)
    table.add_row("Pipelines API", "OK" if ok_api else "FAIL", detail_api)

    _console.print(table)

    if not ok_api:
        raise typer.Exit(code=2)


@app.command(name="setup")
def setup() -> None:
    """Interactive setup (stores the ATC URL in the user config .env)."""

    current = current_settings()
    atc_url = typer.prompt("ATC URL", default=current.atc_url, show_default=True).strip()
    insecure = typer.confirm("Skip TLS verification?", default=current.insecure_skip_verify)

    if not atc_url.startswith(("http://", "https://")):
        raise typer.BadParameter("ATC URL must start with http:// or https://")

    env_path = write_user_env_vars(
        {
            "ATC_PIPELINES_ATC_URL": atc_url.rstrip("/"),
            "ATC_PIPELINES_INSECURE_SKIP_VERIFY": "true" if insecure else "false",
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
