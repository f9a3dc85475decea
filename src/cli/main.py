"""CLI principal (Typer).

Por qué una capa fina:
- Toda la semántica HTTP vive en `adapters.pipelines_client`; aquí solo se
  traduce el resultado a salida (Rich/JSON) y a códigos de salida.

Códigos de salida:
- 0: éxito.
- 1: el pipeline no existe (404).
- 2: fallo (status inesperado, error de red, respuesta ilegible).
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Optional, TypeVar

import httpx
import typer
from rich.console import Console
from rich.markup import escape

from adapters.json_exporter import export_pipelines_json, pipelines_to_json
from adapters.pipelines_client import PipelineClient
from cli import doctor
from cli.context import current_settings, load_settings, state
from cli.ui_components import build_pipeline_panel, build_pipelines_table
from core.errors import ATCError
from core.logging_config import configure_logging

logger = logging.getLogger(__name__)

app = typer.Typer(no_args_is_help=True, help="Manage pipelines on a Concourse ATC.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)

T = TypeVar("T")


@app.callback()
def main(
    url: Optional[str] = typer.Option(
        None,
        "--url",
        "-u",
        help="ATC base URL (overrides ATC_PIPELINES_ATC_URL).",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Global options shared by every command."""

    settings = load_settings()
    configure_logging("DEBUG" if verbose else settings.log_level)
    state.url = url
    state.settings = settings


@contextmanager
def _client() -> Iterator[PipelineClient]:
    client = PipelineClient(settings=current_settings(), base_url=state.url)
    try:
        yield client
    finally:
        client.close()


def _call(operation: Callable[[PipelineClient], T]) -> T:
    """Ejecuta una operación y traduce fallos a exit code 2."""

    try:
        with _client() as client:
            return operation(client)
    except (ATCError, httpx.HTTPError) as exc:
        logger.debug("operation failed", exc_info=exc)
        _err_console.print(f"[red]error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc


def _not_found(name: str) -> typer.Exit:
    _err_console.print(f"[yellow]pipeline '{name}' not found[/yellow]")
    return typer.Exit(code=1)


@app.command()
def pause(name: str = typer.Argument(..., help="Pipeline name.")) -> None:
    """Pause a pipeline."""

    if not _call(lambda client: client.pause_pipeline(name)):
        raise _not_found(name)
    _console.print(f"paused '{name}'")


@app.command()
def unpause(name: str = typer.Argument(..., help="Pipeline name.")) -> None:
    """Unpause a pipeline."""

    if not _call(lambda client: client.unpause_pipeline(name)):
        raise _not_found(name)
    _console.print(f"unpaused '{name}'")


@app.command()
def get(
    name: str = typer.Argument(..., help="Pipeline name."),
    as_json: bool = typer.Option(False, "--json", help="Print the pipeline as JSON."),
) -> None:
    """Show a single pipeline."""

    pipeline = _call(lambda client: client.get_pipeline(name))
    if pipeline is None:
        raise _not_found(name)
    if as_json:
        typer.echo(json.dumps(pipeline.model_dump(mode="json"), indent=2))
        return
    _console.print(build_pipeline_panel(pipeline))


@app.command(name="list")
def list_(
    as_json: bool = typer.Option(False, "--json", help="Print pipelines as JSON."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Also write pipelines to a JSON file."),
) -> None:
    """List all pipelines in server order."""

    pipelines = _call(lambda client: client.list_pipelines())
    if output is not None:
        export_pipelines_json(pipelines=pipelines, output_path=output)
        _err_console.print(f"[green]Saved {len(pipelines)} pipelines to:[/green] {output}")
    if as_json:
        typer.echo(pipelines_to_json(pipelines), nl=False)
        return
    _console.print(build_pipelines_table(pipelines))


@app.command()
def delete(
    name: str = typer.Argument(..., help="Pipeline name."),
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation."),
) -> None:
    """Delete a pipeline."""

    if not yes:
        typer.confirm(f"Delete pipeline '{name}'?", abort=True)
    if not _call(lambda client: client.delete_pipeline(name)):
        raise _not_found(name)
    _console.print(f"deleted '{name}'")


@app.command()
def rename(
    old_name: str = typer.Argument(..., help="Current pipeline name."),
    new_name: str = typer.Argument(..., help="New pipeline name."),
) -> None:
    """Rename a pipeline."""

    if not _call(lambda client: client.rename_pipeline(old_name, new_name)):
        raise _not_found(old_name)
    _console.print(f"renamed '{old_name}' to '{new_name}'")


def run() -> None:
    app()
